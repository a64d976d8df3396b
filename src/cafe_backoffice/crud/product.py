import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.models import Product
from cafe_backoffice.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"alt_supplier"}


async def get_products(db: AsyncSession, category: Optional[str] = None) -> List[Product]:
    """
    Список товаров по имени, опционально только одной категории.
    """
    stmt = select(Product).order_by(Product.name, Product.id)
    if category:
        stmt = stmt.where(Product.category == category)
    result = await db.execute(stmt)
    return result.scalars().all()


async def get_product_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
    return await db.get(Product, product_id)


async def create_product(db: AsyncSession, product_in: ProductCreate, image: str) -> Product:
    """
    Создаёт товар. image: уже собранный data URI.
    """
    data = product_in.model_dump(mode="json")
    product = Product(**data, image=image)
    db.add(product)
    await db.commit()
    await db.refresh(product)
    logger.info("Product created: id=%s name=%s", product.id, product.name)
    return product


async def update_product(
    db: AsyncSession,
    product_id: int,
    product_in: ProductUpdate,
    image: Optional[str] = None,
) -> Optional[Product]:
    """
    Частичное обновление; image заменяет картинку, если передана.
    None, если товара нет.
    """
    product = await db.get(Product, product_id)
    if not product:
        return None

    update_data = product_in.model_dump(mode="json", exclude_unset=True)
    for key, value in update_data.items():
        # null допустим только для необязательных полей
        if value is None and key not in NULLABLE_FIELDS:
            continue
        setattr(product, key, value)
    if image is not None:
        product.image = image

    await db.commit()
    await db.refresh(product)
    return product


async def delete_product(db: AsyncSession, product_id: int) -> bool:
    """
    Удаляет товар.
    """
    product = await db.get(Product, product_id)
    if not product:
        return False
    await db.delete(product)
    await db.commit()
    logger.info("Product deleted: id=%s", product_id)
    return True
