import json
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.api.deps import get_actor, validate_payload
from cafe_backoffice.crud.activity_log import record_activity
from cafe_backoffice.crud.product import (
    create_product,
    delete_product,
    get_product_by_id,
    get_products,
    update_product,
)
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.images import base_media_type, build_data_uri, is_image_media_type, parse_data_uri
from cafe_backoffice.schemas.product import ProductCreate, ProductRead, ProductUpdate

router = APIRouter(prefix="/api/products", tags=["products"])


def _parse_json_field(name: str, raw: Optional[str]):
    """
    demand и scheduleDays приходят в форме строкой JSON.
    """
    if raw is None or raw == "":
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        raise HTTPException(status_code=400, detail=f"Field '{name}' must be valid JSON")


async def _read_image(image: Optional[UploadFile]) -> Optional[str]:
    """
    Файл из формы -> data URI. None, если файл не передан.
    """
    if image is None or not image.filename:
        return None
    media_type = base_media_type(image.content_type)
    if not is_image_media_type(media_type):
        raise HTTPException(status_code=400, detail=f"Unsupported image type: {image.content_type}")
    content = await image.read()
    if not content:
        raise HTTPException(status_code=400, detail="Image file is empty")
    return build_data_uri(content, media_type)


def _form_data(**fields) -> dict:
    # только переданные поля: для PUT это и есть частичное обновление
    return {key: value for key, value in fields.items() if value is not None}


@router.get("", response_model=List[ProductRead])
async def list_products(db: AsyncSession = Depends(get_async_session)):
    """
    Все товары по имени.
    """
    return await get_products(db)


@router.get("/category/{category}", response_model=List[ProductRead])
async def list_products_by_category(category: str, db: AsyncSession = Depends(get_async_session)):
    return await get_products(db, category=category)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int, db: AsyncSession = Depends(get_async_session)):
    product = await get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/{product_id}/image")
async def get_product_image(product_id: int, db: AsyncSession = Depends(get_async_session)):
    """
    Картинка товара в бинарном виде.
    """
    product = await get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    media_type, content = parse_data_uri(product.image)
    return Response(content=content, media_type=media_type)


@router.post("", response_model=ProductRead, status_code=201)
async def create_product_endpoint(
    name: str = Form(...),
    category: str = Form(...),
    unit: str = Form(...),
    price_per_unit: Optional[float] = Form(None, alias="pricePerUnit"),
    supplier: str = Form(...),
    alt_supplier: Optional[str] = Form(None, alias="altSupplier"),
    package_size: Optional[float] = Form(None, alias="packageSize"),
    demand: Optional[str] = Form(None),
    schedule_days: Optional[str] = Form(None, alias="scheduleDays"),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Создаёт товар из multipart-формы. Картинка обязательна.
    """
    image_uri = await _read_image(image)
    if image_uri is None:
        raise HTTPException(status_code=400, detail="Image file is required")

    product_in = validate_payload(ProductCreate, _form_data(
        name=name,
        category=category,
        unit=unit,
        price_per_unit=price_per_unit,
        supplier=supplier,
        alt_supplier=alt_supplier or None,
        package_size=package_size,
        demand=_parse_json_field("demand", demand),
        schedule_days=_parse_json_field("scheduleDays", schedule_days),
    ))
    product = await create_product(db, product_in, image_uri)
    await record_activity(db, "product_created", actor=actor, product_id=product.id, name=product.name)
    return product


@router.put("/{product_id}", response_model=ProductRead)
async def update_product_endpoint(
    product_id: int,
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    unit: Optional[str] = Form(None),
    price_per_unit: Optional[float] = Form(None, alias="pricePerUnit"),
    supplier: Optional[str] = Form(None),
    alt_supplier: Optional[str] = Form(None, alias="altSupplier"),
    package_size: Optional[float] = Form(None, alias="packageSize"),
    demand: Optional[str] = Form(None),
    schedule_days: Optional[str] = Form(None, alias="scheduleDays"),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Частичное обновление товара; новая картинка необязательна.
    """
    product_in = validate_payload(ProductUpdate, _form_data(
        name=name,
        category=category,
        unit=unit,
        price_per_unit=price_per_unit,
        supplier=supplier,
        alt_supplier=alt_supplier,
        package_size=package_size,
        demand=_parse_json_field("demand", demand),
        schedule_days=_parse_json_field("scheduleDays", schedule_days),
    ))
    image_uri = await _read_image(image)

    product = await update_product(db, product_id, product_in, image=image_uri)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    await record_activity(db, "product_updated", actor=actor, product_id=product_id)
    return product


@router.delete("/{product_id}", status_code=204)
async def remove_product(
    product_id: int,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Удаляет товар.
    """
    deleted = await delete_product(db, product_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    await record_activity(db, "product_deleted", actor=actor, product_id=product_id)
