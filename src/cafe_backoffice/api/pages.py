from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter(include_in_schema=False)


@router.get("/")
async def customer_site():
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@router.get("/system")
async def management_panel():
    return FileResponse(STATIC_DIR / "system.html", media_type="text/html")


@router.get("/menu")
async def public_menu():
    return FileResponse(STATIC_DIR / "menu.html", media_type="text/html")
