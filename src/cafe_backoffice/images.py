"""Картинки хранятся прямо в записи как data URI: data:<media type>;base64,<данные>."""

import base64
import binascii
import re

_DATA_URI_RE = re.compile(r"^data:(?P<media_type>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)


def build_data_uri(content: bytes, media_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


def parse_data_uri(uri: str) -> tuple[str, bytes]:
    """
    Возвращает (media_type, bytes).
    ValueError, если строка не base64 data URI.
    """
    match = _DATA_URI_RE.match(uri or "")
    if not match:
        raise ValueError("Image must be a base64 data URI")
    try:
        content = base64.b64decode(match.group("data"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image data: {e}") from None
    return match.group("media_type"), content


def base_media_type(content_type: str | None) -> str:
    """
    "image/png; name=a.png" -> "image/png": параметры заголовка в data URI не попадают.
    """
    return (content_type or "").split(";")[0].strip().lower()


def is_image_media_type(media_type: str | None) -> bool:
    return bool(media_type) and media_type.startswith("image/")
