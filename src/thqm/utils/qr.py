"""QR code rendering for the page URL.

All images use the lowest error correction level and are scaled to
``QRCODE_SIZE`` pixels, which keeps the code readable from a phone held
at arm's length.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import qrcode
from PIL import Image
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage
from qrcode.image.svg import SvgPathImage

logger = logging.getLogger(__name__)

QRCODE_SIZE = 256
QRCODE_BORDER = 4


class QrCodeError(Exception):
    """Raised when a QR code cannot be generated or saved."""


def _build(data: str) -> qrcode.QRCode:
    if not data:
        raise QrCodeError("Cannot encode empty data in a QR code")
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        border=QRCODE_BORDER,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        raise QrCodeError(f"Failed to encode QR code: {e}") from e
    return qr


def render_qr_svg(data: str) -> str:
    """Return an SVG document encoding ``data``."""
    qr = _build(data)
    image = qr.make_image(image_factory=SvgPathImage)
    # Pixel size on the root element; the viewBox keeps the module scale.
    root = image.get_image()
    root.set("width", str(QRCODE_SIZE))
    root.set("height", str(QRCODE_SIZE))
    return image.to_string(encoding="unicode")


def save_qr_png(data: str, dest: Path | str) -> None:
    """Write a ``QRCODE_SIZE`` square PNG encoding ``data`` to ``dest``."""
    qr = _build(data)
    image = qr.make_image(image_factory=PilImage, fill_color="black", back_color="white").convert("RGB")
    image = image.resize((QRCODE_SIZE, QRCODE_SIZE), Image.Resampling.NEAREST)
    try:
        image.save(Path(dest), format="PNG")
    except OSError as e:
        raise QrCodeError(f"Failed to save QR code to {dest}: {e}") from e
    logger.info("Saved QR code to %s", dest)


def render_qr_text(data: str) -> str:
    """Return the QR code drawn with block characters for a terminal."""
    qr = _build(data)
    buffer = io.StringIO()
    qr.print_ascii(out=buffer, invert=True)
    return buffer.getvalue()
