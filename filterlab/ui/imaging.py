"""Conversion between pipeline bitmaps and Qt images."""

from PySide6.QtGui import QImage

from ..core import Bitmap


def bitmap_to_qimage(bitmap: Bitmap) -> QImage:
    """Wrap a bitmap as an RGBA8888 QImage that owns its own pixel data."""
    data = bitmap.tobytes()
    image = QImage(data, bitmap.width, bitmap.height, bitmap.width * 4, QImage.Format.Format_RGBA8888)
    # Detach from the Python buffer before it goes away
    return image.copy()
