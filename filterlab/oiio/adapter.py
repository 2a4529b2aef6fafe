"""
OpenImageIO adapter for reading and writing bitmaps.

Normalizes whatever the file holds (gray, gray+alpha, RGB, RGBA, extra
channels) into the RGBA uint8 layout the pipeline works on.
"""

from pathlib import Path
from typing import List, Union

import numpy as np
import OpenImageIO as oiio

from ..core.types import Bitmap
from ..core.validation import OPAQUE_FORMATS
from ..utils.logging import logger

PathLike = Union[str, Path]

# Used when the OIIO build does not report its extension list
DEFAULT_EXTENSIONS = ("png", "jpg", "jpeg", "tif", "tiff", "bmp", "webp", "exr")


class OiioAdapter:
    """Thin wrapper for robust OIIO bindings."""

    @staticmethod
    def load_bitmap(filepath: PathLike) -> Bitmap:
        """
        Decode the first subimage of a file into an RGBA bitmap.

        Raises:
            RuntimeError: the file cannot be opened or decoded
        """
        path = str(filepath)
        # Keep straight alpha; OIIO premultiplies on read by default
        config = oiio.ImageSpec()
        config.attribute("oiio:UnassociatedAlpha", 1)
        inp = oiio.ImageInput.open(path, config)
        if not inp:
            raise RuntimeError(f"Cannot open {path}: {oiio.geterror()}")

        try:
            spec = inp.spec()
            pixels = inp.read_image(oiio.UINT8)
            if pixels is None:
                raise RuntimeError(f"Cannot read {path}: {inp.geterror()}")
        finally:
            inp.close()

        pixels = np.asarray(pixels, dtype=np.uint8)
        if pixels.ndim == 2:
            pixels = pixels.reshape(spec.height, spec.width, spec.nchannels)

        logger.info("Loaded %s (%dx%d, %d channels)", path, spec.width, spec.height, spec.nchannels)
        return Bitmap(OiioAdapter.to_rgba(pixels))

    @staticmethod
    def to_rgba(pixels: np.ndarray) -> np.ndarray:
        """Expand or trim a (height, width, channels) array to RGBA."""
        height, width, nchannels = pixels.shape
        rgba = np.empty((height, width, 4), dtype=np.uint8)

        if nchannels == 1:
            rgba[..., :3] = pixels[..., :1]
            rgba[..., 3] = 255
        elif nchannels == 2:
            rgba[..., :3] = pixels[..., :1]
            rgba[..., 3] = pixels[..., 1]
        elif nchannels == 3:
            rgba[..., :3] = pixels
            rgba[..., 3] = 255
        else:
            rgba[...] = pixels[..., :4]

        return rgba

    @staticmethod
    def write_bitmap(bitmap: Bitmap, filepath: PathLike) -> None:
        """
        Encode a bitmap to a file; the format follows the file extension.

        Raises:
            RuntimeError: no writer for the format or the write failed
        """
        path = str(filepath)
        extension = Path(path).suffix.lower().lstrip(".")

        pixels = bitmap.pixels
        if extension in OPAQUE_FORMATS:
            pixels = pixels[..., :3]
        pixels = np.ascontiguousarray(pixels)

        out = oiio.ImageOutput.create(path)
        if not out:
            raise RuntimeError(f"No writer for {path}: {oiio.geterror()}")

        spec = oiio.ImageSpec(bitmap.width, bitmap.height, pixels.shape[2], oiio.UINT8)
        spec.attribute("oiio:UnassociatedAlpha", 1)
        try:
            if not out.open(path, spec):
                raise RuntimeError(f"Cannot open {path} for writing: {out.geterror()}")
            if not out.write_image(pixels):
                raise RuntimeError(f"write_image failed for {path}: {out.geterror()}")
        finally:
            out.close()

        logger.info("Wrote %s (%dx%d)", path, bitmap.width, bitmap.height)

    @staticmethod
    def supported_extensions() -> List[str]:
        """File extensions OIIO can handle, lower-case, without dots."""
        # Format: "bmp:bmp;jpeg:jpg,jpe,jpeg;..."
        extension_list = oiio.get_string_attribute("extension_list")
        extensions = []
        for entry in extension_list.split(";"):
            if ":" not in entry:
                continue
            _, exts = entry.split(":", 1)
            for ext in exts.split(","):
                ext = ext.strip().lower()
                if ext and ext not in extensions:
                    extensions.append(ext)
        return extensions or list(DEFAULT_EXTENSIONS)

    @staticmethod
    def is_image_file(filepath: PathLike) -> bool:
        """Check whether a path has an image extension OIIO understands."""
        extension = Path(filepath).suffix.lower().lstrip(".")
        return bool(extension) and extension in OiioAdapter.supported_extensions()

    @staticmethod
    def file_dialog_filter() -> str:
        """Qt file dialog filter string for the supported formats."""
        patterns = " ".join(f"*.{ext}" for ext in OiioAdapter.supported_extensions())
        return f"Images ({patterns});;All Files (*)"

    @staticmethod
    def get_oiio_version() -> str:
        """Return OIIO version string."""
        return str(getattr(oiio, "__version__", None) or getattr(oiio, "VERSION_STRING", "unknown"))
