"""Image loader backed by Pillow.

Pillow is an optional dependency (`pip install pyloaders[images]`). Without
it the constructor raises `ImportError`, which discovery reports as a
skipped plugin.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, BinaryIO

from pyloaders.libs.loader.base_loader import Loader


class ImageLoader(Loader):
    """Decode raster images into `PIL.Image.Image` objects."""

    EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp")
    DESCRIPTIONS = (
        "PNG image",
        "JPEG image",
        "JPEG image",
        "GIF image",
        "Bitmap image",
    )

    def __init__(self) -> None:
        try:
            self._image_module = import_module("PIL.Image")
        except Exception as error:  # noqa: BLE001 - normalize missing-dependency errors
            raise ImportError(
                "Pillow is not installed. Please install it with: pip install pillow"
            ) from error

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return self.EXTENSIONS

    @property
    def file_descriptions(self) -> tuple[str, ...]:
        return self.DESCRIPTIONS

    @property
    def data_type(self) -> type:
        return self._image_module.Image

    def load(self, name: str, stream: BinaryIO) -> Any:
        image = self._image_module.open(stream)
        # Pillow reads lazily; pull the pixels in before the stream is closed.
        image.load()
        return image
