"""Image frames of DICOM pixel data, native or encapsulated."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass, field
from typing import List, Type, TypeVar

from PIL import Image

__all__ = [
    "FrameTypeNotPresentError",
    "EncapsulatedFrame",
    "NativeFrame",
    "Frame",
]

_F = TypeVar("_F")


class FrameTypeNotPresentError(LookupError):
    """Raised when asking a frame for a representation it does not hold."""

    def __init__(self) -> None:
        super().__init__(
            "the frame type you requested is not present in this CommonFrame"
        )


def _as_kind(frame: object, kind: Type[_F]) -> _F:
    """Return ``frame`` if it is of ``kind``, else raise FrameTypeNotPresentError."""
    if isinstance(frame, kind):
        return frame
    raise FrameTypeNotPresentError()


@dataclass
class EncapsulatedFrame:
    """An encapsulated (JPEG encoded) image frame."""

    data: bytes = b""

    def is_encapsulated(self) -> bool:
        return True

    def get_encapsulated_frame(self) -> "EncapsulatedFrame":
        return _as_kind(self, EncapsulatedFrame)

    def get_native_frame(self) -> "NativeFrame":
        return _as_kind(self, NativeFrame)

    def get_image(self) -> Image.Image:
        """Decode the JPEG data into an image."""
        image = Image.open(io.BytesIO(bytes(self.data)), formats=["JPEG"])
        image.load()
        return image


@dataclass
class NativeFrame:
    """A native image frame: a list of pixels, each a list of sample values."""

    data: List[List[int]] = field(default_factory=list)
    rows: int = 0
    cols: int = 0
    bits_per_sample: int = field(default=0, compare=False)

    def is_encapsulated(self) -> bool:
        return False

    def get_encapsulated_frame(self) -> EncapsulatedFrame:
        return _as_kind(self, EncapsulatedFrame)

    def get_native_frame(self) -> "NativeFrame":
        return _as_kind(self, NativeFrame)

    def get_image(self) -> Image.Image:
        """Render the first sample of each pixel as a 16-bit grayscale image.

        Values are not rescaled; pixels beyond rows * cols are ignored.
        """
        if self.data and self.cols <= 0:
            raise ValueError("frame has pixel data but no columns")
        width, height = max(self.cols, 0), max(self.rows, 0)
        buffer = bytearray(width * height * 2)
        for index, pixel in enumerate(self.data):
            y, x = divmod(index, self.cols)
            if y >= height:
                break
            struct.pack_into("<H", buffer, (y * width + x) * 2, pixel[0] & 0xFFFF)
        return Image.frombytes("I;16", (width, height), bytes(buffer))


@dataclass
class Frame:
    """A single frame holding either native or encapsulated data."""

    encapsulated: bool = False
    encapsulated_data: EncapsulatedFrame = field(default_factory=EncapsulatedFrame)
    native_data: NativeFrame = field(default_factory=NativeFrame)

    @property
    def _inner(self):
        return self.encapsulated_data if self.encapsulated else self.native_data

    def is_encapsulated(self) -> bool:
        return self.encapsulated

    def get_encapsulated_frame(self) -> EncapsulatedFrame:
        return self._inner.get_encapsulated_frame()

    def get_native_frame(self) -> NativeFrame:
        return self._inner.get_native_frame()

    def get_image(self) -> Image.Image:
        return self._inner.get_image()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        if self.encapsulated != other.encapsulated:
            return False
        if self.encapsulated:
            return self.encapsulated_data == other.encapsulated_data
        return self.native_data == other.native_data