# packages/bruhcodec/src/bruhcodec/bitstream/header.py
from __future__ import annotations
from dataclasses import dataclass
import struct

from ..errors import FormatMismatchError, InvalidInputError

__all__ = [
    "BRUH_MAGIC", "MAGIC_BYTES", "HEADER_SIZE",
    "BruhHeader", "pack_header", "unpack_header", "split_header",
    "check_magic_layout",
]

# Header schema — magic|width|height, 3 x u32 little-endian, no padding.
#   off 0  : magic  (b"BRUH")
#   off 4  : width  (pixels)
#   off 8  : height (pixels)
_FMT = "<III"

MAGIC_BYTES = b"BRUH"
BRUH_MAGIC: int = (
    ord("B") | (ord("R") << 8) | (ord("U") << 16) | (ord("H") << 24)
)
HEADER_SIZE: int = struct.calcsize(_FMT)

_U32_MAX = 0xFFFFFFFF


def check_magic_layout() -> bool:
    """True si BRUH_MAGIC, découpé en octets little-endian, donne b"BRUH"."""
    return struct.pack("<I", BRUH_MAGIC) == MAGIC_BYTES and HEADER_SIZE == 12


assert check_magic_layout(), "BRUH magic/header layout broken"


@dataclass(frozen=True)
class BruhHeader:
    width: int
    height: int
    magic: int = BRUH_MAGIC

    @staticmethod
    def from_image(img) -> "BruhHeader":
        """Header for a Pillow image (only its `size` is used)."""
        w, h = img.size
        return BruhHeader(width=int(w), height=int(h))

    def to_bytes(self) -> bytes:
        return pack_header(self.width, self.height, magic=self.magic)

    @staticmethod
    def from_bytes(buf) -> "BruhHeader":
        return unpack_header(buf)

    @property
    def pixel_bytes(self) -> int:
        """Expected pixel buffer length, width*height*4."""
        return self.width * self.height * 4


def pack_header(width: int, height: int, *, magic: int = BRUH_MAGIC) -> bytes:
    """Pack (magic, width, height) → 12 bytes."""
    for name, v in (("magic", magic), ("width", width), ("height", height)):
        if not (0 <= int(v) <= _U32_MAX):
            raise InvalidInputError(f"header {name} out of u32 range: {v}")
    return struct.pack(_FMT, int(magic), int(width), int(height))


def unpack_header(buf) -> BruhHeader:
    """
    Lit les 12 premiers octets de `buf` comme header BRUH.

    Seule validation structurelle : le magic. width/height ne sont pas
    vérifiés, ni la taille du reste du buffer (voir `DecodeConfig`).
    """
    if buf is None:
        raise InvalidInputError("Null source provided to header decode")
    view = memoryview(buf).cast("B")
    if len(view) < HEADER_SIZE:
        raise InvalidInputError(
            f"Header too short ({len(view)} bytes, need {HEADER_SIZE})"
        )
    magic, width, height = struct.unpack_from(_FMT, view, 0)
    if magic != BRUH_MAGIC:
        raise FormatMismatchError(
            "File was not in BRUH format. (Header did not match magic number)"
        )
    return BruhHeader(width=width, height=height, magic=magic)


def split_header(buf) -> tuple[BruhHeader, bytes]:
    """Header + tout ce qui suit les 12 octets (pixels bruts, non vérifiés)."""
    header = unpack_header(buf)
    return header, bytes(memoryview(buf).cast("B")[HEADER_SIZE:])
