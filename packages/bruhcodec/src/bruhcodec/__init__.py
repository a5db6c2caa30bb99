# packages/bruhcodec/src/bruhcodec/__init__.py
from __future__ import annotations

"""BRUH - format d'image non compressé (public surface).

Header 12 octets (magic b"BRUH", width, height en u32 little-endian) suivi
des pixels RGBA8 row-major.
"""

__version__ = "1.0.0"

# API publique (stable)
from .config import DecodeConfig
from .paths import BRUH_EXT, PathsConfig, bruh_path_for
from .errors import (
    BruhError, InvalidInputError, FormatMismatchError, SourceDecodeError, IOFailure,
)
from .bitstream import (
    BRUH_MAGIC, MAGIC_BYTES, HEADER_SIZE, BruhHeader,
    pack_header, unpack_header, read_bitstream, write_bitstream,
)
from .pixels import image_to_pixels, pixels_to_array, pixels_to_image, pixel_at
from .codec import encode_image, decode_bytes, load_source_image, image_to_bruh, read_bruh

__all__ = [
    "__version__",
    "DecodeConfig", "PathsConfig", "BRUH_EXT", "bruh_path_for",
    "BruhError", "InvalidInputError", "FormatMismatchError", "SourceDecodeError", "IOFailure",
    "BRUH_MAGIC", "MAGIC_BYTES", "HEADER_SIZE", "BruhHeader",
    "pack_header", "unpack_header", "read_bitstream", "write_bitstream",
    "image_to_pixels", "pixels_to_array", "pixels_to_image", "pixel_at",
    "encode_image", "decode_bytes", "load_source_image", "image_to_bruh", "read_bruh",
]
