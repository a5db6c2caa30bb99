# packages/bruhcodec/src/bruhcodec/bitstream/__init__.py
from __future__ import annotations

# I/O bruts (fichier entier, écriture atomique)
from .io import read_bitstream, write_bitstream

# Header 12 octets (magic|width|height)
from .header import (
    BRUH_MAGIC, MAGIC_BYTES, HEADER_SIZE,
    BruhHeader, pack_header, unpack_header, split_header,
    check_magic_layout,
)

__all__ = [
    "read_bitstream", "write_bitstream",
    "BRUH_MAGIC", "MAGIC_BYTES", "HEADER_SIZE",
    "BruhHeader", "pack_header", "unpack_header", "split_header",
    "check_magic_layout",
]
