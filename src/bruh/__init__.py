"""BRUH — unified API
Install once, import one namespace:

    pip install -e .

Usage:

    import bruh
    data = bruh.encode_image(img)                 # header ‖ RGBA pixels
    header, pixels = bruh.decode_bytes(data)

Or detailed modules:

    from bruh import codec, viz, wf
"""

__version__ = "1.0.0"

# Bring subpackages into a single namespace
import bruhcodec as codec
import bruhviz as viz
import bruhwf as wf

# High-level convenience re-exports (top-level functions)
from bruhcodec import (
    BruhHeader, DecodeConfig, HEADER_SIZE, BRUH_MAGIC,
    BruhError, InvalidInputError, FormatMismatchError, SourceDecodeError, IOFailure,
    encode_image, decode_bytes, image_to_bruh, read_bruh, bruh_path_for,
)
from bruhviz import to_image, show_preview

__all__ = [
    # sub-namespaces
    "codec", "viz", "wf",
    # convenience
    "BruhHeader", "DecodeConfig", "HEADER_SIZE", "BRUH_MAGIC",
    "BruhError", "InvalidInputError", "FormatMismatchError", "SourceDecodeError", "IOFailure",
    "encode_image", "decode_bytes", "image_to_bruh", "read_bruh", "bruh_path_for",
    "to_image", "show_preview",
    "__version__",
]
