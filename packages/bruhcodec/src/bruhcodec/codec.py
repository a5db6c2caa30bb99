# packages/bruhcodec/src/bruhcodec/codec.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from .config import DecodeConfig
from .errors import InvalidInputError, IOFailure, SourceDecodeError
from .bitstream import (
    BruhHeader,
    read_bitstream,
    split_header,
    write_bitstream,
)
from .paths import bruh_path_for
from .pixels import image_to_pixels

__all__ = [
    "encode_image", "decode_bytes",
    "load_source_image", "image_to_bruh", "read_bruh",
]

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# En mémoire
# ---------------------------------------------------------------------------

def encode_image(img: Image.Image) -> bytes:
    """
    Image Pillow → fichier BRUH complet (header 12 octets ‖ pixels RGBA).
    """
    header = BruhHeader.from_image(img)
    data = image_to_pixels(img)
    log.debug("encode %dx%d → %d pixel bytes", header.width, header.height, len(data))
    return header.to_bytes() + data


def decode_bytes(buf, cfg: DecodeConfig | None = None) -> Tuple[BruhHeader, bytes]:
    """
    Fichier BRUH (bytes) → (header, pixels).

    Par défaut seul le magic est validé. Avec `cfg.strict_length`, on exige
    aussi des dimensions non nulles et exactement width*height*4 octets.
    """
    cfg = cfg or DecodeConfig()
    header, pixels = split_header(buf)
    if cfg.strict_length:
        if header.width == 0 or header.height == 0:
            raise InvalidInputError(
                f"empty image dimensions {header.width}x{header.height}"
            )
        if len(pixels) != header.pixel_bytes:
            raise InvalidInputError(
                f"pixel data length {len(pixels)} does not match "
                f"{header.width}x{header.height}x4 = {header.pixel_bytes}"
            )
    log.debug("decode %dx%d, %d pixel bytes", header.width, header.height, len(pixels))
    return header, pixels


# ---------------------------------------------------------------------------
# Fichiers
# ---------------------------------------------------------------------------

def load_source_image(path: str | Path) -> Image.Image:
    """Open and fully load an input image (PNG, JPEG, BMP, ...)."""
    p = Path(path)
    try:
        with Image.open(p) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, SyntaxError, Image.DecompressionBombError) as e:
        raise SourceDecodeError(f"Cannot decode image {p}: {e}") from e
    except OSError as e:
        # Pillow signale aussi les fichiers tronqués/corrompus via OSError
        if p.is_file() and not isinstance(e, PermissionError):
            raise SourceDecodeError(f"Cannot decode image {p}: {e}") from e
        raise IOFailure(f"Cannot read {p}: {e}") from e


def image_to_bruh(path: str | Path, out_dir: str | Path | None = None) -> Path:
    """
    Convertit une image source en .bruh à côté de la source (ou dans `out_dir`).

    Retourne le chemin écrit.
    """
    img = load_source_image(path)
    dst = bruh_path_for(path, out_dir)
    if out_dir is not None:
        try:
            Path(out_dir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailure(f"Cannot create {out_dir}: {e}") from e
    write_bitstream(encode_image(img), dst)
    log.debug("converted %s → %s", path, dst)
    return dst


def read_bruh(path: str | Path, cfg: DecodeConfig | None = None) -> Tuple[BruhHeader, bytes]:
    """Read a .bruh file (extension not required) → (header, pixels)."""
    return decode_bytes(read_bitstream(path), cfg)
