# packages/bruhcodec/src/bruhcodec/pixels.py
# -----------------------------------------------------------------------------
# Pixel stream BRUH — image <-> buffer plat RGBA8, ordre row-major.
# Ce module produit/consomme le bloc pixels du fichier.

from __future__ import annotations
from typing import Tuple

import numpy as np
from PIL import Image

from .errors import InvalidInputError

__all__ = [
    "CHANNELS",
    "image_to_pixels", "pixels_to_array", "pixels_to_image", "pixel_at",
]

#: R, G, B, A (alpha droit, non pré-multiplié)
CHANNELS: int = 4

#: Modes Pillow à plus de 8 bits par canal (gris 16/32 bits, flottant)
_WIDE_INT_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N")
_FLOAT_MODES = ("F",)


# -----------------------------------------------------------------------------
# Encode : image -> octets
# -----------------------------------------------------------------------------
def image_to_pixels(img: Image.Image) -> bytes:
    """
    Sérialise une image Pillow en octets RGBA row-major.

    Ligne 0 d'abord, chaque ligne de gauche à droite, 4 octets par pixel dans
    l'ordre R, G, B, A. Longueur = width*height*4. Les images non RGBA sont
    converties par Pillow (L, P, RGB, LA, ... → RGBA ; alpha = 255 si absent).
    Les gris 16 bits (I;16, I) sont ramenés sur 8 bits par (v + 128) // 257,
    les flottants (F) lus dans [0, 1] puis mis à l'échelle sur 255.
    """
    rgba = _to_rgba(img)
    arr = np.asarray(rgba, dtype=np.uint8)          # (H, W, 4), C-contigu
    return np.ascontiguousarray(arr).tobytes()


def _narrow_to_l(img: Image.Image) -> Image.Image:
    """Gris large → L 8 bits, par mise à l'échelle (pas de saturation à 255)."""
    if img.mode in _FLOAT_MODES:
        v = np.clip(np.asarray(img, dtype=np.float64), 0.0, 1.0)
        out = np.rint(v * 255.0)
    else:
        v = np.clip(np.asarray(img).astype(np.int64), 0, 0xFFFF)
        out = (v + 128) // 257
    return Image.fromarray(out.astype(np.uint8))


def _to_rgba(img: Image.Image) -> Image.Image:
    if img.mode == "RGBA":
        return img
    if img.mode in _WIDE_INT_MODES or img.mode in _FLOAT_MODES:
        img = _narrow_to_l(img)
    return img.convert("RGBA")


# -----------------------------------------------------------------------------
# Decode : octets -> image
# -----------------------------------------------------------------------------
def pixels_to_array(pixels, width: int, height: int) -> np.ndarray:
    """
    Réinterprète un buffer plat en tableau (height, width, 4) uint8, sans copie.

    Un buffer plus court que width*height*4 lève `InvalidInputError` ; les
    octets en surplus sont ignorés.
    """
    need = int(width) * int(height) * CHANNELS
    flat = np.frombuffer(pixels, dtype=np.uint8)
    if flat.size < need:
        raise InvalidInputError(
            f"pixel buffer too short: {flat.size} bytes for {width}x{height} (need {need})"
        )
    return flat[:need].reshape(int(height), int(width), CHANNELS)


def pixels_to_image(pixels, width: int, height: int) -> Image.Image:
    """Image RGBA (alpha droit) prête à afficher."""
    arr = pixels_to_array(pixels, width, height)
    return Image.fromarray(arr)                      # (H, W, 4) uint8 → RGBA


def pixel_at(pixels, width: int, x: int, y: int) -> Tuple[int, int, int, int]:
    """(r, g, b, a) du pixel (x, y) : offset (y*width + x)*4."""
    if not (0 <= x < width) or y < 0:
        raise InvalidInputError(f"pixel ({x}, {y}) outside width {width}")
    off = (y * width + x) * CHANNELS
    if off + CHANNELS > len(pixels):
        raise InvalidInputError(f"pixel ({x}, {y}) outside buffer")
    r, g, b, a = pixels[off:off + CHANNELS]
    return int(r), int(g), int(b), int(a)
