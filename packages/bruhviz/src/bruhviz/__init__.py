from __future__ import annotations

from .api import to_image, save_preview, show_preview

__all__ = ["to_image", "save_preview", "show_preview"]
