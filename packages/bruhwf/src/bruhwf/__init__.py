# packages/bruhwf/src/bruhwf/__init__.py
from __future__ import annotations

__all__ = [
    # on n’importe PAS le sous-module cli ici pour éviter les imports lourds (matplotlib) au top-level
]

__version__ = "1.0.0"
