# packages/bruhcodec/src/bruhcodec/errors.py
from __future__ import annotations

__all__ = [
    "BruhError",
    "InvalidInputError",
    "FormatMismatchError",
    "SourceDecodeError",
    "IOFailure",
]


class BruhError(Exception):
    """Base de toutes les erreurs du codec BRUH."""


class InvalidInputError(BruhError, ValueError):
    """Source absente, trop courte, ou champ hors bornes (u32)."""


class FormatMismatchError(BruhError, ValueError):
    """Le magic lu ne correspond pas a b"BRUH" (fichier etranger ou autre version)."""


class SourceDecodeError(BruhError):
    """L'image source (PNG, JPEG, ...) n'a pas pu etre decodee a l'encodage."""


class IOFailure(BruhError, OSError):
    """Lecture / ecriture / flush sur disque en echec."""
