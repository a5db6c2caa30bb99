# packages/bruhcodec/src/bruhcodec/config.py
from __future__ import annotations
from dataclasses import dataclass
import os

__all__ = ["DecodeConfig"]

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DecodeConfig:
    """
    Configuration **publique** du decodage BRUH.

    Champs
    ------
    strict_length : bool, default=False
        Par defaut le decodeur ne valide que le magic (comportement d'origine) :
        width/height nuls ou un nombre d'octets pixels != width*height*4 passent.
        Avec `strict_length=True`, `decode_bytes` exige width > 0, height > 0 et
        exactement width*height*4 octets apres le header (`InvalidInputError`
        sinon). Surchargeable via l'ENV `BRUH_STRICT_LENGTH`.

    Notes
    -----
    - La dataclass est **immuable** (`frozen=True`).
    """

    strict_length: bool = False

    @staticmethod
    def from_env() -> "DecodeConfig":
        v = os.getenv("BRUH_STRICT_LENGTH", "").strip().lower()
        return DecodeConfig(strict_length=v in _TRUTHY)
