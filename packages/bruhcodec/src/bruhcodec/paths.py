from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os

BRUH_EXT = ".bruh"

@dataclass(frozen=True)
class PathsConfig:
    """Parametric path resolver for converted outputs.

    ENV keys
    --------
    BRUH_OUTPUTS_DIR → destination of converted .bruh files   # [STORE:OVERWRITE]
                       (unset: next to the source image)
    """
    outputs_dir: Path | None = None   # [STORE:OVERWRITE]

    @staticmethod
    def from_env() -> "PathsConfig":
        return PathsConfig(outputs_dir=_opt_env("BRUH_OUTPUTS_DIR"))

    # Accessor (explicit → ENV fallback)
    def outputs(self) -> Path | None: return self.outputs_dir or _opt_env("BRUH_OUTPUTS_DIR")

def bruh_path_for(src: str | Path, out_dir: str | Path | None = None) -> Path:
    """Destination .bruh for a source image.

    The extension is replaced (``foo.png`` → ``foo.bruh``) or appended when
    there is none (``foo`` → ``foo.bruh``). With `out_dir`, only the file name
    is kept and placed there. A single trailing dot counts as an empty
    extension (``foo.`` → ``foo.bruh``).
    """
    p = Path(src)
    if p.name.endswith(".") and p.name.strip("."):
        p = p.with_name(p.name[:-1])
    dst = p.with_suffix(BRUH_EXT)
    if out_dir is not None:
        dst = Path(out_dir) / dst.name
    return dst

def _opt_env(name: str) -> Path | None:
    v = os.getenv(name)
    return Path(v) if v else None

__all__ = ["BRUH_EXT", "PathsConfig", "bruh_path_for"]
