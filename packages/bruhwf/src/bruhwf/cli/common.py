from __future__ import annotations
import logging, sys
from pathlib import Path
from typing import Iterable, Optional

from bruhcodec import MAGIC_BYTES

SUPPORTED_EXTS = (".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff", ".webp")

def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    # stderr : stdout est réservé aux messages utilisateur (succès/échec, dimensions)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers, force=True)

def list_images(root: Path, exts=SUPPORTED_EXTS) -> list[Path]:
    root = Path(root)
    return sorted(p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in exts)

def expand_inputs(paths: Iterable[str | Path]) -> list[Path]:
    """Files are kept as given; directories are expanded to their images."""
    out: list[Path] = []
    for p in map(Path, paths):
        out.extend(list_images(p) if p.is_dir() else [p])
    return out

def looks_like_bruh(p: Path) -> bool:
    try:
        with open(p, "rb") as f:
            return f.read(4) == MAGIC_BYTES
    except OSError:
        return False
