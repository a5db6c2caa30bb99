from __future__ import annotations
import logging
import os
from pathlib import Path

from ..errors import IOFailure

log = logging.getLogger(__name__)

def read_bitstream(path: str | Path) -> bytes:
    """Read a whole .bruh file from disk (raw bytes)."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise IOFailure(f"Cannot read {path}: {e}") from e

def write_bitstream(payload: bytes, path: str | Path) -> None:
    """Atomic write to target path.  # [STORE:OVERWRITE]"""
    p = Path(path)
    tmp = p.with_name(p.name + ".tmp")
    try:
        with open(tmp, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, p)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise IOFailure(f"Cannot write {p}: {e}") from e
    log.debug("wrote %d bytes → %s", len(payload), p)
