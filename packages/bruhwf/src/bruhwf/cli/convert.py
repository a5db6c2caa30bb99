from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging, expand_inputs, looks_like_bruh
from bruhcodec import BruhError, PathsConfig, bruh_path_for, image_to_bruh

OK_MSG = "Successfully converted PNG to BRUH"
FAIL_MSG = "Failed to convert PNG to BRUH"

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="bruh convert", description="BRUH — convertit des images en .bruh")
    p.add_argument("image_path", nargs="+", help="Image(s) source ou dossier(s)")
    p.add_argument("--out", default=None, help="Dossier de sortie (défaut: $BRUH_OUTPUTS_DIR, sinon à côté de la source)")
    p.add_argument("--resume", action="store_true", help="Skip si sortie existe et valide")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def convert_one(path: Path, out_dir: Path | None, resume: bool = False) -> bool:
    """Convert a single image; True on success. Error details only reach the log."""
    dst = bruh_path_for(path, out_dir)
    if resume and dst.exists() and looks_like_bruh(dst):
        logging.info("skip: %s", dst)
        return True
    try:
        image_to_bruh(path, out_dir)
    except BruhError as e:
        logging.debug("Échec conversion %s: %s", path, e, exc_info=True)
        return False
    logging.info("→ OK %s", dst)
    return True

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    out_dir = Path(args.out) if args.out else PathsConfig.from_env().outputs()
    inputs = expand_inputs(args.image_path)
    if not inputs:
        logging.error("Aucune image trouvée dans %s", ", ".join(args.image_path))
        print(FAIL_MSG)
        return 1

    ok = 0
    for i, path in enumerate(inputs, 1):
        logging.info("[%d/%d] convert: %s", i, len(inputs), path)
        if convert_one(path, out_dir, resume=args.resume):
            print(OK_MSG)
            ok += 1
        else:
            print(FAIL_MSG)
    return 0 if ok == len(inputs) else 1

if __name__ == "__main__":
    sys.exit(main())
