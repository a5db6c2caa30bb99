from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging
from bruhcodec import BruhError, DecodeConfig, read_bruh

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="bruh", description="BRUH — affiche une image .bruh")
    # pas d'extension .bruh exigée : seul le magic compte
    p.add_argument("image_path", help="Fichier BRUH")
    p.add_argument("--strict", action="store_true", help="Vérifie aussi width*height*4 (défaut: $BRUH_STRICT_LENGTH)")
    p.add_argument("--no-window", action="store_true", help="Ne pas ouvrir la fenêtre de preview")
    p.add_argument("--save", default=None, help="(Optionnel) exporte la preview en PNG")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    cfg = DecodeConfig(strict_length=True) if args.strict else DecodeConfig.from_env()
    try:
        header, pixels = read_bruh(args.image_path, cfg)
    except BruhError as e:
        logging.debug("Échec decode %s", args.image_path, exc_info=True)
        print(e, file=sys.stderr)
        return 1

    print(f"Loading a BRUH image with dimensions: {header.width} {header.height}")

    # import tardif : matplotlib n'est chargé que pour l'affichage
    from bruhviz import save_preview, show_preview
    try:
        if args.save:
            logging.info("→ preview %s", save_preview(header.width, header.height, pixels, args.save))
        if not args.no_window:
            show_preview(header.width, header.height, pixels)
    except (BruhError, OSError, ValueError) as e:
        logging.debug("Échec preview %s", args.image_path, exc_info=True)
        print(e, file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
