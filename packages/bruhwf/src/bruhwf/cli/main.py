from __future__ import annotations
import sys

from . import convert, view

def main(argv=None) -> int:
    """`bruh convert PATH...` ou `bruh [view] PATH`."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0] == "convert":
        return convert.main(argv[1:])
    if argv and argv[0] == "view":
        argv = argv[1:]
    return view.main(argv)

if __name__ == "__main__":
    sys.exit(main())
