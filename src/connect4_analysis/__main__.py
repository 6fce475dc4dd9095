from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: run analysis if no subcommand
    if not argv or argv[0].startswith("-"):
        return analyze_main(argv)

    cmd = argv[0].lower()
    if cmd in {"analyze", "analysis"}:
        return analyze_main(argv[1:])

    print("Usage:")
    print("  python -m connect4_analysis [analyze] [--csv ...] [--metric ...] [--outdir figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
