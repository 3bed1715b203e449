# scripts/diagnose_fleet.py
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import pandas as pd

from diagnostics.batch import diagnose_directory
from services.config import load_settings
from services.logging_config import setup_logging

EXIT_LOAD_ERROR = 1
EXIT_FINDINGS = 2


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Car diagnostics: summarize every vehicle file in a directory")
    parser.add_argument("directory", type=str)
    parser.add_argument("--log-level", type=str, default=settings.log_level)
    args = parser.parse_args(argv)

    setup_logging(args.log_level, settings.log_path)
    pd.set_option("display.max_colwidth", 120)

    try:
        table = diagnose_directory(args.directory)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return EXIT_LOAD_ERROR

    if table.empty:
        print("No vehicle files found.", file=sys.stderr)
        return EXIT_LOAD_ERROR

    print(table.to_string(index=False))
    passed = int(table["passed"].sum())
    print(f"\n{passed}/{len(table)} vehicles passed diagnostics.")
    return 0 if passed == len(table) else EXIT_FINDINGS


if __name__ == "__main__":
    sys.exit(main())
