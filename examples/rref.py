#!/usr/bin/env python3
"""
Reduce a GF(2) matrix and print everything derived from it.

Rows are given as bit strings:

    python rref.py 1000 0101 0101
    python rref.py --random 6x9 --seed 3
"""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from gf2tools import GF2Matrix


def parse_rows(tokens: list[str]) -> list[list[int]]:
    rows = []
    for tok in tokens:
        if set(tok) - {"0", "1"}:
            raise argparse.ArgumentTypeError(f"row {tok!r} is not a bit string")
        rows.append([int(ch) for ch in tok])
    return rows


def parse_shape(s: str) -> tuple[int, int]:
    try:
        r, c = s.lower().split("x")
        return int(r), int(c)
    except ValueError:
        raise argparse.ArgumentTypeError(f"shape must look like 4x6, got {s!r}")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("rows", nargs="*", help="matrix rows as bit strings")
    ap.add_argument("--random", type=parse_shape, default=None, metavar="RxC", help="use a random matrix")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.random is not None:
        rng = np.random.default_rng(args.seed)
        M = GF2Matrix.from_array(rng.integers(0, 2, size=args.random))
    elif args.rows:
        try:
            M = GF2Matrix(parse_rows(args.rows))
        except (argparse.ArgumentTypeError, ValueError) as e:
            ap.error(str(e))
    else:
        ap.error("give rows or --random")

    R, ops = M.echelon_form()

    print(f"Input ({M.nrows()}x{M.ncols()}):")
    print(M)
    print()
    print("RREF:")
    print(R)
    print()
    print(f"Row operations ({len(ops)}):", [tuple(op) for op in ops])
    print("Rank:", M.rank())
    print("Kernel basis:")
    for v in M.kernel():
        print("  ", "".join(map(str, v)))
    print("Image basis:")
    for v in M.image():
        print("  ", "".join(map(str, v)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
