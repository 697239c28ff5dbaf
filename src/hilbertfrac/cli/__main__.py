#!/usr/bin/env python3
"""
hilbertfrac CLI - Main entry point

Usage:
    hilbertfrac resolve <fraction>   # Quadrant path of a fraction
    hilbertfrac tables               # Tables along a label path
    hilbertfrac curve                # Check continuity of the curve
"""

import sys
import argparse

from tqdm import tqdm

from ..adapter import RenderingAdapter
from ..config import get_settings
from ..errors import HilbertFracError, InvalidLabel
from ..fraction import bits_from_string, bits_to_fraction, fraction_to_bits
from ..log import get_logger, set_log_level
from ..quadrants import QUADRANT_NAMES
from ..resolver import locate, resolve, tables_along

logger = get_logger("hilbertfrac.cli")


def parse_fraction(text: str) -> float:
    """Decimal (``0.1875``) or binary literal (``0b0.0011``)"""
    if text.strip().lower().startswith("0b"):
        return bits_to_fraction(bits_from_string(text))
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


def parse_label_path(text: str):
    labels = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            label = int(part)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not a label: {part!r}")
        labels.append(label)
    return labels


def _adapter(args) -> RenderingAdapter:
    settings = get_settings()
    if args.fixed_table:
        settings = settings.model_copy(update={"rotate": False})
    return RenderingAdapter(settings)


def _mode(rotate: bool) -> str:
    return "hilbert" if rotate else "fixed-table (quadtree, not Hilbert)"


def _table_text(table) -> str:
    return str([list(row) for row in table.rows()])


def cmd_resolve(args):
    """Print the quadrant path of a fraction"""
    adapter = _adapter(args)
    settings = adapter.settings
    path = adapter.request_resolution(args.fraction, args.depth)
    adapter.set_highlight(args.highlight)
    flags = adapter.level_flags(path)
    tables = tables_along([s.label for s in path], rotate=settings.rotate)

    print("=" * 60)
    print("HILBERT QUADRANT PATH")
    print("=" * 60)
    print(f"Fraction:  {args.fraction!r}")
    print(f"Depth:     {args.depth}")
    print(f"Mode:      {_mode(settings.rotate)}")
    print()
    print(f"{'Level':>5}  {'Bits':>4}  {'Label':>5}  {'Quadrant':14s} Table")
    for selection, flag, table in zip(path, flags, tables):
        marker = "*" if flag.is_highlighted else "+" if flag.is_highlighted_ancestor else " "
        digits = f"{selection.label:02b}"
        name = QUADRANT_NAMES[selection.position]
        print(f"{marker}{flag.level:>4}  {digits:>4}  {selection.label:>5}  {name:14s} {_table_text(table)}")

    size = 1 << args.depth
    row, col = locate(path)
    print()
    print(f"Cell:      row {row}, col {col} of {size}x{size}")
    print("=" * 60)
    return 0


def cmd_tables(args):
    """Print the table in effect at each level along a label path"""
    for label in args.label_path:
        if label not in (0, 1, 2, 3):
            raise InvalidLabel(f"Label must be in 0..3, got {label}")

    rotate = not args.fixed_table
    tables = tables_along(args.label_path, rotate=rotate)
    print(f"Mode: {_mode(rotate)}")
    for level, table in enumerate(tables):
        via = f"after label {args.label_path[level - 1]}" if level else "root"
        print(f"\nLevel {level} ({via}):")
        print(table)
    return 0


def cmd_curve(args):
    """Walk every cell in curve order and count discontinuities"""
    adapter = _adapter(args)
    rotate = adapter.settings.rotate
    depth = args.depth
    adapter.check_depth(depth)

    count = 4 ** depth
    jumps = 0
    max_jump = 0
    previous = None
    for index in tqdm(range(count), desc=f"Depth {depth}", disable=args.quiet):
        # Dyadic fractions convert to bits exactly
        bits = fraction_to_bits(index / count, 2 * depth)
        cell = locate(resolve(bits, depth, rotate=rotate))
        if previous is not None:
            distance = abs(cell[0] - previous[0]) + abs(cell[1] - previous[1])
            if distance != 1:
                jumps += 1
                logger.debug("jump of %d between index %d and %d", distance, index - 1, index)
            max_jump = max(max_jump, distance)
        previous = cell

    print(f"Mode:        {_mode(rotate)}")
    print(f"Cells:       {count:,}")
    print(f"Jumps:       {jumps:,}")
    print(f"Max step:    {max_jump}")

    if rotate and jumps:
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description='hilbertfrac CLI')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # resolve command
    parser_resolve = subparsers.add_parser('resolve', help='Quadrant path of a fraction')
    parser_resolve.add_argument('fraction', type=parse_fraction,
                                help='Value in [0, 1), decimal or 0b0.xxxx')
    parser_resolve.add_argument('--depth', type=int, default=settings.max_depth)
    parser_resolve.add_argument('--highlight', type=int, default=None,
                                help='Square level to highlight')
    parser_resolve.add_argument('--fixed-table', action='store_true',
                                help='Never rotate tables (quadtree order, not Hilbert)')
    parser_resolve.set_defaults(func=cmd_resolve)

    # tables command
    parser_tables = subparsers.add_parser('tables', help='Tables along a label path')
    parser_tables.add_argument('--label-path', type=parse_label_path, default=[],
                               help='Comma separated labels, e.g. 0,3,1')
    parser_tables.add_argument('--fixed-table', action='store_true')
    parser_tables.set_defaults(func=cmd_tables)

    # curve command
    parser_curve = subparsers.add_parser('curve', help='Check curve continuity')
    parser_curve.add_argument('--depth', type=int, default=settings.max_depth)
    parser_curve.add_argument('--fixed-table', action='store_true')
    parser_curve.add_argument('--quiet', action='store_true', help='Hide progress bar')
    parser_curve.set_defaults(func=cmd_curve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    set_log_level(get_settings().log_level)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except HilbertFracError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
