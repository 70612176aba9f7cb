"""
rollband Command Line Interface

Usage:
    python -m rollband <command> [args]

Commands:
    bands       Generate a noisy sine/cosine series and compute rolling bands
    transform   Print the declarative window transform for a config
    defaults    Show the packaged presentation defaults

Examples:
    python -m rollband bands --width 20 --frame rows
    python -m rollband bands --sigma 0.5 --width 0.4 -o bands.parquet
    python -m rollband transform --width 20 --groupby group
    python -m rollband defaults
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import numpy as np
import polars as pl

from rollband.config.defaults import load_defaults
from rollband.config.windows import WindowConfig
from rollband.engines.validation import InvalidConfiguration, validate_window_config


logger = logging.getLogger(__name__)


def _window_config(args, defaults) -> WindowConfig:
    if args.no_groupby:
        groupby = None
    elif args.groupby is not None:
        groupby = args.groupby
    else:
        groupby = defaults.groupby
    return WindowConfig(
        width=args.width if args.width is not None else defaults.width.default,
        groupby=groupby,
        frame=args.frame or defaults.frame,
        confidence=args.confidence if args.confidence is not None else defaults.confidence,
    )


# ============================================================
# COMMANDS
# ============================================================

def cmd_bands(args):
    """Generate synthetic data and compute rolling bands."""
    from rollband.data.synthetic import generate_series
    from rollband.db.polars_io import results_to_frame, write_table_atomic
    from rollband.engines.rolling.rolling_band import compute

    defaults = load_defaults()
    config = _window_config(args, defaults)

    sigma = args.sigma if args.sigma is not None else defaults.noise.default
    if not defaults.noise.contains(sigma):
        logger.warning(f"sigma={sigma} outside slider range {defaults.noise.min}..{defaults.noise.max}")

    seed = args.seed if args.seed is not None else defaults.seed
    step = args.step if args.step is not None else defaults.sample_step

    try:
        validate_window_config(config)
        rng = np.random.default_rng(seed)
        series = generate_series(rng, sigma=sigma, step=step, stop=defaults.sample_stop)
        results = compute(series, config)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    df = results_to_frame(results)

    if args.output:
        try:
            rows = write_table_atomic(df, args.output)
        except (OSError, ValueError) as e:
            print(f"ERROR: Could not write {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {rows} rows to {args.output} (config {config.config_hash})")
        return 0

    summary = (
        df.with_columns((pl.col('rolling_upper') - pl.col('rolling_lower')).alias('band_width'))
        .group_by('group', maintain_order=True)
        .agg(
            pl.len().alias('n'),
            pl.col('rolling_average').mean().alias('mean_average'),
            pl.col('band_width').mean().alias('mean_band_width'),
            pl.col('band_width').max().alias('max_band_width'),
        )
    )
    print(f"{config!r}  seed={seed} sigma={sigma}")
    print(summary)
    return 0


def cmd_transform(args):
    """Print the window transform for a config."""
    defaults = load_defaults()
    config = _window_config(args, defaults)

    field_names = {}
    if args.value_col:
        field_names['value'] = args.value_col
    if args.group_col:
        field_names['group'] = args.group_col

    try:
        text = config.to_json(field_names)
    except InvalidConfiguration as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(text)
    return 0


def cmd_defaults(args):
    """Show packaged defaults."""
    defaults = load_defaults()
    print(json.dumps(defaults.as_dict(), indent=2))
    return 0


# ============================================================
# MAIN CLI
# ============================================================

def _add_window_args(parser: argparse.ArgumentParser):
    parser.add_argument('--width', '-w', type=float, default=None,
                        help='Frame width (default from defaults.yaml)')
    parser.add_argument('--groupby', '-g', nargs='+', default=None, metavar='FIELD',
                        help='Observation fields to partition on (time, value, group)')
    parser.add_argument('--no-groupby', action='store_true',
                        help='Use a single partition (frames cross groups)')
    parser.add_argument('--frame', choices=['time', 'rows'], default=None,
                        help='Frame on the time axis or on row positions')
    parser.add_argument('--confidence', type=float, default=None,
                        help='Confidence level of the band (default 0.95)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rollband',
        description='Rolling window mean and confidence bands',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m rollband bands --width 20 --frame rows
    python -m rollband transform --width 20 --groupby group
    python -m rollband defaults
        """,
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Log at INFO level')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # bands command
    bands_parser = subparsers.add_parser(
        'bands',
        help='Compute rolling bands over a synthetic noisy series',
    )
    _add_window_args(bands_parser)
    bands_parser.add_argument('--sigma', type=float, default=None, help='Noise level')
    bands_parser.add_argument('--seed', type=int, default=None, help='Random seed')
    bands_parser.add_argument('--step', type=float, default=None, help='Sampling step')
    bands_parser.add_argument('--output', '-o', default=None, metavar='FILE',
                              help='[OUTPUT] .parquet or .csv table (prints a summary if omitted)')

    # transform command
    transform_parser = subparsers.add_parser(
        'transform',
        help='Print the window transform JSON for a config',
    )
    _add_window_args(transform_parser)
    transform_parser.add_argument('--value-col', default=None, metavar='COLUMN',
                                  help='Table column holding values (default: value)')
    transform_parser.add_argument('--group-col', default=None, metavar='COLUMN',
                                  help='Table column holding the group (default: group)')

    # defaults command
    subparsers.add_parser(
        'defaults',
        help='Show packaged presentation defaults',
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """rollband CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return 0

    # Dispatch to command handler
    handlers = {
        'bands': cmd_bands,
        'transform': cmd_transform,
        'defaults': cmd_defaults,
    }

    handler = handlers.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
