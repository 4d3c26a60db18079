"""CLI entry point: ellipse-billiard trajectory|draw subcommands."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import NoReturn

from ellipse_billiard.billiard import run_billiard
from ellipse_billiard.config import get_log_level, get_temp_path
from ellipse_billiard.constants import (
    ANGLE_UNITS,
    DEFAULT_ANGLE,
    DEFAULT_ECCENTRICITY,
    DEFAULT_REFLECTION_COUNT,
    DEFAULT_START_OFFSET,
)
from ellipse_billiard.input_params import write_input_parameters
from ellipse_billiard.params import (
    BilliardParams,
    params_from_env,
    parse_angle,
    validate_params,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or ELLIPSE_BILLIARD_LOG)."""
    level = get_log_level(logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )
    # matplotlib is chatty at DEBUG (font manager).
    logging.getLogger('matplotlib').setLevel(logging.WARNING)


def _params_from_args(args: argparse.Namespace) -> BilliardParams | None:
    """Build params from --cgi environment or from command-line options."""
    if args.cgi:
        return params_from_env()
    return BilliardParams(
        eccentricity=args.eccentricity,
        angle=parse_angle(args.angle, args.angle_unit),
        start_offset=args.start_offset,
        reflection_count=args.reflections,
        title=(args.title or '').strip(),
    )


def _prepare(parser: argparse.ArgumentParser, args: argparse.Namespace) -> BilliardParams | None:
    """Build and validate params, then write the Input Parameters section to stdout.

    Returns:
        Validated params, or None after reporting the problem on stderr.
    """
    try:
        params = _params_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    if params is None:
        print('Invalid or missing CGI parameters (e.g. eccentricity).', file=sys.stderr)
        return None
    try:
        validate_params(params)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return None
    logger.debug('Parameters: %s', params)
    write_input_parameters(sys.stdout, params)
    return params


def _run(params: BilliardParams) -> int:
    """Run the billiard tool; map input/geometry errors to exit code 1."""
    try:
        run_billiard(params)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def _trajectory_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the table of trajectory points (trajectory subcommand).

    Parameters:
        parser: Argument parser (for reporting bad options).
        args: Parsed args; eccentricity, angle, start offset, reflections, output.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    params = _prepare(parser, args)
    if params is None:
        return 1
    if args.output is None:
        params.output_txt = sys.stdout
        return _run(params)
    with open(args.output, 'w') as f:
        params.output_txt = f
        return _run(params)


def _draw_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Draw the trajectory to PostScript or PNG (draw subcommand).

    Parameters:
        parser: Argument parser (for reporting bad options).
        args: Parsed args; eccentricity, angle, start offset, reflections,
            output path and format.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    params = _prepare(parser, args)
    if params is None:
        return 1

    output = args.output
    if output is None:
        name = 'billiard.png' if args.format == 'png' else 'billiard.ps'
        output = os.path.join(get_temp_path(), name) if args.cgi else name

    if args.format == 'png':
        from ellipse_billiard.rendering.matplotlib_view import draw_billiard_mpl

        try:
            trajectory = run_billiard(params)
            draw_billiard_mpl(trajectory, output, title=params.title)
        except (ValueError, RuntimeError, ImportError) as e:
            print(f'Error: {e}', file=sys.stderr)
            return 1
        return 0

    with open(output, 'w') as f:
        params.output_ps = f
        return _run(params)


def _add_common_args(sub: argparse.ArgumentParser) -> None:
    """Options shared by both subcommands."""
    sub.add_argument(
        '--cgi', action='store_true', help='Read parameters from environment (CGI)'
    )
    sub.add_argument(
        '--eccentricity',
        type=float,
        default=DEFAULT_ECCENTRICITY,
        help='Ellipse eccentricity in (0, 1); env: eccentricity',
    )
    sub.add_argument(
        '--angle',
        type=float,
        default=DEFAULT_ANGLE,
        help='Launch angle (0 = +x axis); env: angle',
    )
    sub.add_argument(
        '--angle-unit',
        type=str,
        default='rad',
        choices=list(ANGLE_UNITS),
        help='Unit of --angle (tau = fraction of a turn); env: angle_unit',
    )
    sub.add_argument(
        '--start-offset',
        type=float,
        default=DEFAULT_START_OFFSET,
        help='Launch point as a fraction of the semi-major axis, in (-1, 1); env: start_offset',
    )
    sub.add_argument(
        '--reflections',
        type=int,
        default=DEFAULT_REFLECTION_COUNT,
        help='Number of reflections; env: reflection_count',
    )
    sub.add_argument('--title', type=str, default='', help='Plot title; env: title')
    sub.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')


def main() -> int:
    """Entry point for ellipse-billiard CLI (trajectory | draw).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='ellipse-billiard',
        description='Trajectory of a ball bouncing inside an ellipse.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    traj_parser = subparsers.add_parser('trajectory', help='Table of bounce points')
    _add_common_args(traj_parser)
    traj_parser.add_argument(
        '-o', '--output', type=str, default=None, help='Output table file (default stdout)'
    )
    traj_parser.set_defaults(func=_trajectory_cmd)

    draw_parser = subparsers.add_parser('draw', help='Draw the trajectory')
    _add_common_args(draw_parser)
    draw_parser.add_argument(
        '--format', type=str, default='ps', choices=['ps', 'png'], help='Output format'
    )
    draw_parser.add_argument(
        '-o', '--output', type=str, default=None, help='Output file (default billiard.ps)'
    )
    draw_parser.set_defaults(func=_draw_cmd)

    args = parser.parse_args()
    _configure_logging(args.verbose)
    sub = traj_parser if args.command == 'trajectory' else draw_parser
    return int(args.func(sub, args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
