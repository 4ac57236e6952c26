"""
Command-line demo.

Samples a meander and prints its first time steps as RGB colors, the way a
consumer would drive an animation. Optionally plots the curves or saves the
meander to an HDF5 file.

Usage:
    $ python -m meander --seed 42 --steps 20
    $ python -m meander --dimensions 2 --plot
    $ python -m meander --save meander.h5
"""
import argparse
import itertools as it
import logging
from typing import Iterator, List, Optional, Tuple

from meander.config import DEFAULT_DIMENSIONS, DEFAULT_PLOT_DURATION, DEFAULT_STEPS, DEFAULT_TIME_STEP
from meander.logging_config import setup_logging
from meander.model.io import MeanderIO
from meander.model.meander import Meander
from meander.utils import to_byte

logger = logging.getLogger(__name__)


def random_colors(meander: Meander, dt: float) -> Iterator[Tuple[int, int, int]]:
    """Map a 3-dimensional meander onto a stream of 8-bit RGB colors."""
    if meander.dimensions != 3:
        raise ValueError(f"Colors need a 3-dimensional meander, got {meander.dimensions}.")
    for r, g, b in meander.into_time_steps(dt):
        yield to_byte(r), to_byte(g), to_byte(b)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="meander",
        description="Print smoothly varying random values in [0, 1].",
    )
    parser.add_argument('--dimensions', '-d', type=int, default=DEFAULT_DIMENSIONS,
                        help='Number of variables (3 prints RGB colors)')
    parser.add_argument('--dt', type=float, default=DEFAULT_TIME_STEP, help='Time step')
    parser.add_argument('--steps', '-n', type=int, default=DEFAULT_STEPS, help='Number of steps to print')
    parser.add_argument('--seed', type=int, default=None, help='Seed for reproducible output')
    parser.add_argument('--plot', action='store_true', help='Plot the curves with matplotlib')
    parser.add_argument('--save', metavar='PATH', default=None, help='Save the meander to an HDF5 file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug logging on stderr')
    parser.add_argument('--log-file', metavar='PATH', default=None, help='Also write every log record to a file')
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    if args.dimensions < 0:
        parser.error("--dimensions must be non-negative")
    if args.plot and not args.dt > 0.0:
        parser.error("--plot needs a positive --dt")

    meander = Meander.random(args.dimensions, seed=args.seed)

    if args.dimensions == 3:
        for step, (r, g, b) in enumerate(it.islice(random_colors(meander, args.dt), args.steps)):
            print(f"{step * args.dt:8.3f}  #{r:02x}{g:02x}{b:02x}  ({r:3d}, {g:3d}, {b:3d})")
    else:
        for step, values in enumerate(it.islice(meander.time_steps(args.dt), args.steps)):
            print(f"{step * args.dt:8.3f}  " + "  ".join(f"{v:.4f}" for v in values))

    if args.save:
        MeanderIO.save_meander(meander, args.save, trajectory_steps=args.steps, dt=args.dt)

    if args.plot:
        meander.plot(duration=DEFAULT_PLOT_DURATION, dt=args.dt)


if __name__ == "__main__":
    main()
