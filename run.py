"""Dwarven Villas CLI entry point.

Provides subcommands for checking candidate rooms, committing placements onto
a lattice, and fuzzing the lattice placement contract. Accepts configuration
via flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console

from villas import Feature, Lattice, Room, Tile, VillasError, __version__
from villas.config import load_config
from villas.fuzz import compare_batch_and_sequential
from villas.logging_utils import configure_logging, log

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def parse_feature_token(token: str) -> Feature:
    """Parse ``tile:row,col`` (e.g. ``door:0,3``) into a Feature."""
    try:
        name, coords = token.split(":", 1)
        row_s, col_s = coords.split(",", 1)
        return Feature(Tile.from_name(name), int(row_s), int(col_s))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid feature {token!r}: expected tile:row,col such as floor:0,1 ({exc})"
        ) from None


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Dwarven Villas lattice and room toolkit

    Validate candidate rooms, commit placements onto a bounded lattice, or fuzz
    the lattice's batch placement contract. Configuration can be provided via
    CLI flags or environment variables. If both are present, CLI flags take
    precedence.
    """

    epilog = dedent(
        """
        Features are written tile:row,col with tile one of wall, floor, door, stair.

        Environment variables:
          VILLAS_LOG_LEVEL        debug | info | warn | error (default: info)
          VILLAS_LOG_JSON         Emit structured log lines as JSON (default: 0)
          VILLAS_LOG_FILE         Also log to this rotating file (default: unset)
          VILLAS_LATTICE_WIDTH    Lattice width for place/fuzz (default: 5)
          VILLAS_LATTICE_HEIGHT   Lattice height for place/fuzz (default: 5)
          VILLAS_FUZZ_SEED        Seed for fuzz (default: random)
          VILLAS_FUZZ_PLACEMENTS  Random placements drawn by fuzz (default: 200)
          VILLAS_FUZZ_GROUP_SIZE  Placements per batch in fuzz (default: 2)

        Examples:
          # Validate a straight three-tile room with a door at its end
          python run.py check-room floor:0,0 floor:0,1 floor:0,2 door:0,3

          # Commit placements onto a 6x4 lattice and print it
          python run.py place --width 6 --height 4 floor:1,1 floor:1,2 stair:2,2

          # Fuzz with a fixed seed in groups of three
          python run.py fuzz --seed 42 --group-size 3

          # Load variables from .env then fuzz
          python run.py --env-file .env fuzz
        """
    )

    parser = argparse.ArgumentParser(
        prog="villas",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Dwarven Villas {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # check-room subcommand
    check_parser = subparsers.add_parser(
        "check-room",
        help="Validate a candidate room",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Construct a room from features and report whether it is valid",
    )
    check_parser.add_argument("features", nargs="+", type=parse_feature_token, help="Features as tile:row,col")
    check_parser.set_defaults(command="check-room")

    # place subcommand
    place_parser = subparsers.add_parser(
        "place",
        help="Commit placements onto a lattice",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Apply placements in order through the replacement policy and print the lattice",
    )
    place_parser.add_argument("--width", type=int, default=None, help="Lattice width (default: env or 5)")
    place_parser.add_argument("--height", type=int, default=None, help="Lattice height (default: env or 5)")
    place_parser.add_argument("features", nargs="+", type=parse_feature_token, help="Features as tile:row,col")
    place_parser.set_defaults(command="place")

    # fuzz subcommand
    fuzz_parser = subparsers.add_parser(
        "fuzz",
        help="Check batch placement matches one-at-a-time placement",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Seeded random placements applied via place and place_many; prints a JSON report",
    )
    fuzz_parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: env or random)")
    fuzz_parser.add_argument("--placements", type=int, default=None, help="Random placements to draw")
    fuzz_parser.add_argument("--group-size", dest="group_size", type=int, default=None, help="Placements per batch")
    fuzz_parser.add_argument("--width", type=int, default=None, help="Lattice width (default: env or 5)")
    fuzz_parser.add_argument("--height", type=int, default=None, help="Lattice height (default: env or 5)")
    fuzz_parser.set_defaults(command="fuzz")

    args = parser.parse_args(argv)
    # If no subcommand provided, default to fuzz
    if args.command is None:
        args.command = "fuzz"
    return args


def _ok(text: str) -> str:
    return f"{Fore.GREEN}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def _err(text: str) -> str:
    return f"{Fore.RED}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def _check_room(features: list[Feature]) -> int:
    try:
        room = Room(features)
    except VillasError as exc:
        print(_err(f"{exc.code}: {exc}"))
        log.info(event="check_room", ok=False, code=exc.code, features=len(features))
        return 1
    print(room)
    print(_ok("valid"))
    log.info(event="check_room", ok=True, features=len(features))
    return 0


def _place(width: int, height: int, features: list[Feature]) -> int:
    try:
        lattice = Lattice(width, height)
    except VillasError as exc:
        print(_err(f"{exc.code}: {exc}"))
        return 1
    try:
        lattice.place_many(features)
    except VillasError as exc:
        print(_err(f"{exc.code}: {exc}"))
        print(lattice)
        log.info(event="place", ok=False, code=exc.code, width=width, height=height)
        return 1
    print(lattice)
    log.info(event="place", ok=True, width=width, height=height, placements=len(features))
    return 0


def _fuzz(width: int, height: int, seed, placements: int, group_size: int) -> int:
    try:
        report = compare_batch_and_sequential(
            width, height, seed=seed, placements=placements, group_size=group_size
        )
    except (VillasError, ValueError) as exc:
        print(_err(f"{getattr(exc, 'code', 'invalid_argument')}: {exc}"))
        return 1
    print(json.dumps(report, indent=2))
    log.info(event="fuzz", seed=report["seed"], ok=report["ok"], mismatches=report["metrics"]["mismatches"])
    return 0 if report["ok"] else 1


def _pick(cli_value, default):
    return default if cli_value is None else cli_value


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    just_fix_windows_console()
    # Load .env (explicit path or nearest) before reading VILLAS_* variables
    try:
        config = load_config(getattr(args, "env_file", None))
    except ValueError as exc:
        print(_err(f"[ERROR] {exc}"))
        return 2
    configure_logging(config)

    mode = args.command
    width = _pick(getattr(args, "width", None), config.lattice_width)
    height = _pick(getattr(args, "height", None), config.lattice_height)

    if mode == "check-room":
        return _check_room(args.features)
    elif mode == "place":
        return _place(width, height, args.features)
    else:
        seed = _pick(getattr(args, "seed", None), config.fuzz_seed)
        placements = _pick(getattr(args, "placements", None), config.fuzz_placements)
        group_size = _pick(getattr(args, "group_size", None), config.fuzz_group_size)
        return _fuzz(width, height, seed, placements, group_size)


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
