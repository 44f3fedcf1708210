"""Command-line interface for cave generation."""

import argparse
import logging
import time
import tomllib

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog console output."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a connected cellular automaton cave map"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of a TOML config (default: built-in defaults)",
    )
    parser.add_argument("--width", type=int, default=None, help="Map width (overrides config)")
    parser.add_argument("--height", type=int, default=None, help="Map height (overrides config)")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (default: fresh entropy)"
    )
    parser.add_argument(
        "--fill-probability",
        type=float,
        default=None,
        help="Initial wall probability (overrides config)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Smoothing iterations (overrides config)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for cave generation."""
    args = build_parser().parse_args(argv)

    configure_logging(args.verbose)
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from pydantic import ValidationError

    from .config import CaveConfig, find_config, load_config
    from .generation import generate_cave, validate_cave
    from .types import Cell

    if args.config:
        try:
            config_path = find_config(args.config)
        except FileNotFoundError as e:
            logger.error("config_not_found", path=args.config, error=str(e))
            return 1
        try:
            config = load_config(config_path)
        except (tomllib.TOMLDecodeError, ValidationError) as e:
            logger.error("invalid_config", path=str(config_path), error=str(e))
            return 1
        logger.info("config_loaded", path=str(config_path))
    else:
        config = CaveConfig()

    overrides = {
        "seed": args.seed,
        "width": args.width,
        "height": args.height,
    }
    automaton_overrides = {
        "fill_probability": args.fill_probability,
        "smooth_iterations": args.iterations,
    }
    data = config.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    data["automaton"].update(
        {k: v for k, v in automaton_overrides.items() if v is not None}
    )
    try:
        config = CaveConfig.model_validate(data)
    except ValidationError as e:
        logger.error("invalid_config", error=str(e))
        return 1

    start_time = time.time()
    result = generate_cave(config)
    gen_time = time.time() - start_time

    validation = validate_cave(result.grid, config)

    grid = result.grid
    open_cells = grid.width * grid.height - grid.count(Cell.WALL)

    print()
    print(f"Generated {grid.width}x{grid.height} cave with seed {result.seed}")
    print(f"Open cells: {open_cells:,} ({open_cells / grid.cells.size:.1%})")
    print(
        f"Rooms: {result.connectivity.regions_found} found, "
        f"{result.connectivity.rooms_filled} filled, "
        f"{result.connectivity.rooms_connected} connected"
    )
    print(f"Wall clusters removed: {result.clusters_removed}")
    if result.endpoints is not None:
        print(f"Start: {result.endpoints.start}  End: {result.endpoints.end}")
        print(f"Straight-line distance: {result.endpoints.distance:.1f} cells")
    else:
        print(f"Endpoints not placed: {result.placement_error}")
    print(f"Generation complete in {gen_time:.2f}s")

    return 0 if validation.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
