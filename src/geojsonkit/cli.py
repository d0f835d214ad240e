#!/usr/bin/env python3
"""
GPX to GeoJSON converter.

This script loads the waypoints, tracks and routes of a GPX file into a
GeoJSON FeatureCollection, writes it as JSON and can render an interactive
HTML map of the result.
"""

from typing import List, Optional
import webbrowser
import argparse
import logging
import sys
import os
from gpxpy import gpx

from . import __version__
from . import visualization
from .config import GeoJsonKitConfig
from .feature import FeatureCollection
from .file_utils import generate_output_filename
from .geometry import CoordinateRangeError
from .gpx import feature_collection_from_file
from .serialization import write_file

# Configure logging
logger = logging.getLogger("geojsonkit")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Convert a GPX file to GeoJSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="GPX file to process",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output GeoJSON file (default: auto-generated based on input filename)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation, 0 for compact output (default: 2)",
    )
    parser.add_argument(
        "--map",
        action="store_true",
        help="Also write an interactive HTML map of the features",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Don't automatically open the HTML map in browser",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"geojsonkit {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GeoJsonKitConfig:
    """Build the run configuration from parsed arguments."""
    return GeoJsonKitConfig(
        indent=args.indent,
        write_map=args.map,
        open_map=not args.no_open,
        log_level=args.log_level,
    )


def determine_output_filename(input_filename: str, output_arg: Optional[str]) -> str:
    """
    Determine the GeoJSON output filename to use.

    Args:
        input_filename: Path to the input GPX file
        output_arg: Value from --output argument (None if not specified)

    Returns:
        Output filename to use

    Raises:
        RuntimeError: If auto-generation fails
        ValueError: If constructed filename would be illegal
    """
    if output_arg is not None:
        return output_arg

    try:
        return generate_output_filename(input_filename, ".geojson")
    except (RuntimeError, ValueError) as e:
        logger.error(f"Failed to generate output filename: {e}")
        raise


def open_file_in_browser(filename: str) -> None:
    """
    Open the specified file in the default browser.

    Args:
        filename: Path to the file to open
    """
    abs_path = os.path.abspath(filename)
    try:
        webbrowser.open(f"file://{abs_path}")
        logger.debug(f"Opening {abs_path} in your default browser...")
    except webbrowser.Error as e:
        logger.warning(f"Could not automatically open browser: {e}")
        logger.warning(f"Please manually open {abs_path}")


def setup_logging(config: GeoJsonKitConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def log_summary(collection: FeatureCollection) -> None:
    """Log feature counts by geometry type and the total track length."""
    counts: dict = {}
    total_length = 0.0
    for feature in collection:
        geometry_type = (
            feature.geometry.geojson_type if feature.geometry is not None else "null"
        )
        counts[geometry_type] = counts.get(geometry_type, 0) + 1
        length = feature.properties.get("length_m")
        if isinstance(length, (int, float)):
            total_length += length

    summary = ", ".join(f"{count} {name}" for name, count in sorted(counts.items()))
    logger.info(f"Loaded {len(collection)} features ({summary or 'none'})")
    logger.info(f"Total track and route length: {total_length / 1000:.2f} km")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parses command-line arguments, converts the GPX file to GeoJSON
    and optionally generates an interactive map.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.filename:
        parser.print_help()
        sys.exit(1)

    config = config_from_args(args)
    setup_logging(config)

    try:
        collection = feature_collection_from_file(args.filename)
    except FileNotFoundError:
        logger.error(f"GPX file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read GPX file (permission denied): {args.filename}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    except CoordinateRangeError as e:
        logger.error(f"Invalid coordinate in GPX file: {e}")
        sys.exit(1)

    log_summary(collection)

    try:
        output_filename = determine_output_filename(args.filename, args.output)
        logger.debug(f"Output filename: {output_filename}")
        write_file(collection, output_filename, indent=config.indent)
    except (RuntimeError, ValueError, OSError) as e:
        logger.error(f"Failed to write GeoJSON: {e}")
        sys.exit(1)

    print(output_filename)

    if not config.write_map:
        return

    if not collection:
        logger.warning("No features to show on a map")
        return

    try:
        map_filename = generate_output_filename(args.filename, ".html", " map")
        visualization.create_feature_map(collection, map_filename)
    except (RuntimeError, ValueError, OSError) as e:
        logger.error(f"Failed to create map: {e}")
        sys.exit(1)

    print(map_filename)

    if config.open_map:
        open_file_in_browser(map_filename)


if __name__ == "__main__":
    main()
