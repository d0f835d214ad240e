#!/usr/bin/env python3
"""
Filename utilities for generating output filenames.
"""

import os
import logging

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 180


def _reserve(candidate: str) -> bool:
    """Create ``candidate`` exclusively; False if it already exists."""
    try:
        with open(candidate, "x"):
            pass
        return True
    except FileExistsError:
        return False
    except OSError as e:
        logger.error(f"Cannot create file {candidate}: {e}")
        raise ValueError(f"Cannot create file: {e}")


def generate_output_filename(input_filename: str, extension: str, label: str = "") -> str:
    """
    Generates an output filename next to the input and reserves it by creating an empty file.

    Strategy:
    1. If input ends with .gpx (case-insensitive), drop it
    2. Append the label (if any) and the extension
    3. If file exists, try " (1)", " (2)", etc. before the extension
    4. Stop at 180 attempts
    5. Use exclusive open (`open(path, 'x')`) to avoid race conditions and reserve the name.

    Args:
        input_filename: Path to the input GPX file
        extension: Output extension including the dot, e.g. ".geojson"
        label: Text appended to the base name, e.g. " map"

    Returns:
        Safe output filename that has been created as an empty file to reserve its name

    Raises:
        RuntimeError: If no available filename found after 180 attempts
        ValueError: If a filename cannot be created (e.g., due to permissions or an invalid name detected by the OS)
    """
    input_dir = os.path.dirname(input_filename)
    input_base = os.path.basename(input_filename)

    if input_base.lower().endswith(".gpx"):
        base_name = input_base[:-4]
    else:
        base_name = input_base

    base_output = base_name + label

    candidate = os.path.join(input_dir, base_output + extension)
    if _reserve(candidate):
        return candidate

    for i in range(1, MAX_ATTEMPTS + 1):
        candidate = os.path.join(input_dir, f"{base_output} ({i}){extension}")
        if _reserve(candidate):
            return candidate

    logger.error(
        f"Could not find an available filename after {MAX_ATTEMPTS} attempts. "
        f"Please clean up your output directory or specify --output explicitly."
    )
    raise RuntimeError(f"No available filename found after {MAX_ATTEMPTS} attempts")
