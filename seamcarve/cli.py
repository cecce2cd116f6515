"""
Command-line front end: resize an image by seam carving.

Usage:
    seamcarve -in input.png -out output.png -width 20 -height 10
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .carving import carve_image
from .energy import energy_to_image, gradient_energy
from .errors import SeamCarvingError
from .image_io import load_image, save_image
from .seam import find_seam, mark_seam


@dataclass
class CarveConfig:
    """Validated settings for one carving run."""

    input: Path
    output: Path
    vertical_seams: int = 0
    horizontal_seams: int = 0
    energy_output: Optional[Path] = None
    mark_only: bool = False
    quiet: bool = False

    def validate(self):
        if self.vertical_seams < 0:
            raise ValueError(f"-width must be >= 0, got {self.vertical_seams}")
        if self.horizontal_seams < 0:
            raise ValueError(f"-height must be >= 0, got {self.horizontal_seams}")
        return self


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarve',
        description="Content-aware image resizing by seam carving"
    )
    parser.add_argument(
        '-in', '--input',
        type=Path,
        required=True,
        help='Input image file'
    )
    parser.add_argument(
        '-out', '--output',
        type=Path,
        required=True,
        help='Output image file (written as PNG)'
    )
    parser.add_argument(
        '-width', '--width',
        type=int,
        default=0,
        help='Number of vertical seams to remove (default: 0)'
    )
    parser.add_argument(
        '-height', '--height',
        type=int,
        default=0,
        help='Number of horizontal seams to remove (default: 0)'
    )
    parser.add_argument(
        '--energy',
        type=Path,
        help='Also save the energy map of the input image to this file'
    )
    parser.add_argument(
        '--mark',
        action='store_true',
        help='Draw the next seam in red instead of carving '
             '(horizontal if only -height is given)'
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Do not print progress'
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> CarveConfig:
    """Parse command-line arguments into a validated CarveConfig."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = CarveConfig(
        input=args.input,
        output=args.output,
        vertical_seams=args.width,
        horizontal_seams=args.height,
        energy_output=args.energy,
        mark_only=args.mark,
        quiet=args.quiet,
    )
    try:
        return config.validate()
    except ValueError as e:
        parser.error(str(e))


def run(config: CarveConfig):
    """Carve (or mark) the configured image and write the result."""
    log = (lambda *a: None) if config.quiet else print

    image = load_image(config.input)
    C, H, W = image.shape
    log(f"Loaded {config.input}: {W} x {H}")

    if config.energy_output is not None:
        save_image(energy_to_image(gradient_energy(image)), config.energy_output)
        log(f"Saved energy map: {config.energy_output}")

    if config.mark_only:
        direction = 'horizontal' if config.horizontal_seams and not config.vertical_seams else 'vertical'
        seam = find_seam(image, direction=direction)
        result = mark_seam(image, seam, direction=direction)
        log(f"Marked {direction} seam")
    else:
        totals = {'vertical': config.vertical_seams, 'horizontal': config.horizontal_seams}

        def report(step, direction, seam):
            if step % 20 == 0 or step == totals[direction]:
                log(f"  Removed {step}/{totals[direction]} {direction} seams")

        result = carve_image(image, config.vertical_seams, config.horizontal_seams,
                             callback=report)

    save_image(result, config.output)
    log(f"Saved: {config.output} ({result.shape[-1]} x {result.shape[-2]})")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    try:
        run(config)
    except (SeamCarvingError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
