"""
Content-aware image resizing by seam carving.

Repeatedly removes the connected path of pixels (a seam) with the lowest
total gradient energy, shrinking the image one column or row at a time.
"""

__version__ = "0.1.0"

from .errors import SeamCarvingError, DimensionExhaustedError, InvalidSeamMaskError
from .energy import gradient_energy, neighbor_pairs, normalize_energy, energy_to_image
from .seam import (SeamField, compute_seam_field, trace_seam, find_seam, seam_coordinates,
                   seam_mask, mark_seam, remove_marked, remove_seam)
from .carving import carve_image, carve_seams
from .image_io import load_image, save_image

__all__ = [
    'SeamCarvingError',
    'DimensionExhaustedError',
    'InvalidSeamMaskError',
    'gradient_energy',
    'neighbor_pairs',
    'normalize_energy',
    'energy_to_image',
    'SeamField',
    'compute_seam_field',
    'trace_seam',
    'find_seam',
    'seam_coordinates',
    'seam_mask',
    'mark_seam',
    'remove_marked',
    'remove_seam',
    'carve_image',
    'carve_seams',
    'load_image',
    'save_image',
]
