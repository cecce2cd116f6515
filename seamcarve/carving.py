"""
High-level carving functions that orchestrate the seam removal loop.
"""

import torch
from typing import Callable, Optional

from .errors import DimensionExhaustedError
from .seam import _check_direction, find_seam, remove_seam


SeamCallback = Callable[[int, str, torch.Tensor], None]


def _check_count(n_seams, name: str) -> int:
    if isinstance(n_seams, bool) or not isinstance(n_seams, int):
        raise ValueError(f"{name} must be an integer, got {n_seams!r}")
    if n_seams < 0:
        raise ValueError(f"{name} must be >= 0, got {n_seams}")
    return n_seams


def _check_image(image: torch.Tensor):
    if image.dim() not in (2, 3):
        raise ValueError(f"Expected a (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")
    H, W = image.shape[-2:]
    if H == 0 or W == 0:
        raise ValueError(f"Image must be at least 1x1, got {W}x{H}")


def _check_budget(image: torch.Tensor, vertical_seams: int, horizontal_seams: int):
    H, W = image.shape[-2:]
    # At least one column/row has to survive
    if vertical_seams >= W:
        raise DimensionExhaustedError('vertical', vertical_seams, W)
    if horizontal_seams >= H:
        raise DimensionExhaustedError('horizontal', horizontal_seams, H)


def carve_seams(image: torch.Tensor, n_seams: int, direction: str = 'vertical',
                callback: Optional[SeamCallback] = None) -> torch.Tensor:
    """
    Remove ``n_seams`` seams in one direction.

    Energy, DP and backtracking are redone for every seam because each
    removal changes the neighborhoods of the remaining pixels.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        n_seams: Number of seams to remove
        direction: 'vertical' or 'horizontal'
        callback: Called as callback(step, direction, seam) after each removal

    Returns:
        Carved image
    """
    _check_direction(direction)
    _check_image(image)
    n_seams = _check_count(n_seams, 'n_seams')
    if direction == 'vertical':
        _check_budget(image, n_seams, 0)
    else:
        _check_budget(image, 0, n_seams)

    carved = image.clone()

    for i in range(n_seams):
        seam = find_seam(carved, direction=direction)
        carved = remove_seam(carved, seam, direction=direction)
        if callback is not None:
            callback(i + 1, direction, seam)

    return carved


def carve_image(image: torch.Tensor, vertical_seams: int = 0, horizontal_seams: int = 0,
                callback: Optional[SeamCallback] = None) -> torch.Tensor:
    """
    Content-aware resize: all vertical seams first, then all horizontal.

    Every precondition is checked before carving starts, so an invalid
    request never yields a partially carved image. The input is not
    modified.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        vertical_seams: Seams to remove along the width
        horizontal_seams: Seams to remove along the height
        callback: Called as callback(step, direction, seam) after each
            removal; step counts per direction

    Returns:
        Image of size (W - vertical_seams) x (H - horizontal_seams)

    Raises:
        DimensionExhaustedError: if a count would leave no column/row
    """
    _check_image(image)
    vertical_seams = _check_count(vertical_seams, 'vertical_seams')
    horizontal_seams = _check_count(horizontal_seams, 'horizontal_seams')
    _check_budget(image, vertical_seams, horizontal_seams)

    carved = carve_seams(image, vertical_seams, 'vertical', callback=callback)
    carved = carve_seams(carved, horizontal_seams, 'horizontal', callback=callback)
    return carved
