"""Shared test fixtures for the seamcarve test suite."""

import itertools
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


@pytest.fixture
def random_image():
    """Reproducible 3 x 12 x 16 RGB image with 0-255 values."""
    torch.manual_seed(42)
    return torch.randint(0, 256, (3, 12, 16), dtype=torch.uint8)


def make_solid_image(H, W, color=(0, 0, 0), dtype=torch.uint8):
    """RGB image filled with one color."""
    image = torch.empty(3, H, W, dtype=dtype)
    for c, value in enumerate(color):
        image[c] = value
    return image


def make_dot_image(H, W, x, y, color=(255, 255, 255)):
    """Black RGB image with a single colored pixel at (x, y)."""
    image = make_solid_image(H, W)
    image[:, y, x] = torch.tensor(color, dtype=torch.uint8)
    return image


def brute_force_min_path(energy, end_col):
    """Cheapest monotone top-to-bottom path ending at (H - 1, end_col).

    Enumerates every sequence of -1/0/+1 steps, so only use on tiny maps.
    """
    H, W = energy.shape
    best = float('inf')
    for steps in itertools.product((-1, 0, 1), repeat=H - 1):
        cols = [end_col]
        for step in steps:
            cols.append(cols[-1] + step)
        if any(c < 0 or c >= W for c in cols):
            continue
        rows = range(H - 1, -1, -1)
        total = sum(energy[r, c].item() for r, c in zip(rows, cols))
        best = min(best, total)
    return best


def assert_valid_seam(seam, n_steps, n_cells):
    """One index per step, inside the image, moving at most one cell per step."""
    assert seam.shape == (n_steps,)
    assert seam.dtype == torch.long
    assert (seam >= 0).all() and (seam < n_cells).all()
    if n_steps > 1:
        assert (seam[1:] - seam[:-1]).abs().max() <= 1
