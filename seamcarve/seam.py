"""
Seam computation and removal.

Pipeline for one seam:
1. Solver: dynamic program over the energy map giving, for every pixel,
   the minimum cumulative energy of a monotone path from the start edge
   and the neighbor on the previous row/column that achieves it.
2. Tracer: pick the cheapest pixel on the far edge and walk back to the
   start edge, leaving the straight line only for a strictly cheaper neighbor.
3. Compactor: drop the marked pixels, closing the gap in every row/column.

Seams are index tensors - for vertical: (H,) with column index per row,
for horizontal: (W,) with row index per column.
"""

import torch
from typing import List, Optional, Sequence, Tuple, Union

from .energy import gradient_energy
from .errors import InvalidSeamMaskError


DIRECTIONS = ('vertical', 'horizontal')

MARKER_COLOR = (255, 0, 0)


def _check_direction(direction: str):
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid direction: {direction}")


class SeamField:
    """
    Per-pixel DP state for one seam search.

    All tensors are (H, W) in image orientation:
    - energy: pixel energy (float64)
    - distance: minimum cumulative energy of a monotone path from the
      start edge (top row for vertical, left column for horizontal)
    - predecessor: index of the best neighbor on the previous row
      (vertical: a column) or previous column (horizontal: a row);
      -1 on the start edge
    """

    def __init__(self, energy: torch.Tensor, distance: torch.Tensor,
                 predecessor: torch.Tensor, direction: str):
        self.energy = energy
        self.distance = distance
        self.predecessor = predecessor
        self.direction = direction

    def _oriented(self, t: torch.Tensor) -> torch.Tensor:
        # Rows of the result are the DP steps
        return t if self.direction == 'vertical' else t.T


def _sweep(energy: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """Top-to-bottom DP over the rows of ``energy``.

    Each row is processed as a whole; only the dependency on the previous
    row is sequential.
    """
    n_steps, n_cells = energy.shape
    device = energy.device

    distance = torch.empty_like(energy)
    predecessor = torch.full((n_steps, n_cells), -1, dtype=torch.long, device=device)
    distance[0] = energy[0]

    cells = torch.arange(n_cells, dtype=torch.long, device=device)
    inf = torch.full((1,), float('inf'), dtype=energy.dtype, device=device)

    for i in range(1, n_steps):
        prev = distance[i - 1]
        # Candidates ordered by increasing neighbor index, so argmin's
        # first-minimum rule keeps the lowest index on ties
        candidates = torch.stack([
            torch.cat([inf, prev[:-1]]),
            prev,
            torch.cat([prev[1:], inf]),
        ])
        offset = torch.argmin(candidates, dim=0)
        best = candidates.gather(0, offset.unsqueeze(0)).squeeze(0)
        distance[i] = energy[i] + best
        predecessor[i] = cells + offset - 1

    return distance, predecessor


def compute_seam_field(energy: torch.Tensor, direction: str = 'vertical') -> SeamField:
    """
    Run the shortest-seam dynamic program.

    Vertical: distance[0, x] = energy[0, x] and for y >= 1
        distance[y, x] = energy[y, x] + min(distance[y-1, x'])
    over x' in {x-1, x, x+1} clipped to the image. Horizontal is the same
    sweep over columns, left to right. Ties go to the smallest index.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        SeamField with distance and predecessor for every pixel
    """
    _check_direction(direction)
    if energy.dim() != 2:
        raise ValueError(f"Expected an (H, W) energy map, got shape {tuple(energy.shape)}")

    energy = energy.to(torch.float64)

    if direction == 'vertical':
        distance, predecessor = _sweep(energy)
    else:
        distance, predecessor = _sweep(energy.T.contiguous())
        distance, predecessor = distance.T, predecessor.T

    return SeamField(energy, distance, predecessor, direction)


def trace_seam(field: SeamField) -> torch.Tensor:
    """
    Backtrack the cheapest seam out of a solved field.

    The seam ends at the far-edge pixel (bottom row / right column) with
    the smallest distance, first one in scan order on ties, and walks back
    to the start edge. Each step stays on the same index unless the
    predecessor is strictly cheaper, so straight moves win ties.

    Returns:
        Seam indices ordered from the start edge
    """
    distance = field._oriented(field.distance)
    predecessor = field._oriented(field.predecessor)
    n_steps = distance.shape[0]

    seam = torch.empty(n_steps, dtype=torch.long, device=distance.device)
    current = int(torch.argmin(distance[-1]).item())
    seam[-1] = current
    for i in range(n_steps - 1, 0, -1):
        candidate = int(predecessor[i, current].item())
        if distance[i - 1, candidate] < distance[i - 1, current]:
            current = candidate
        seam[i - 1] = current

    return seam


def find_seam(image: torch.Tensor, direction: str = 'vertical') -> torch.Tensor:
    """Energy, DP and backtracking for the next seam of ``image``."""
    energy = gradient_energy(image)
    field = compute_seam_field(energy, direction=direction)
    return trace_seam(field)


def seam_coordinates(seam: torch.Tensor, direction: str = 'vertical') -> List[Tuple[int, int]]:
    """Seam as ordered (x, y) pixel coordinates, starting at the start edge."""
    _check_direction(direction)
    if direction == 'vertical':
        return [(x, y) for y, x in enumerate(seam.tolist())]
    return [(x, y) for x, y in enumerate(seam.tolist())]


def seam_mask(seam: torch.Tensor, shape: Tuple[int, int],
              direction: str = 'vertical') -> torch.Tensor:
    """
    Boolean (H, W) mask that is True exactly on the seam pixels.

    Args:
        seam: Seam indices
        shape: (H, W) of the image the seam belongs to
        direction: 'vertical' or 'horizontal'
    """
    _check_direction(direction)
    H, W = shape
    n_steps, n_cells = (H, W) if direction == 'vertical' else (W, H)

    if seam.shape != (n_steps,):
        raise ValueError(f"A {direction} seam for a {W}x{H} image needs {n_steps} "
                         f"entries, got shape {tuple(seam.shape)}")
    if n_steps and (seam.min() < 0 or seam.max() >= n_cells):
        raise ValueError(f"Seam indices must lie in [0, {n_cells - 1}]")

    mask = torch.zeros(H, W, dtype=torch.bool, device=seam.device)
    steps = torch.arange(n_steps, dtype=torch.long, device=seam.device)
    if direction == 'vertical':
        mask[steps, seam] = True
    else:
        mask[seam, steps] = True
    return mask


def mark_seam(image: torch.Tensor, seam: torch.Tensor, direction: str = 'vertical',
              color: Optional[Union[Sequence[float], float]] = None) -> torch.Tensor:
    """
    Paint a seam onto an image in place.

    Only the seam pixels are overwritten. Returns the same tensor.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices
        direction: 'vertical' or 'horizontal'
        color: One value per channel (defaults to red for RGB, 255 for
            grayscale); a single value is used for every channel
    """
    mask = seam_mask(seam, tuple(image.shape[-2:]), direction=direction)

    if image.dim() == 2:
        value = torch.as_tensor(255 if color is None else color,
                                dtype=image.dtype, device=image.device)
        if value.numel() != 1:
            raise ValueError("Grayscale images take a single marker value")
        image[mask] = value.reshape(())
        return image

    C = image.shape[0]
    value = torch.as_tensor(MARKER_COLOR if color is None else color,
                            dtype=image.dtype, device=image.device).reshape(-1)
    if value.numel() == 1:
        value = value.expand(C)
    if value.numel() != C:
        raise ValueError(f"Marker color has {value.numel()} channels, image has {C}")

    image[:, mask] = value.unsqueeze(1)
    return image


def remove_marked(image: torch.Tensor, mask: torch.Tensor,
                  direction: str = 'vertical') -> torch.Tensor:
    """
    Remove the masked pixels from an image.

    The mask must mark exactly one pixel per row (vertical) or per column
    (horizontal); it is checked before anything is copied. Remaining
    pixels keep their relative order.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        mask: Boolean (H, W) tensor
        direction: 'vertical' or 'horizontal'

    Returns:
        New image with one column (vertical) or row (horizontal) fewer
    """
    _check_direction(direction)
    if image.dim() == 2:
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    C, H, W = image.shape
    if mask.shape != (H, W):
        raise InvalidSeamMaskError(f"Mask shape {tuple(mask.shape)} does not match image {(H, W)}")
    mask = mask.to(torch.bool)

    per_line = mask.sum(dim=1) if direction == 'vertical' else mask.sum(dim=0)
    if not (per_line == 1).all():
        axis = 'row' if direction == 'vertical' else 'column'
        raise InvalidSeamMaskError(
            f"A {direction} seam mask must mark exactly one pixel per {axis}, "
            f"got counts {per_line.tolist()}"
        )

    keep = ~mask
    if direction == 'vertical':
        # Boolean indexing walks the kept pixels in row-major order
        carved = image[:, keep].reshape(C, H, W - 1)
    else:
        carved = image.transpose(1, 2)[:, keep.T].reshape(C, W, H - 1)
        carved = carved.transpose(1, 2).contiguous()

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved


def remove_seam(image: torch.Tensor, seam: torch.Tensor,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove a seam from an image.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image with one row/column removed
    """
    mask = seam_mask(seam, tuple(image.shape[-2:]), direction=direction)
    return remove_marked(image, mask, direction=direction)
