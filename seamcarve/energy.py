"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the dual-gradient magnitude: for every pixel, the Euclidean
distance in color space between its two horizontal neighbors and between
its two vertical neighbors, combined as sqrt(dx^2 + dy^2).
"""

import torch


def neighbor_pairs(n: int, device=None):
    """
    Neighbor indices sampled for each position along an axis of length n.

    Interior positions i use (i - 1, i + 1). The borders skip inward
    instead of wrapping or padding: index 0 uses (0, 2) and index n - 1
    uses (n - 3, n - 1). For n < 3 the pairs are clamped into [0, n - 1],
    so duplicated indices simply give a zero gradient.

    Args:
        n: Axis length (>= 1)
        device: torch device for the returned tensors

    Returns:
        (lo, hi) long tensors of shape (n,)
    """
    idx = torch.arange(n, dtype=torch.long, device=device)
    lo = idx - 1
    hi = idx + 1
    lo[-1] = n - 3
    hi[-1] = n - 1
    # First position wins when n == 1 and both rules apply
    lo[0] = 0
    hi[0] = 2
    return lo.clamp(0, n - 1), hi.clamp(0, n - 1)


def gradient_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute the dual-gradient energy of an image.

    E(x, y) = sqrt(||I(x+1, y) - I(x-1, y)||^2 + ||I(x, y+1) - I(x, y-1)||^2)

    with the border rule from ``neighbor_pairs``. The result is not
    normalized or clamped.

    Args:
        image: RGB image tensor (C, H, W) or grayscale (H, W), any dtype

    Returns:
        Energy map (H, W), float64
    """
    if image.dim() == 2:
        image = image.unsqueeze(0)
    elif image.dim() != 3:
        raise ValueError(f"Expected a (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")

    C, H, W = image.shape
    if H == 0 or W == 0:
        raise ValueError(f"Image must be at least 1x1, got {W}x{H}")

    pixels = image.to(torch.float64)
    left, right = neighbor_pairs(W, device=image.device)
    up, down = neighbor_pairs(H, device=image.device)

    x_grad = ((pixels[:, :, right] - pixels[:, :, left]) ** 2).sum(dim=0)
    y_grad = ((pixels[:, down, :] - pixels[:, up, :]) ** 2).sum(dim=0)

    return torch.sqrt(x_grad + y_grad)


def normalize_energy(energy: torch.Tensor, eps: float = 1e-8) -> torch.Tensor:
    """Remap energy to [0, 1] range.

    This is a monotonic transform so seam positions are unchanged.

    Args:
        energy: Energy map (H, W)
        eps: Small value to avoid division by zero

    Returns:
        Normalized energy map in [0, 1]
    """
    e_min = energy.min()
    e_max = energy.max()
    return (energy - e_min) / (e_max - e_min + eps)


def energy_to_image(energy: torch.Tensor) -> torch.Tensor:
    """Grayscale intensity image of an energy map: 255 * E / max(E).

    A flat zero field maps to black.
    """
    e_max = energy.max()
    if e_max <= 0:
        return torch.zeros(energy.shape, dtype=torch.uint8, device=energy.device)
    intensity = (255.0 * energy.to(torch.float64) / e_max).floor()
    return intensity.clamp(0, 255).to(torch.uint8)
