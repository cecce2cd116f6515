"""
Loading and saving images as torch tensors.

Images are kept in 0-255 channel values rather than rescaled to [0, 1],
so energies come out in RGB distance units.
"""

import numpy as np
import torch
from PIL import Image


def load_image(path, device='cpu') -> torch.Tensor:
    """Load an image as a (3, H, W) uint8 tensor."""
    with Image.open(path) as img:
        img_array = np.array(img.convert('RGB'), dtype=np.uint8)
    return torch.from_numpy(img_array).permute(2, 0, 1).contiguous().to(device)


def to_pil(tensor: torch.Tensor) -> Image.Image:
    """Convert a (C, H, W) or (H, W) tensor with 0-255 values to a PIL image."""
    if tensor.dim() == 3:
        if tensor.shape[0] == 1:
            tensor = tensor[0]
        else:
            tensor = tensor.permute(1, 2, 0)
    elif tensor.dim() != 2:
        raise ValueError(f"Expected a (C, H, W) or (H, W) image, got shape {tuple(tensor.shape)}")

    img_array = tensor.detach().cpu().to(torch.float64).numpy()
    img_array = img_array.round().clip(0, 255).astype(np.uint8)
    return Image.fromarray(img_array)


def save_image(tensor: torch.Tensor, path):
    """Save a tensor as a PNG file, whatever the extension of ``path``."""
    to_pil(tensor).save(path, format='PNG')
