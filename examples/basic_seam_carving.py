"""
Basic seam carving example.

Shows the energy map, the first vertical and horizontal seams, and the
image after carving, side by side.

    python basic_seam_carving.py input.png --width 50 --height 20
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import matplotlib.pyplot as plt

from seamcarve import (carve_image, find_seam, gradient_energy, load_image,
                       mark_seam, normalize_energy)


def main():
    parser = argparse.ArgumentParser(description="Visualize seam carving on an image")
    parser.add_argument('image', type=str, help='Input image')
    parser.add_argument('--width', type=int, default=50,
                        help='Vertical seams to remove (default: 50)')
    parser.add_argument('--height', type=int, default=0,
                        help='Horizontal seams to remove (default: 0)')
    parser.add_argument('--output', type=str, default=None,
                        help='Save the figure here instead of showing it')
    args = parser.parse_args()

    print("Loading image...")
    image = load_image(args.image)
    C, H, W = image.shape
    print(f"Image shape: {C} x {H} x {W}")

    print("Computing energy...")
    energy = normalize_energy(gradient_energy(image))

    with_seams = image.clone()
    mark_seam(with_seams, find_seam(image, 'vertical'), 'vertical')
    mark_seam(with_seams, find_seam(image, 'horizontal'), 'horizontal', color=(0, 255, 0))

    print(f"Carving image (removing {args.width} vertical, {args.height} horizontal seams)...")

    def report(step, direction, seam):
        if step % 20 == 0:
            print(f"  Removed {step} {direction} seams")

    carved = carve_image(image, args.width, args.height, callback=report)

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    axes[0].imshow(energy.numpy(), cmap='gray')
    axes[0].set_title('Energy')
    axes[1].imshow(with_seams.permute(1, 2, 0).numpy())
    axes[1].set_title('First seams')
    axes[2].imshow(carved.permute(1, 2, 0).numpy())
    axes[2].set_title(f'Carved {carved.shape[2]} x {carved.shape[1]}')
    for ax in axes:
        ax.axis('off')
    plt.tight_layout()

    if args.output:
        plt.savefig(args.output, dpi=150)
        print(f"Saved: {args.output}")
    else:
        plt.show()


if __name__ == '__main__':
    main()
