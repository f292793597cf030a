"""
Utility functions for the pathquilt project.

This module provides helper functions for loading, saving, and visualizing
exemplars, synthesized textures and their seams.
"""

import os
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.gridspec import GridSpec
from PIL import Image


def load_texture(path: str) -> np.ndarray:
    """Loads a texture image from a file path into a NumPy array (RGB).

    Grayscale and RGBA images are converted to RGB.

    Args:
        path: Path to the texture image file.

    Returns:
        Texture image as a uint8 NumPy array (H, W, 3).

    Raises:
        OSError: If the file cannot be opened or decoded.
    """
    with Image.open(path) as image:
        if image.mode != 'RGB':
            image = image.convert('RGB')
        return np.array(image)


def save_image(image: np.ndarray, path: str):
    """Saves a NumPy image array to a file, creating its directory.

    Args:
        image: NumPy array representing the image (H, W, 3 or H, W).
        path: Output file path.

    Raises:
        OSError: If the image cannot be encoded or written.
    """
    if image.dtype != np.uint8:
        image = np.clip(image, 0, 255).astype(np.uint8)

    dir_path = os.path.dirname(path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    Image.fromarray(image).save(path)


def _figure_to_array(fig) -> np.ndarray:
    """Renders a Matplotlib figure into an RGB array and closes it."""
    fig.canvas.draw()
    img = np.asarray(fig.canvas.buffer_rgba())[:, :, :3].copy()
    plt.close(fig)
    return img


def visualize_results(original_texture: np.ndarray, synthesized_texture: np.ndarray,
                      title: Optional[str] = None, save_path: Optional[str] = None) -> np.ndarray:
    """Visualizes original and synthesized textures side-by-side using Matplotlib.

    Args:
        original_texture: The exemplar.
        synthesized_texture: The quilted texture.
        title: Optional title for the entire visualization.
        save_path: Optional path to save the visualization image.

    Returns:
        A NumPy array representing the visualization image (RGB).
    """
    fig = plt.figure(figsize=(12, 6))

    plt.subplot(1, 2, 1)
    plt.imshow(original_texture)
    plt.title('Exemplar')
    plt.axis('off')

    plt.subplot(1, 2, 2)
    plt.imshow(synthesized_texture)
    plt.title('Synthesized Texture')
    plt.axis('off')

    if title:
        plt.suptitle(title, fontsize=16)

    plt.tight_layout()

    if save_path:
        save_dir = os.path.dirname(save_path)
        if save_dir:
            os.makedirs(save_dir, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return _figure_to_array(fig)


def overlay_seams(synthesized_texture: np.ndarray, seam_map: np.ndarray,
                  color=(255, 0, 0)) -> np.ndarray:
    """Returns a copy of the texture with seam pixels painted in `color`."""
    overlay = synthesized_texture.copy()
    overlay[seam_map] = color
    return overlay


def visualize_seams(synthesized_texture: np.ndarray, seam_map: np.ndarray,
                    save_path: Optional[str] = None) -> np.ndarray:
    """Shows the synthesized texture next to the same texture with its seams drawn.

    Args:
        synthesized_texture: The quilted texture (H, W, 3).
        seam_map: Boolean (H, W) map of seam pixels, as returned by the
            driver with `return_seam_map=True`.
        save_path: Optional path to save the visualization image.

    Returns:
        A NumPy array representing the visualization image (RGB).
    """
    fig = plt.figure(figsize=(12, 6))
    gs = GridSpec(1, 2, figure=fig)

    ax1 = fig.add_subplot(gs[0, 0])
    ax1.imshow(synthesized_texture)
    ax1.set_title('Synthesized Texture')
    ax1.axis('off')

    ax2 = fig.add_subplot(gs[0, 1])
    ax2.imshow(overlay_seams(synthesized_texture, seam_map))
    ax2.set_title(f'Seams ({int(seam_map.sum())} px)')
    ax2.axis('off')

    plt.tight_layout()

    if save_path:
        save_dir = os.path.dirname(save_path)
        if save_dir:
            os.makedirs(save_dir, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return _figure_to_array(fig)
