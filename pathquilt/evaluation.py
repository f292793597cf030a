"""
Texture-quality metrics for quilting results.
"""

import logging
from typing import Optional

import cv2
import numpy as np
from skimage.metrics import structural_similarity as ssim

logger = logging.getLogger(__name__)


def compute_ssim_patches(original, synthesized, patch_size=64, num_patches=20,
                         rng: Optional[np.random.Generator] = None):
    """
    Compute SSIM between random patches from original and synthesized textures.

    Parameters:
    -----------
    original : ndarray
        Exemplar texture (H, W, 3)
    synthesized : ndarray
        Synthesized texture (H, W, 3)
    patch_size : int
        Size of patches to compare
    num_patches : int
        Number of random patch pairs to sample
    rng : numpy.random.Generator, optional
        Source of randomness, for reproducible scores

    Returns:
    --------
    float
        Average SSIM value, 0.0 when the images are too small to compare
    """
    rng = rng if rng is not None else np.random.default_rng()
    h_orig, w_orig = original.shape[:2]
    h_synth, w_synth = synthesized.shape[:2]

    patch_size = min(patch_size, h_orig, w_orig, h_synth, w_synth)
    if patch_size < 7:  # smallest SSIM window
        return 0.0

    ssim_values = []
    for _ in range(num_patches):
        i_orig = rng.integers(0, h_orig - patch_size + 1)
        j_orig = rng.integers(0, w_orig - patch_size + 1)
        patch_orig = original[i_orig:i_orig + patch_size, j_orig:j_orig + patch_size]

        i_synth = rng.integers(0, h_synth - patch_size + 1)
        j_synth = rng.integers(0, w_synth - patch_size + 1)
        patch_synth = synthesized[i_synth:i_synth + patch_size, j_synth:j_synth + patch_size]

        ssim_values.append(ssim(patch_orig, patch_synth, data_range=255,
                                channel_axis=2, win_size=7))

    return float(np.mean(ssim_values))


def compute_histogram_distance(original, synthesized, bins=64):
    """
    Chi-square distance between per-channel colour histograms, averaged over channels.

    Returns 0.0 for identical colour distributions.
    """
    distances = []

    for c in range(3):
        hist_orig = cv2.calcHist([np.ascontiguousarray(original)], [c], None, [bins], [0, 256])
        hist_synth = cv2.calcHist([np.ascontiguousarray(synthesized)], [c], None, [bins], [0, 256])

        hist_orig = hist_orig.flatten() / hist_orig.sum()
        hist_synth = hist_synth.flatten() / hist_synth.sum()

        distance = 0.5 * np.sum((hist_orig - hist_synth) ** 2 / (hist_orig + hist_synth + 1e-10))
        distances.append(distance)

    return float(np.mean(distances))


def gradient_magnitude(image):
    """Sobel gradient magnitude of the grayscale image."""
    gray = cv2.cvtColor(np.ascontiguousarray(image), cv2.COLOR_RGB2GRAY).astype(np.float32)
    gx = cv2.Sobel(gray, cv2.CV_32F, 1, 0, ksize=3)
    gy = cv2.Sobel(gray, cv2.CV_32F, 0, 1, ksize=3)
    return cv2.magnitude(gx, gy)


def compute_seam_visibility(synthesized, seam_map):
    """
    Ratio of the mean gradient on seam pixels to the mean gradient elsewhere.

    A value near 1.0 means the cuts are no more visible than the texture's
    own structure; larger values point at visible seams. Returns 1.0 when
    there is nothing to compare (no seam, or nothing but seam).
    """
    seam_map = np.asarray(seam_map, dtype=bool)
    if not seam_map.any() or seam_map.all():
        return 1.0
    magnitude = gradient_magnitude(synthesized)
    on_seam = float(magnitude[seam_map].mean())
    off_seam = float(magnitude[~seam_map].mean())
    if off_seam == 0.0:
        return 1.0 if on_seam == 0.0 else float('inf')
    return on_seam / off_seam


def evaluate_texture_quality(original, synthesized, seam_map=None, rng=None):
    """
    Evaluate synthesized texture quality.

    Returns:
    --------
    dict
        'ssim', 'histogram_distance' and, when a seam map is given,
        'seam_visibility'
    """
    results = {
        'ssim': compute_ssim_patches(original, synthesized, rng=rng),
        'histogram_distance': compute_histogram_distance(original, synthesized),
    }
    if seam_map is not None:
        results['seam_visibility'] = compute_seam_visibility(synthesized, seam_map)

    logger.info("Quality: %s", ", ".join(f"{k}={v:.4f}" for k, v in results.items()))
    return results
