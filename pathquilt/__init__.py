"""Image Quilting with minimum-cost path-cut seams.

This package implements patch-based texture synthesis in the manner of
Efros & Freeman: tiles sampled from a small exemplar are placed on a
row-major grid, chosen among the candidates that best match their already
placed neighbours, and joined along dynamic-programming seams.
"""

__version__ = '0.2.0'

from .errors import ConfigurationError, ExemplarTooSmallError, QuiltingError
from .params import QuiltingParams
from .quilting import ImageQuilting, synthesize
from .sampler import CandidatePatch, CandidateSampler
from .seam import accumulate_cost, horizontal_seam, vertical_seam
from .tiling import TileGrid, TilePosition
from .utils import load_texture, save_image, visualize_results, visualize_seams

__all__ = [
    'ImageQuilting',
    'synthesize',
    'QuiltingParams',
    'QuiltingError',
    'ConfigurationError',
    'ExemplarTooSmallError',
    'CandidatePatch',
    'CandidateSampler',
    'TileGrid',
    'TilePosition',
    'accumulate_cost',
    'vertical_seam',
    'horizontal_seam',
    'load_texture',
    'save_image',
    'visualize_results',
    'visualize_seams',
]
