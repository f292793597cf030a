"""
Main script for path-cut Image Quilting texture synthesis.
Usage: python main.py --input texture.png --output result.png
"""

import argparse
import logging
import sys
import time

from pathquilt import (ImageQuilting, QuiltingError, QuiltingParams, load_texture,
                       save_image, visualize_seams)
from pathquilt.evaluation import evaluate_texture_quality


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Image Quilting Texture Synthesis')
    parser.add_argument('--input', type=str, required=True, help='Input texture image path')
    parser.add_argument('--output', type=str, default='output.png', help='Output image path')
    parser.add_argument('--tile-size', type=int, default=32, help='Tile size')
    parser.add_argument('--overlap', type=int, default=None,
                        help='Overlap in pixels (default: derived from --overlap-ratio)')
    parser.add_argument('--overlap-ratio', type=float, default=1/6, help='Overlap ratio')
    parser.add_argument('--candidates', type=int, default=256,
                        help='Random source positions scored per tile')
    parser.add_argument('--pool-size', type=int, default=5,
                        help='Number of lowest-cost candidates eligible for the random pick')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--workers', type=int, default=1, help='Worker processes for candidate scoring')
    parser.add_argument('--output-width', type=int, default=None, help='Output width')
    parser.add_argument('--output-height', type=int, default=None, help='Output height')
    parser.add_argument('--seams', type=str, default=None, help='Optional path for a seam visualization')
    parser.add_argument('--evaluate', action='store_true', help='Print texture quality metrics')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    print(f"Loading texture from: {args.input}")
    try:
        input_texture = load_texture(args.input)
    except OSError as e:
        print(f"Error loading texture: {e}")
        return 1

    print(f"Input texture shape: {input_texture.shape}")

    # Default to 2x input size
    output_width = args.output_width if args.output_width is not None else input_texture.shape[1] * 2
    output_height = args.output_height if args.output_height is not None else input_texture.shape[0] * 2
    print(f"Output size: {output_width}x{output_height}")

    try:
        extra = dict(candidate_budget=args.candidates, selection_pool_size=args.pool_size,
                     seed=args.seed, workers=args.workers)
        if args.overlap is None:
            params = QuiltingParams.from_overlap_ratio(args.tile_size, args.overlap_ratio, **extra)
        else:
            params = QuiltingParams(tile_size=args.tile_size, overlap=args.overlap, **extra)
        quilter = ImageQuilting(params)

        print("Algorithm parameters:")
        print(f"  Tile size: {quilter.tile_size}")
        print(f"  Overlap: {quilter.overlap}")
        print(f"  Candidates / pool: {params.candidate_budget} / {params.effective_pool_size}")

        start_time = time.time()
        result, seam_map = quilter.synthesize_texture(input_texture, (output_height, output_width),
                                                      return_seam_map=True)
        print(f"Synthesis completed in {time.time() - start_time:.2f} seconds")
    except QuiltingError as e:
        print(f"Error during synthesis: {e}")
        return 1

    try:
        save_image(result, args.output)
        print(f"Saved result to: {args.output}")
        if args.seams:
            visualize_seams(result, seam_map, save_path=args.seams)
            print(f"Saved seam visualization to: {args.seams}")
    except OSError as e:
        print(f"Error saving output: {e}")
        return 1

    if args.evaluate:
        quality = evaluate_texture_quality(input_texture, result, seam_map)
        for name, value in quality.items():
            print(f"  {name}: {value:.4f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
