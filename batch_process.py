import argparse
import logging
import os
import time

from pathquilt import ImageQuilting, QuiltingError, QuiltingParams, load_texture, save_image

SUPPORTED_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.bmp', '.tiff', '.gif')


def find_images(data_dir):
    """Sorted paths of the supported image files in `data_dir`."""
    return sorted(
        os.path.join(data_dir, item) for item in os.listdir(data_dir)
        if item.lower().endswith(SUPPORTED_EXTENSIONS)
    )


def output_path_for(img_path, results_dir, params, output_width, output_height):
    name, ext = os.path.splitext(os.path.basename(img_path))
    filename = (f"{name}_quilted_w{output_width}_h{output_height}"
                f"_t{params.tile_size}_o{params.overlap}{ext if ext else '.png'}")
    return os.path.join(results_dir, filename)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Batch process images for texture synthesis.')
    parser.add_argument('--data_dir', type=str, default='data',
                        help='Directory containing input texture images.')
    parser.add_argument('--results_dir', type=str, default='results_batch',
                        help='Directory to save synthesized textures.')

    # Algorithm parameters
    parser.add_argument('--output_width', type=int, default=1024,
                        help='Width of the output synthesized texture.')
    parser.add_argument('--output_height', type=int, default=1024,
                        help='Height of the output synthesized texture.')
    parser.add_argument('--tile_size', type=int, default=64,
                        help='Tile size for image quilting.')
    parser.add_argument('--overlap', type=int, default=16,
                        help='Overlap in pixels between tiles.')
    parser.add_argument('--candidates', type=int, default=512,
                        help='Random source positions scored per tile.')
    parser.add_argument('--pool_size', type=int, default=5,
                        help='Lowest-cost candidates eligible for the random pick.')
    parser.add_argument('--seed', type=int, default=None, help='Random seed.')
    parser.add_argument('--workers', type=int, default=1,
                        help='Worker processes for candidate scoring.')

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    if not os.path.isdir(args.data_dir):
        print(f"Error: Data directory '{args.data_dir}' not found.")
        return 1

    os.makedirs(args.results_dir, exist_ok=True)
    print(f"Results will be saved in '{args.results_dir}'")

    image_files = find_images(args.data_dir)
    if not image_files:
        print(f"No images found in '{args.data_dir}'.")
        return 0

    print(f"Found {len(image_files)} images to process.")

    try:
        params = QuiltingParams(tile_size=args.tile_size, overlap=args.overlap,
                                candidate_budget=args.candidates,
                                selection_pool_size=args.pool_size,
                                seed=args.seed, workers=args.workers).validate()
    except QuiltingError as e:
        print(f"Error: {e}")
        return 1

    output_size = (args.output_height, args.output_width)
    failures = 0
    total_start_time = time.time()

    for i, img_path in enumerate(image_files):
        print(f"\nProcessing image {i+1}/{len(image_files)}: {img_path}")
        try:
            input_texture = load_texture(img_path)
            print(f"  Loaded input texture: {img_path} (Shape: {input_texture.shape})")

            start_time = time.time()
            # A fresh quilter per image keeps each run reproducible from the seed
            synthesized_texture = ImageQuilting(params).synthesize_texture(input_texture, output_size)
            print(f"  Synthesis completed in {time.time() - start_time:.2f} seconds.")

            output_path = output_path_for(img_path, args.results_dir, params,
                                          args.output_width, args.output_height)
            save_image(synthesized_texture, output_path)
            print(f"  Saved synthesized texture to: {output_path}")
        except (QuiltingError, OSError) as e:
            failures += 1
            print(f"  Error processing {img_path}: {e}")

    print(f"\nBatch processing completed in {time.time() - total_start_time:.2f} seconds.")
    return 1 if failures else 0


if __name__ == '__main__':
    import sys
    sys.exit(main())
