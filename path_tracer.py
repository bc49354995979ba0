import argparse
import logging
import time

from renderer import Renderer, save_image
from scene_parser import parse_scene_file


def main() -> None:
    parser = argparse.ArgumentParser(description='Python Monte Carlo Path Tracer')
    parser.add_argument('scene_file', type=str, help='Path to the scene file')
    parser.add_argument('output_image', type=str, help='Name of the output image file')
    parser.add_argument('--width', type=int, default=500, help='Image width')
    parser.add_argument('--height', type=int, default=500, help='Image height')
    parser.add_argument('--samples', type=int, default=None, help='Samples per pixel (overrides the scene file)')
    parser.add_argument('--max-depth', type=int, default=None, help='Maximum bounces per path (overrides the scene file)')
    parser.add_argument('--workers', type=int, default=1, help='Worker processes rendering rows in parallel')
    parser.add_argument('--seed', type=int, default=None, help='Seed for reproducible sampling')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    def log_phase(label: str, seconds: float) -> None:
        print(f"[phase] {label}: {seconds:.2f}s")

    parse_start = time.perf_counter()
    scene, scene_settings = parse_scene_file(args.scene_file)
    log_phase("parse_scene", time.perf_counter() - parse_start)

    renderer = Renderer(
        args.output_image,
        args.width,
        args.height,
        num_samples=args.samples if args.samples is not None else scene_settings.samples_per_pixel,
        max_depth=args.max_depth if args.max_depth is not None else scene_settings.max_depth,
        workers=args.workers,
        seed=args.seed,
    )

    render_start = time.perf_counter()
    image_array = renderer.render_image(scene)
    log_phase("render", time.perf_counter() - render_start)

    save_start = time.perf_counter()
    save_image(image_array, args.output_image)
    log_phase("save_image", time.perf_counter() - save_start)

    print(f"[stats] objects={len(scene.objects)}, primary_rays={args.width * args.height * renderer.num_samples}")


if __name__ == '__main__':
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        main()
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")
