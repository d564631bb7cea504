import argparse
import time

from raytracer.renderer import render_canvas
from raytracer.scene_parser import parse_scene_file


def main() -> None:
    parser = argparse.ArgumentParser(description='Python Ray Tracer')
    parser.add_argument('scene_file', type=str, help='Path to the scene file')
    parser.add_argument('output_image', type=str, help='Name of the output image file (.ppm, or any format Pillow writes)')
    parser.add_argument(
        '--max-recursions',
        type=int,
        default=None,
        help='Reflection/refraction bounce budget, overrides the scene file setting',
    )
    args = parser.parse_args()

    def log_phase(label: str, seconds: float) -> None:
        print(f"[phase] {label}: {seconds:.2f}s")

    parse_start = time.perf_counter()
    camera, scene_settings, world = parse_scene_file(args.scene_file)
    log_phase("parse_scene", time.perf_counter() - parse_start)

    if camera is None:
        raise ValueError("Scene file is missing a camera ('cam' line)")

    max_recursions = scene_settings.max_recursions
    if args.max_recursions is not None:
        max_recursions = args.max_recursions

    render_start = time.perf_counter()
    canvas = render_canvas(camera, world, max_recursions)
    log_phase("render", time.perf_counter() - render_start)

    save_start = time.perf_counter()
    canvas.save(args.output_image)
    log_phase("save_image", time.perf_counter() - save_start)

    print(
        "[stats] pixels={pixels}, shapes={shapes}, lights={lights}, max_recursions={depth}".format(
            pixels=camera.hsize * camera.vsize,
            shapes=len(world.shapes),
            lights=len(world.lights),
            depth=max_recursions,
        )
    )


def run() -> None:
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


if __name__ == '__main__':
    run()
