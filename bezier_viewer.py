"""bezierview - draw Bezier curves as straight line segments.

Draws a quadratic curve (green) and a cubic curve (red) in a window, then
waits until Escape is pressed or the window is closed.

    bezier-viewer [--config scene.yaml] [--steps N] [--size WxH]
                  [--export out.png] [--quiet]
"""
from __future__ import annotations
import argparse
import sys
import traceback
from typing import List, Optional

from bezierview.config import EXIT_OK, EXIT_BAD_CONFIG, EXIT_EXPORT_FAILED
from bezierview.scene import ConfigError, SceneConfig, default_scene, load_scene
from bezierview.state import AppState
from bezierview.view_math import parse_size
from bezierview.logging import log, set_enabled


def _size_arg(text: str):
    try:
        return parse_size(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bezier-viewer",
        description="Draw quadratic and cubic Bezier curves.",
    )
    parser.add_argument('--config', metavar='FILE',
                        help='YAML scene file (steps, canvas_size, background, curves or points)')
    parser.add_argument('--steps', type=int, metavar='N',
                        help='line segments per curve (overrides the config file)')
    parser.add_argument('--size', type=_size_arg, metavar='WxH',
                        help='canvas size in pixels (overrides the config file)')
    parser.add_argument('--export', metavar='PNG',
                        help='write the curves to a PNG file instead of opening a window')
    parser.add_argument('--quiet', action='store_true', help='disable log output')
    return parser


def load_config(args: argparse.Namespace) -> SceneConfig:
    """Build the scene from defaults, the config file and CLI overrides.

    Raises:
        ConfigError: If the file or an override is invalid.
    """
    scene = load_scene(args.config) if args.config else default_scene()
    return scene.with_overrides(steps=args.steps, canvas_size=args.size)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_enabled(not args.quiet)
    log("[MAIN] Starting application")

    try:
        scene = load_config(args)
    except ConfigError as e:
        log(f"[CONFIG][ERR] {e}")
        print(f"bezier-viewer: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    log(f"[CONFIG] steps={scene.steps} canvas={scene.width}x{scene.height} curves={len(scene.curves)}")
    state = AppState.build(scene)

    if args.export:
        from bezierview.export import export_png
        try:
            export_png(state, args.export)
        except (OSError, ValueError) as e:
            log(f"[EXPORT][ERR] Failed to write {args.export}: {e!r}")
            print(f"bezier-viewer: cannot write {args.export}: {e}", file=sys.stderr)
            return EXIT_EXPORT_FAILED
        return EXIT_OK

    from bezierview.app import run_app
    return run_app(state)


def run() -> None:
    """Console entry point."""
    try:
        code = main()
    except Exception as e:
        log(f"[FATAL] Fatal error: {e!r}")
        log(f"[FATAL] Traceback:\n{traceback.format_exc()}")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    run()
