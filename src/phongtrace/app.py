# app.py
"""
Window and command-line entry point.

Usage:
    phongtrace [--width W] [--height H] [--fov DEG] [--output PATH] [--verbose]

Without --output the scene is shown in a resizable pygame window; with it,
a single pass is rendered headless and written as a PNG.
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional

import numpy as np
import pygame

from phongtrace.config import RenderConfig
from phongtrace.renderer.buffer import unpack_argb
from phongtrace.renderer.export import save_png
from phongtrace.renderer.raytracer import Renderer
from phongtrace.scenes import create_default_scene

logger = logging.getLogger(__name__)

PaintCallback = Callable[["Window", np.ndarray], None]
ResizeCallback = Callable[["Window", int, int], None]


class Window:
    """
    A pygame window owning a packed ARGB pixel buffer.

    `on_paint(window, buffer)` fills the buffer and is invoked by redraw();
    `on_resize(window, width, height)` is invoked after the window size
    changes and the buffer has been reallocated.
    """
    def __init__(self, title: str, width: int, height: int):
        self.title = title
        self.width = width
        self.height = height
        self.buffer = np.zeros(width * height, dtype=np.uint32)
        self.on_paint: Optional[PaintCallback] = None
        self.on_resize: Optional[ResizeCallback] = None
        self.screen = None
        self._needs_redraw = True

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    def show(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(self.title)
        logger.info("Opened %dx%d window", self.width, self.height)

    def redraw(self):
        self._needs_redraw = True

    def _resize(self, width: int, height: int):
        self.width = max(1, width)
        self.height = max(1, height)
        self.buffer = np.zeros(self.width * self.height, dtype=np.uint32)
        if self.on_resize is not None:
            self.on_resize(self, self.width, self.height)
        self.redraw()

    def _paint(self):
        if self.on_paint is not None:
            self.on_paint(self, self.buffer)
        # surfarray expects (width, height, 3)
        rgb = np.ascontiguousarray(unpack_argb(self.buffer, self.width, self.height).transpose(1, 0, 2))
        surface = pygame.surfarray.make_surface(rgb)
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()
        self._needs_redraw = False

    def run(self):
        if self.screen is None:
            self.show()
        clock = pygame.time.Clock()
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.type == pygame.VIDEORESIZE:
                        self._resize(event.w, event.h)
                if running and self._needs_redraw:
                    self._paint()
                clock.tick(30)
        finally:
            pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(description="Render the Phong demo scene.")
    parser.add_argument("--width", type=int, default=defaults.width,
                        help=f"Image width in pixels (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help=f"Image height in pixels (default: {defaults.height})")
    parser.add_argument("--fov", type=float, default=defaults.fov,
                        help=f"Vertical field of view in degrees (default: {defaults.fov})")
    parser.add_argument("--background", type=str, default=defaults.background,
                        help=f"Background color name or #RRGGBB (default: {defaults.background})")
    parser.add_argument("--output", type=str, default=None,
                        help="Render headless and save a PNG to this path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig(width=args.width, height=args.height, fov=args.fov,
                        background=args.background)


def render_to_file(config: RenderConfig, output_path: str):
    scene, camera = create_default_scene(config)
    renderer = Renderer(config.width, config.height, config.background_color, config.ray_length)
    renderer.render(scene, camera)
    return save_png(renderer, output_path)


def run_window(config: RenderConfig):
    scene, camera = create_default_scene(config)
    renderer = Renderer(config.width, config.height, config.background_color, config.ray_length)
    window = Window("Raytracing", config.width, config.height)

    def on_paint(window: Window, buffer: np.ndarray):
        buffer[:] = renderer.render(scene, camera)

    def on_resize(window: Window, width: int, height: int):
        camera.width = width
        camera.height = height
        renderer.resize(width, height)
        window.redraw()

    window.on_paint = on_paint
    window.on_resize = on_resize
    window.show()
    window.run()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = config_from_args(args)
        if args.output:
            render_to_file(config, args.output)
        else:
            run_window(config)
        return 0
    except (ValueError, OSError, pygame.error) as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
