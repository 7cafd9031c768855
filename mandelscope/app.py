"""Interactive Mandelbrot explorer: input handling, view updates and drawing."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field

import pygame

from .mandelbrot import MAX_ZOOM_LEVEL, Impl, Plotter, Surface, plotter_for, zoom_effort
from .plane import Plane, Vec2d, Vec2i

WIDTH = 1920
HEIGHT = 1080
MIN_ZOOM_LEVEL = 0.25
ZOOM_RATE = 0.5
WHEEL_ZOOM_FACTOR = 5

DEFAULT_OFFSET = (2.5, -1.0)

BLACK = (0, 0, 0)
RAYWHITE = (245, 245, 245)
LIME = (0, 158, 47)
_FONT_SIZE = 26
_LINE_HEIGHT = 25

_IMPL_KEYS = (
    (pygame.K_F1, Impl.SCALAR),
    (pygame.K_F2, Impl.SSE4),
    (pygame.K_F3, Impl.AVX2),
)


@dataclass
class InputState:
    """What the user is doing during the current frame."""

    mouse: Vec2i = field(default_factory=Vec2i)
    mouse_dxdy: Vec2i = field(default_factory=Vec2i)
    mouse_wheel_v: float = 0.0
    plane_drag: bool = False
    zoom_down: bool = False
    zoom_up: bool = False
    reset: bool = False
    quit: bool = False


@dataclass
class Config:
    """Rendering settings: iteration budget and plotting strategy."""

    effort: int = 0
    impl: Impl = Impl.SCALAR

    @property
    def plotter(self) -> Plotter:
        """The plotting function for the selected strategy."""
        return plotter_for(self.impl)


def handle_input(input_state: InputState, config: Config) -> None:
    """Poll pygame for this frame's input and update the state and config."""
    wheel = 0.0
    pressed_keys: set[int] = set()
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            input_state.quit = True
        elif event.type == pygame.MOUSEWHEEL:
            wheel += event.y
        elif event.type == pygame.KEYDOWN:
            pressed_keys.add(event.key)

    mouse_x, mouse_y = pygame.mouse.get_pos()
    input_state.mouse_dxdy = Vec2i(mouse_x - input_state.mouse.x, mouse_y - input_state.mouse.y)
    input_state.mouse = Vec2i(mouse_x, mouse_y)

    left, _, right = pygame.mouse.get_pressed()[:3]
    shift = bool(pygame.key.get_mods() & pygame.KMOD_LSHIFT)
    input_state.plane_drag = bool(left)
    input_state.zoom_down = (bool(right) and not shift) or wheel > 0
    input_state.zoom_up = (bool(right) and shift) or wheel < 0
    input_state.reset = pygame.K_r in pressed_keys
    if pygame.K_ESCAPE in pressed_keys:
        input_state.quit = True

    for key, impl in _IMPL_KEYS:
        if key in pressed_keys:
            config.impl = impl
            break


def update_plane(
    input_state: InputState,
    plane: Plane,
    config: Config,
    frame_time: float,
    screen_size: tuple[int, int],
) -> None:
    """Apply dragging, zooming and reset to the plane, then refresh the effort."""
    mouse = input_state.mouse
    if input_state.plane_drag:
        delta = plane.from_screen_no_offset(input_state.mouse_dxdy.x, input_state.mouse_dxdy.y)
        plane.offset.x += delta.x
        plane.offset.y += delta.y

    if input_state.zoom_down:
        dz = plane.zoom * (1 + ZOOM_RATE * frame_time) - plane.zoom
        if plane.zoom + dz > MAX_ZOOM_LEVEL:
            dz = MAX_ZOOM_LEVEL - plane.zoom
        plane.zoom_around(mouse.x, mouse.y, dz)

    if input_state.zoom_up:
        dz = plane.zoom * (1 + ZOOM_RATE * frame_time) - plane.zoom
        if plane.zoom - dz >= MIN_ZOOM_LEVEL:
            plane.zoom_around(mouse.x, mouse.y, -dz)
        else:
            plane.zoom_around(mouse.x, mouse.y, -(plane.zoom - MIN_ZOOM_LEVEL))

    if input_state.reset:
        plane.zoom = 1.0
        plane.offset = Vec2d(*DEFAULT_OFFSET)

    if input_state.mouse_wheel_v != 0:
        plane.zoom_around(mouse.x, mouse.y, input_state.mouse_wheel_v * WHEEL_ZOOM_FACTOR)

    plane.screen = Vec2i(*screen_size)
    config.effort = zoom_effort(plane.zoom)


def _status_lines(plane: Plane, config: Config, fps: float) -> list[tuple[str, tuple[int, int, int]]]:
    return [
        (f"{round(fps)} FPS", LIME),
        (f"Implementation: {config.impl.label}", RAYWHITE),
        (f"Zoom: x{plane.zoom:.2f}", RAYWHITE),
        (f"Effort: {config.effort} Iter/p", RAYWHITE),
    ]


def render(
    screen: pygame.Surface,
    plane: Plane,
    config: Config,
    surface: Surface,
    fps: float,
) -> None:
    """Draw the plotted surface and the status overlay, then flip the display."""
    image = pygame.image.frombuffer(
        surface.data.tobytes(), (surface.width, surface.height), "RGBA"
    )
    screen.fill(BLACK)
    screen.blit(image, (0, 0))

    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None, _FONT_SIZE)
    for row, (text, color) in enumerate(_status_lines(plane, config, fps)):
        screen.blit(font.render(text, True, color), (0, row * _LINE_HEIGHT))

    pygame.display.flip()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mandelscope", description="Explore the Mandelbrot set.")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height in pixels")
    parser.add_argument("--windowed", action="store_true", help="do not switch to fullscreen")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    if args.frames is not None and args.frames < 0:
        parser.error("frames must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Open the explorer window and run until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        flags = 0 if args.windowed else pygame.FULLSCREEN
        screen = pygame.display.set_mode((args.width, args.height), flags)
        pygame.display.set_caption("M")

        plane = Plane(
            screen=Vec2i(args.width, args.height),
            offset=Vec2d(*DEFAULT_OFFSET),
            scale=args.width / 3.5,
            zoom=1.0,
        )
        config = Config()
        surface = Surface(args.width, args.height)
        input_state = InputState()
        clock = pygame.time.Clock()

        frame = 0
        while not input_state.quit and (args.frames is None or frame < args.frames):
            frame_time = clock.tick() / 1000.0
            handle_input(input_state, config)
            update_plane(input_state, plane, config, frame_time, screen.get_size())
            config.plotter(plane, surface, config.effort)
            render(screen, plane, config, surface, clock.get_fps())
            frame += 1
    finally:
        pygame.quit()
    return 0