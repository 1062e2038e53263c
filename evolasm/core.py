"""The application core: window, fixed-step loop and event handling."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from evolasm import logger
from evolasm.camera import Camera
from evolasm.content import Content
from evolasm.primitives import Key, Keyboard, Vector2, View
from evolasm.state import StateManager
from evolasm.tiles import TileGrid
from evolasm.world import StateLoading, StateWorld

TICK_SECONDS = 1.0 / 60.0
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 720
FRAME_RATE = 60
ICON_PATH = Path("textures") / "bot.png"
INITIAL_ZOOM = 500.0
WHEEL_ZOOM_STEP = 0.1


class EventKind(Enum):
    CLOSED = auto()
    MOUSE_WHEEL_SCROLLED = auto()
    RESIZED = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()


@dataclass(frozen=True)
class WindowEvent:
    """An input or window event fed to the core."""

    kind: EventKind
    delta: float = 0.0
    width: int = 0
    height: int = 0
    key: Key | None = None


class Core:
    """Owns the camera, the state manager and the main loop."""

    def __init__(
        self,
        content: Content | None = None,
        keyboard: Keyboard | None = None,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        self.content = content if content is not None else Content.instance()
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.window_size = Vector2(float(width), float(height))
        self.camera = Camera(View(Vector2(width / 2, height / 2), Vector2(float(width), float(height))))
        self.camera.zoom(INITIAL_ZOOM)
        self.state_manager = StateManager()
        self._open = True
        self._accumulator = 0.0
        self._surfaces: dict[Path, object] = {}
        self._world_cache: tuple[int, object] | None = None

    @property
    def is_open(self) -> bool:
        return self._open

    def map_pixel_to_coords(self, pixel: Vector2) -> Vector2:
        """World coordinates under a window pixel."""
        view = self.camera.view
        left = view.center.x - view.size.x / 2
        top = view.center.y - view.size.y / 2
        return Vector2(
            left + pixel.x * view.size.x / self.window_size.x,
            top + pixel.y * view.size.y / self.window_size.y,
        )

    def stop(self) -> None:
        """Close the window; the loop ends after the current frame."""
        self._open = False

    def handle_event(self, event: WindowEvent) -> None:
        if event.kind is EventKind.CLOSED:
            self.stop()
        elif event.kind is EventKind.MOUSE_WHEEL_SCROLLED:
            self.camera.zoom(event.delta * WHEEL_ZOOM_STEP)
        elif event.kind is EventKind.RESIZED:
            self.camera.resize(event.width, event.height)
            self.window_size = Vector2(float(event.width), float(event.height))
        elif event.kind is EventKind.KEY_PRESSED and event.key is not None:
            self.keyboard.press(event.key)
        elif event.kind is EventKind.KEY_RELEASED and event.key is not None:
            self.keyboard.release(event.key)

    def advance(self, elapsed: float) -> int:
        """Run as many fixed ticks as elapsed time allows, then update the camera.

        Returns the number of ticks run.
        """
        self._accumulator += elapsed
        ticks = 0
        while self._accumulator > TICK_SECONDS:
            self.state_manager.tick()
            self._accumulator -= TICK_SECONDS
            ticks += 1
        self.camera.update(self.keyboard)
        return ticks

    def _start_states(self) -> None:
        logger.info("Initialize state manager.")
        loading = StateLoading(self.state_manager, self.camera, self.keyboard, self.content)
        self.state_manager.add("loading", loading)
        self.state_manager.set("loading")

    def run(self) -> None:
        """Open the window, load the game and run the loop until closed."""
        import pygame

        logger.info("Initialize renderer.")
        pygame.init()
        try:
            screen = pygame.display.set_mode(
                (int(self.window_size.x), int(self.window_size.y)), pygame.RESIZABLE
            )
            pygame.display.set_caption("evolASM!")
            icon = self.content.root / ICON_PATH
            if icon.is_file():
                pygame.display.set_icon(pygame.image.load(str(icon)))
            self._open = True
            self._start_states()
            self._loop(pygame, screen)
        finally:
            logger.info("Free renderer resources.")
            self._surfaces.clear()
            self._world_cache = None
            pygame.quit()

    def _loop(self, pygame, screen) -> None:
        clock = pygame.time.Clock()
        logger.info("Core loop started.")
        while self._open:
            elapsed = clock.tick(FRAME_RATE) / 1000.0
            for raw in pygame.event.get():
                event = _convert_event(pygame, raw)
                if event is not None:
                    self.handle_event(event)
                    if event.kind is EventKind.RESIZED:
                        screen = pygame.display.set_mode((event.width, event.height), pygame.RESIZABLE)
            self.advance(elapsed)
            screen.fill((0, 0, 0))
            current = self.state_manager.current
            if isinstance(current, StateWorld):
                self._render_world(pygame, screen, current)
            self.state_manager.draw_overlay()
            pygame.display.flip()

    def _surface(self, pygame, path: Path):
        surface = self._surfaces.get(path)
        if surface is None:
            surface = pygame.image.load(str(path)).convert_alpha()
            self._surfaces[path] = surface
        return surface

    def _world_surface(self, pygame, grid: TileGrid):
        if self._world_cache is not None and self._world_cache[0] == id(grid):
            return self._world_cache[1]
        from evolasm.tiles import TILE_SIZE

        world = pygame.Surface((grid.width * TILE_SIZE, grid.height * TILE_SIZE), pygame.SRCALPHA)
        tilemap = grid.tilemap
        if tilemap is not None and tilemap.source is not None:
            atlas = self._surface(pygame, tilemap.source)
            quads = [grid.vertices[i : i + 4] for i in range(0, len(grid.vertices), 4)]
            for quad in quads:
                top_left, bottom_right = quad[0], quad[2]
                src = pygame.Rect(
                    int(top_left.tex_coords.x),
                    int(top_left.tex_coords.y),
                    int(bottom_right.tex_coords.x - top_left.tex_coords.x),
                    int(bottom_right.tex_coords.y - top_left.tex_coords.y),
                )
                world.blit(atlas, (int(top_left.position.x), int(top_left.position.y)), src)
        self._world_cache = (id(grid), world)
        return world

    def _render_world(self, pygame, screen, state: StateWorld) -> None:
        view = self.camera.view
        if view.size.x <= 0 or view.size.y <= 0:
            return
        left = view.center.x - view.size.x / 2
        top = view.center.y - view.size.y / 2
        sx = screen.get_width() / view.size.x
        sy = screen.get_height() / view.size.y

        world = self._world_surface(pygame, state.tile_grid)
        visible = pygame.Rect(int(left), int(top), int(view.size.x) + 2, int(view.size.y) + 2)
        clipped = visible.clip(world.get_rect())
        if clipped.width and clipped.height:
            part = world.subsurface(clipped)
            size = (max(1, round(clipped.width * sx)), max(1, round(clipped.height * sy)))
            screen.blit(
                pygame.transform.scale(part, size),
                (round((clipped.x - left) * sx), round((clipped.y - top) * sy)),
            )

        for obj in state.objects:
            texture = obj.sprite.texture
            if texture is None or texture.source is None:
                continue
            width = round(obj.sprite.size.x * sx)
            height = round(obj.sprite.size.y * sy)
            if width <= 0 or height <= 0:
                continue
            image = self._surface(pygame, texture.source)
            if obj.sprite.flipped:
                image = pygame.transform.flip(image, True, False)
            image = pygame.transform.scale(image, (width, height))
            screen.blit(
                image,
                (round((obj.position.x - left) * sx), round((obj.position.y - top) * sy)),
            )


def _convert_event(pygame, raw) -> WindowEvent | None:
    keys = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    if raw.type == pygame.QUIT:
        return WindowEvent(EventKind.CLOSED)
    if raw.type == pygame.MOUSEWHEEL:
        return WindowEvent(EventKind.MOUSE_WHEEL_SCROLLED, delta=float(raw.y))
    if raw.type == pygame.VIDEORESIZE:
        return WindowEvent(EventKind.RESIZED, width=raw.w, height=raw.h)
    if raw.type in (pygame.KEYDOWN, pygame.KEYUP) and raw.key in keys:
        kind = EventKind.KEY_PRESSED if raw.type == pygame.KEYDOWN else EventKind.KEY_RELEASED
        return WindowEvent(kind, key=keys[raw.key])
    return None


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="evolasm", description="Run the evolASM simulation.")
    parser.add_argument("--content", default="content", help="directory holding the game assets")
    args = parser.parse_args(argv)
    Core(content=Content(args.content)).run()
    return 0