"""World states: the object-holding world, the main world and loading."""

from __future__ import annotations

from collections.abc import Iterable

from evolasm.camera import Camera
from evolasm.content import Content
from evolasm.gameobject import GameObject
from evolasm.player import Player
from evolasm.primitives import Keyboard, Vector2, distance
from evolasm.state import State, StateManager
from evolasm.tiles import TileGrid

WORLD_WIDTH = 128
WORLD_HEIGHT = 128
MAX_SEARCH_DISTANCE = 10000.0


class StateWorld(State):
    """A state holding a tile grid and the game objects on it."""

    def __init__(self, tile_grid: TileGrid | None = None) -> None:
        self.objects: list[GameObject] = []
        self.tile_grid = tile_grid if tile_grid is not None else TileGrid(WORLD_WIDTH, WORLD_HEIGHT)

    def tick(self) -> None:
        """Tick the grid, drop destroyed objects and tick the rest."""
        self.tile_grid.tick()
        self.objects = [obj for obj in self.objects if not obj.destroyed]
        for obj in list(self.objects):
            obj.tick()

    def spawn(self, obj: GameObject) -> None:
        self.objects.append(obj)

    def destroy_object(self, index: int) -> GameObject:
        """Remove the object at index, mark it destroyed and return it."""
        obj = self.objects.pop(index)
        obj.destroy()
        return obj

    def _closest(self, origin: GameObject, candidates: Iterable[GameObject]) -> GameObject | None:
        best: GameObject | None = None
        best_distance = MAX_SEARCH_DISTANCE
        for obj in candidates:
            if obj.destroyed or obj is origin:
                continue
            d = distance(obj.position, origin.position)
            if d < best_distance:
                best_distance = d
                best = obj
        return best

    def closest_object(self, origin: GameObject) -> GameObject | None:
        """Nearest live object other than origin, within the search distance."""
        return self._closest(origin, self.objects)

    def closest_object_by_name(self, origin: GameObject, name: str) -> GameObject | None:
        return self._closest(origin, (obj for obj in self.objects if obj.name == name))


class StateWorldMain(StateWorld):
    """The main world: spawns the player and points the camera at it."""

    def __init__(
        self,
        camera: Camera | None = None,
        keyboard: Keyboard | None = None,
        tile_grid: TileGrid | None = None,
        content: Content | None = None,
    ) -> None:
        super().__init__(tile_grid)
        self.camera = camera
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.content = content

    def start(self) -> None:
        super().start()
        texture = self.content.textures.get("player") if self.content is not None else None
        player = Player(self.keyboard, texture)
        player.sprite.set_size(Vector2(16, 16))
        player.tile_grid = self.tile_grid
        if self.camera is not None:
            self.camera.focus(player)
        self.spawn(player)


class StateLoading(State):
    """Loads the content and switches to the main world."""

    def __init__(
        self,
        manager: StateManager,
        camera: Camera | None = None,
        keyboard: Keyboard | None = None,
        content: Content | None = None,
        tile_grid: TileGrid | None = None,
    ) -> None:
        self.manager = manager
        self.camera = camera
        self.keyboard = keyboard
        self.content = content if content is not None else Content.instance()
        self.tile_grid = tile_grid

    def start(self) -> None:
        self.content.load()
        world = StateWorldMain(self.camera, self.keyboard, self.tile_grid, self.content)
        self.manager.add("main", world)
        self.manager.set("main")

    def tick(self) -> None:
        """Nothing to do while loading."""