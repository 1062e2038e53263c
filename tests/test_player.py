import pytest

from evolasm.player import Player
from evolasm.primitives import Key, Keyboard, Texture, Vector2
from evolasm.tiles import TILE_SIZE, PhysicalType, TileGrid


class ConstantNoise:
    def value_noise_2d(self, x, y):
        return 0.3


@pytest.fixture
def setup():
    keyboard = Keyboard()
    grid = TileGrid(4, 4, noise=ConstantNoise(), tilemap=Texture(1, 1))
    player = Player(keyboard, texture=Texture(16, 16))
    player.tile_grid = grid
    return player, keyboard, grid


def test_texture_is_used():
    texture = Texture(16, 16)
    player = Player(Keyboard(), texture=texture)
    assert player.sprite.texture is texture
    assert player.name == "player"


def test_moves_once_per_press(setup):
    player, keyboard, _ = setup
    keyboard.press(Key.D)
    player.tick()
    assert player.position == Vector2(player.speed, 0)
    player.tick()
    assert player.position == Vector2(player.speed, 0)
    keyboard.release(Key.D)
    player.tick()
    keyboard.press(Key.D)
    player.tick()
    assert player.position == Vector2(2 * player.speed, 0)


def test_solid_tile_blocks(setup):
    player, keyboard, grid = setup
    grid.tile(1, 0).phys_type = PhysicalType.SOLID
    keyboard.press(Key.D)
    player.tick()
    assert player.position == Vector2(0, 0)


def test_edge_of_grid_blocks(setup):
    player, keyboard, _ = setup
    keyboard.press(Key.A)
    player.tick()
    assert player.position == Vector2(0, 0)


def test_vertical_key_wins(setup):
    player, keyboard, _ = setup
    player.set_position(TILE_SIZE, TILE_SIZE)
    keyboard.press(Key.W)
    keyboard.press(Key.D)
    player.tick()
    assert player.position == Vector2(TILE_SIZE, TILE_SIZE - player.speed)


def test_without_grid_raises():
    player = Player(Keyboard(), texture=Texture(16, 16))
    with pytest.raises(RuntimeError):
        player.tick()