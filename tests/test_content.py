import pytest
from PIL import Image

from evolasm.content import Content, ContentError, asset_name
from evolasm.primitives import Vector2


def _make_tree(root):
    for sub in ("textures", "musics", "fonts", "sounds"):
        (root / sub).mkdir()
    Image.new("RGBA", (16, 16)).save(root / "textures" / "bot.png")
    Image.new("RGBA", (32, 8)).save(root / "textures" / "tilemap.png")
    (root / "musics" / "theme.ogg").write_bytes(b"music-data")
    (root / "fonts" / "font.ttf").write_bytes(b"font-data")
    (root / "sounds" / "step.wav").write_bytes(b"sound-data")


@pytest.mark.parametrize(
    "path,expected",
    [
        ("content/textures/bot.png", "bot"),
        ("content\\fonts\\font.ttf", "font"),
        ("archive.tar.gz", "archive.tar"),
        ("noext", "noext"),
    ],
)
def test_asset_name(path, expected):
    assert asset_name(path) == expected


def test_load_all_kinds(tmp_path, capsys):
    _make_tree(tmp_path)
    content = Content(tmp_path)
    content.load()
    assert content.is_loaded
    assert set(content.textures) == {"bot", "tilemap"}
    assert content.textures["bot"].size == Vector2(16, 16)
    assert content.textures["tilemap"].width == 32
    assert content.fonts["font"] == b"font-data"
    assert content.sounds["step"] == b"sound-data"
    assert content.musics["theme"] == tmp_path / "musics" / "theme.ogg"
    assert "[INFO] Load texture: bot" in capsys.readouterr().out


def test_second_load_warns(tmp_path, capsys):
    _make_tree(tmp_path)
    content = Content(tmp_path)
    content.load()
    capsys.readouterr()
    content.load()
    assert "[WARN] Tried load game content more than once." in capsys.readouterr().out


def test_invalid_texture_raises(tmp_path):
    _make_tree(tmp_path)
    (tmp_path / "textures" / "broken.png").write_bytes(b"not an image")
    with pytest.raises(ContentError):
        Content(tmp_path).load()


def test_missing_directory_raises(tmp_path):
    with pytest.raises(ContentError):
        Content(tmp_path).load()


def test_empty_sound_raises(tmp_path):
    _make_tree(tmp_path)
    (tmp_path / "sounds" / "silent.wav").write_bytes(b"")
    with pytest.raises(ContentError):
        Content(tmp_path).load()


def test_instance_is_shared():
    first = Content.instance()
    marker = b"shared-probe"
    first.sounds["__probe__"] = marker
    try:
        second = Content.instance()
        assert second is first
        assert second.sounds["__probe__"] == b"shared-probe"
    finally:
        first.sounds.pop("__probe__", None)