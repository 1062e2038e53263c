"""Loading of game assets from the content directory."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ClassVar, TypeVar

from PIL import Image

from evolasm import logger
from evolasm.primitives import Texture

T = TypeVar("T")


class ContentError(Exception):
    """An asset directory or file could not be loaded."""


def asset_name(path: str) -> str:
    """File name without its directory and its last extension."""
    base = path[max(path.rfind("/"), path.rfind("\\")) + 1 :]
    dot = base.rfind(".")
    return base if dot == -1 else base[:dot]


def _load_texture(path: Path) -> Texture:
    try:
        with Image.open(path) as image:
            image.load()
            width, height = image.size
    except (OSError, ValueError) as exc:
        raise ContentError(f"cannot load texture {path}") from exc
    return Texture(width, height, path)


def _read_data(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ContentError(f"cannot read {path}") from exc
    if not data:
        raise ContentError(f"empty asset file {path}")
    return data


def _open_music(path: Path) -> Path:
    _read_data(path)
    return path


class Content:
    """Textures, sounds, music and fonts loaded from a content directory."""

    _instance: ClassVar[Content | None] = None

    def __init__(self, root: str | Path = "content") -> None:
        self.root = Path(root)
        self.textures: dict[str, Texture] = {}
        self.sounds: dict[str, bytes] = {}
        self.musics: dict[str, Path] = {}
        self.fonts: dict[str, bytes] = {}
        self._loaded = False

    @classmethod
    def instance(cls) -> Content:
        """The shared content store."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def _load_dir(
        self, subdir: str, kind: str, loader: Callable[[Path], T], target: dict[str, T]
    ) -> None:
        directory = self.root / subdir
        try:
            entries = sorted(directory.iterdir())
        except OSError as exc:
            raise ContentError(f"cannot list {directory}") from exc
        for entry in entries:
            name = asset_name(str(entry))
            target[name] = loader(entry)
            logger.info(f"Load {kind}: {name}")

    def load(self) -> None:
        """Load every asset under the content root."""
        if self._loaded:
            logger.warn("Tried load game content more than once.")
        self._load_dir("textures", "texture", _load_texture, self.textures)
        self._load_dir("musics", "music", _open_music, self.musics)
        self._load_dir("fonts", "font", _read_data, self.fonts)
        self._load_dir("sounds", "sound", _read_data, self.sounds)
        self._loaded = True