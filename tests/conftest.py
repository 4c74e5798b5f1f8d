import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import media_deck
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from media_deck.media import MediaItem, MediaKind


# Common test fixtures
@pytest.fixture
def png_factory(tmp_path: Path):
    """Factory that writes a real PNG of the requested size."""
    def _create(width: int, height: int, name: str = "image.png", directory: Path = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        img = Image.new("RGB", (width, height), color="white")
        path = target_dir / name
        img.save(path, format="PNG")
        return path
    return _create


@pytest.fixture
def jpeg_factory(tmp_path: Path):
    """Factory that writes a real JPEG of the requested size."""
    def _create(width: int, height: int, name: str = "photo.jpg", directory: Path = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        img = Image.new("RGB", (width, height), color="blue")
        path = target_dir / name
        img.save(path, format="JPEG")
        return path
    return _create


@pytest.fixture
def sized_item_factory():
    """Factory for items with a known intrinsic size (no file access)."""
    def _create(width: int = 1000, height: int = 500, name: str = "item.png") -> MediaItem:
        return MediaItem(
            path=Path(name),
            kind=MediaKind.IMAGE,
            extension=Path(name).suffix,
            intrinsic_width=width,
            intrinsic_height=height,
        )
    return _create
