"""On-disk location of saved profiles and sample systems."""

from pathlib import Path
from typing import Optional

from config import gravity as config

# Project root (parent of core/)
PROJECT_ROOT = Path(__file__).parent.parent


class SaveStore:
    """
    Named planet buffers on disk.

    Reads look in the save directory first, then in the sample systems
    directory. Writes always go to the save directory.
    """

    def __init__(self, save_dir: Optional[Path] = None, systems_dir: Optional[Path] = None):
        self.save_dir = Path(save_dir) if save_dir else PROJECT_ROOT / config.SAVES["directory"]
        self.systems_dir = Path(systems_dir) if systems_dir else PROJECT_ROOT / config.SYSTEMS["directory"]

    def path_for(self, name: str) -> Path:
        return self.save_dir / f"{name}.json"

    def read(self, name: str) -> Optional[bytes]:
        """Bytes of the named buffer, or None if no readable file exists."""
        for directory in (self.save_dir, self.systems_dir):
            path = directory / f"{name}.json"
            if not path.exists():
                continue
            try:
                with open(path, "rb") as f:
                    return f.read()
            except OSError as e:
                print(f"[Storage] Can't read {path}: {e}")
                return None
        return None

    def write(self, name: str, data: bytes) -> Path:
        """Write a buffer into the save directory. OSError propagates."""
        self.save_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(name)
        with open(path, "wb") as f:
            f.write(data)
        return path
