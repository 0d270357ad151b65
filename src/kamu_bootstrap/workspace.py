from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from .errors import WorkspaceError

logger = logging.getLogger(__name__)

METADATA_DIR = ".kamu"


@dataclass(slots=True, frozen=True)
class Workspace:
    """Directory the external tool manages; every command runs from ``root``."""

    root: Path

    @property
    def metadata_path(self) -> Path:
        return self.root / METADATA_DIR

    def exists(self) -> bool:
        return self.metadata_path.exists()

    def ensure_root(self) -> None:
        if not self.root.is_dir():
            raise WorkspaceError(f"Workspace root {self.root} is not an existing directory")

    def reset(self) -> bool:
        """Remove the metadata directory. Returns whether anything was removed."""

        path = self.metadata_path
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)
        else:
            return False
        logger.info("Removed existing workspace at %s", path)
        return True
