# SPDX-License-Identifier: MIT

import logging
import re
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class BlobStore(Protocol):
    def load_blob(self, key: str) -> Optional[bytes]: ...

    def save_blob(self, key: str, data: bytes) -> None: ...


def read_blob(store: BlobStore, key: str) -> Optional[bytes]:
    """Load a blob, treating an unreadable one like a missing one."""
    try:
        return store.load_blob(key)
    except OSError:
        logger.warning("failed to read blob %s, treating it as missing", key, exc_info=True)
        return None


class FileBlobStore:
    """Key-value blob store keeping one YAML file per key in a directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def __path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"invalid blob key: {key!r}")
        return self.directory / f"{key}.yaml"

    def load_blob(self, key: str) -> Optional[bytes]:
        path = self.__path_for(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def save_blob(self, key: str, data: bytes) -> None:
        path = self.__path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        # Readers (the widget) must never see a half-written blob
        temp_path = path.with_suffix(".yaml.tmp")
        temp_path.write_bytes(data)
        temp_path.replace(path)
