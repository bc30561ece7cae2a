"""Card storage: the deck directory seen as a flat set of named files.

FileStore works on a real directory (depth 1). MemoryStore keeps the same
interface over a dict, for tests.
"""

import hashlib
import os
import pathlib
import shutil


def file_digest(path: pathlib.Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


class FileStore:
    def __init__(self, root: pathlib.Path | str):
        self.root = pathlib.Path(root)

    def path(self, name: str) -> pathlib.Path:
        return self.root / name

    def list(self) -> list[str]:
        """Names of the regular files directly under root, sorted."""
        try:
            return sorted(p.name for p in self.root.iterdir() if p.is_file())
        except FileNotFoundError:
            return []

    def exists(self, name: str) -> bool:
        return self.path(name).is_file()

    def rename(self, old: str, new: str):
        """Rename old to new. Refuses to replace an existing file."""
        if self.path(new).exists():
            raise FileExistsError(str(self.path(new)))
        os.rename(self.path(old), self.path(new))

    def read_text(self, name: str) -> str | None:
        try:
            return self.path(name).read_text()
        except (OSError, UnicodeDecodeError):
            return None

    def write_text(self, name: str, text: str):
        with open(self.path(name), "w") as f:
            f.write(text)

    def copy_in(self, source: pathlib.Path, name: str):
        if self.path(name).exists():
            raise FileExistsError(str(self.path(name)))
        shutil.copy2(source, self.path(name))

    def digest(self, name: str) -> str:
        return file_digest(self.path(name))


class MemoryStore:
    """In-memory store. Files map name -> bytes."""

    def __init__(self, files: dict[str, bytes] | None = None):
        self.files: dict[str, bytes] = dict(files or {})

    def path(self, name: str) -> pathlib.Path:
        return pathlib.PurePosixPath("/memory") / name

    def list(self) -> list[str]:
        return sorted(self.files)

    def exists(self, name: str) -> bool:
        return name in self.files

    def rename(self, old: str, new: str):
        if new in self.files:
            raise FileExistsError(new)
        if old not in self.files:
            raise FileNotFoundError(old)
        self.files[new] = self.files.pop(old)

    def read_text(self, name: str) -> str | None:
        data = self.files.get(name)
        if data is None:
            return None
        try:
            return data.decode()
        except UnicodeDecodeError:
            return None

    def write_text(self, name: str, text: str):
        self.files[name] = text.encode()

    def copy_in(self, source: pathlib.Path, name: str):
        if name in self.files:
            raise FileExistsError(name)
        self.files[name] = pathlib.Path(source).read_bytes()

    def digest(self, name: str) -> str:
        return hashlib.sha256(self.files[name]).hexdigest()
