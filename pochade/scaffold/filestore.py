"""Filesystem primitives used by the scaffolder."""
import shutil
from pathlib import Path
from typing import List, Protocol, Union

PathLike = Union[str, Path]


class FileStore(Protocol):
    """Filesystem operations the scaffold engine depends on."""

    def exists(self, path: PathLike) -> bool: ...

    def mkdir(self, path: PathLike) -> None: ...

    def copy_tree(self, src: PathLike, dst: PathLike) -> None: ...

    def list_dir(self, path: PathLike) -> List[str]: ...

    def is_dir(self, path: PathLike) -> bool: ...

    def read_text(self, path: PathLike) -> str: ...

    def write_text(self, path: PathLike, content: str) -> None: ...

    def rename(self, src: PathLike, dst: PathLike) -> None: ...


class LocalFileStore:
    """FileStore backed by the local disk."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def mkdir(self, path: PathLike) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_tree(self, src: PathLike, dst: PathLike) -> None:
        shutil.copytree(src, dst)

    def list_dir(self, path: PathLike) -> List[str]:
        return sorted(entry.name for entry in Path(path).iterdir())

    def is_dir(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    # newline="" keeps CRLF template files intact
    def read_text(self, path: PathLike) -> str:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, path: PathLike, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def rename(self, src: PathLike, dst: PathLike) -> None:
        Path(src).rename(dst)
