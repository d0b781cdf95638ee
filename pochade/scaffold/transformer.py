"""Recursive token substitution over a project tree."""
import os
from enum import Enum
from typing import Collection, List, Mapping, Optional

from pochade.core.logger import get_logger
from pochade.scaffold.filestore import FileStore, LocalFileStore, PathLike
from pochade.scaffold.substitutor import find_orphan_tokens, substitute

logger = get_logger(__name__)

NODE_PLUGIN_TEXT_EXTENSIONS = frozenset({".js", ".html", ".json", ".md"})


class NodeKind(Enum):
    """How the transformer treats a tree entry."""

    DIRECTORY = "directory"
    TEXT_FILE = "text_file"
    OPAQUE_FILE = "opaque_file"


def classify(path: PathLike, is_dir: bool, allow_list: Collection[str]) -> NodeKind:
    """Decide how an entry is handled.

    Only files whose extension is allow-listed are substituted; everything
    else (images, fonts, dotfiles without extension) is copied through as-is.
    """
    if is_dir:
        return NodeKind.DIRECTORY
    if os.path.splitext(str(path))[1] in allow_list:
        return NodeKind.TEXT_FILE
    return NodeKind.OPAQUE_FILE


class TreeTransformer:
    """Applies token substitution to allow-listed files under a directory."""

    def __init__(self, store: Optional[FileStore] = None):
        self.store = store or LocalFileStore()

    def transform(
        self,
        root: PathLike,
        tokens: Mapping[str, str],
        allow_list: Collection[str] = NODE_PLUGIN_TEXT_EXTENSIONS,
    ) -> List[str]:
        """Substitute tokens in every allow-listed file below ``root``.

        Returns:
            Paths of the files that were rewritten
        """
        transformed: List[str] = []
        self._visit(str(root), tokens, allow_list, transformed)
        return transformed

    def _visit(
        self,
        directory: str,
        tokens: Mapping[str, str],
        allow_list: Collection[str],
        transformed: List[str],
    ) -> None:
        for name in self.store.list_dir(directory):
            path = os.path.join(directory, name)
            kind = classify(path, self.store.is_dir(path), allow_list)

            if kind is NodeKind.DIRECTORY:
                self._visit(path, tokens, allow_list, transformed)
            elif kind is NodeKind.TEXT_FILE:
                self.transform_file(path, tokens)
                transformed.append(path)

    def transform_file(self, path: PathLike, tokens: Mapping[str, str]) -> None:
        """Substitute tokens in a single file, in place."""
        content = self.store.read_text(path)
        self.store.write_text(path, substitute(content, tokens))
        logger.debug(f"Substituted tokens in {path}")

    def report_orphans(self, paths: Collection[PathLike]) -> int:
        """Log a warning for each file still holding ``${...}`` sequences.

        Returns:
            Number of files with leftover tokens
        """
        flagged = 0
        for path in paths:
            orphans = find_orphan_tokens(self.store.read_text(path))
            if orphans:
                flagged += 1
                logger.warning(f"Unresolved tokens in {path}: {', '.join(sorted(set(orphans)))}")
        return flagged
