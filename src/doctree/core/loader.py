"""Content tree loader.

Builds a sorted content tree from a directory of markdown files.
"""

import logging
import re
from pathlib import Path

from doctree.config import TreeConfig
from doctree.core.tree import Content, Directory, Root

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".md"

# Ordering prefixes: "+2_", "-1_", "10_", "+", "-"
_ORDER_PREFIX_PATTERN = re.compile(r"^[-+]?[0-9]+_|^[-+]")


def uri_from_name(name: str) -> str:
    """Strip the ordering prefix from a name.

    Args:
        name: File stem or directory name (e.g., "01_Getting_Started")

    Returns:
        URI for the entry (e.g., "Getting_Started"), the name itself when
        nothing is left after stripping
    """
    stripped = _ORDER_PREFIX_PATTERN.sub("", name, count=1)
    return stripped or name


def title_from_uri(uri: str) -> str:
    """Derive a human readable title from a URI."""
    return uri.lstrip(".").replace("-", " ").replace("_", " ").strip().title()


class TreeLoader:
    """Loads content trees from a source directory.

    Every sub-directory becomes a ``Directory`` and every markdown file a
    ``Content``. Each directory is sorted once all of its children are
    attached.
    """

    def __init__(self, source_dir: Path, config: TreeConfig) -> None:
        """Initialize loader.

        Args:
            source_dir: Root directory containing markdown sources
            config: Tree configuration handed to the Root
        """
        self._source_dir = source_dir
        self._config = config
        self._ignore = frozenset(config.ignore)

    @property
    def source_dir(self) -> Path:
        """Root source directory."""
        return self._source_dir

    def load(self) -> Root:
        """Load the content tree.

        Returns:
            Sorted Root, empty if the source directory doesn't exist
        """
        root = Root(self._config)
        if not self._source_dir.is_dir():
            logger.debug(f"Source directory not found: {self._source_dir}")
            return root

        self._load_directory(root, self._source_dir)
        return root

    def _load_directory(self, directory: Directory, path: Path) -> None:
        """Attach the children found at path, then sort them."""
        children = [p for p in sorted(path.iterdir()) if p.name not in self._ignore]

        # Directories first, so a page named like a folder can become its index
        for child_path in children:
            if child_path.is_dir():
                name = child_path.name
                uri = uri_from_name(name)
                self._warn_on_collision(directory, uri, child_path)
                child = Directory(
                    uri,
                    name=name,
                    title=title_from_uri(uri),
                    parent=directory,
                )
                self._load_directory(child, child_path)

        for child_path in children:
            if child_path.is_file() and child_path.suffix == PAGE_SUFFIX:
                self._load_page(directory, child_path)

        directory.sort()
        logger.debug(f"Loaded {len(directory)} entries from {path}")

    def _load_page(self, directory: Directory, path: Path) -> None:
        """Attach the page at path.

        A page sharing its URI with a sibling folder (``guide.md`` next to
        ``guide/``) becomes that folder's index page.
        """
        name = path.stem
        uri = uri_from_name(name)
        title = self._extract_title(path) or title_from_uri(uri)
        source_path = path.relative_to(self._source_dir)

        folder = directory.get(uri)
        if isinstance(folder, Directory):
            index_key = self._config.index_key
            existing = folder.get(index_key)
            if existing is not None:
                logger.warning(
                    f"Skipping {path}: folder {folder.url} already has index {existing!r}",
                )
                return
            Content(
                index_key,
                name=index_key,
                title=title,
                parent=folder,
                source_path=source_path,
            )
            folder.sort()
            return

        self._warn_on_collision(directory, uri, path)
        Content(
            uri,
            name=name,
            title=title,
            parent=directory,
            source_path=source_path,
        )

    def _warn_on_collision(self, directory: Directory, uri: str, path: Path) -> None:
        existing = directory.get(uri)
        if existing is not None:
            logger.warning(f"{path} replaces {existing!r}: both resolve to URI {uri!r}")

    def _extract_title(self, path: Path) -> str | None:
        """Extract title from the first H1 heading of a page.

        Returns:
            Title text, or None if the page has no H1 or can't be read
        """
        try:
            with path.open(encoding="utf-8") as f:
                for line in f:
                    stripped = line.strip()
                    if stripped.startswith("# "):
                        return stripped[2:].strip()
        except (OSError, UnicodeDecodeError):
            return None
        return None
