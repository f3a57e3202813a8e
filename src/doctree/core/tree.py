"""Content tree of a documentation site.

A tree is made of two kinds of entries: ``Content`` leaves (renderable
pages) and ``Directory`` nodes holding keyed children. The ``Root``
directory anchors the tree and carries the configuration every node reads
through its parent chain.

Children of a directory are keyed by their URI. Their iteration order is
insertion order until ``Directory.sort()`` runs, and the sorted order
afterwards.

Trees are not thread-safe. Build and sort them first, then treat them as
read-only; ``Directory.get_first_page()`` memoizes its result on the node.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import ClassVar, TypedDict

from doctree.config import TreeConfig
from doctree.core.sorting import order_entries
from doctree.core.types import URLPath


class TreeStructureError(RuntimeError):
    """Raised when a tree is malformed, e.g. has no Root."""


class EntryDict(TypedDict, total=False):
    """Dictionary representation of a tree entry."""

    title: str
    type: str
    name: str
    uri: str
    url: str
    index: str
    first: str
    children: list[EntryDict]


class Entry:
    """Node of the content tree.

    The parent link is a back-reference only: directories own their
    children, never the other way around.
    """

    kind: ClassVar[str] = "entry"

    def __init__(
        self,
        uri: str,
        *,
        name: str = "",
        title: str = "",
        parent: Directory | None = None,
    ) -> None:
        """Initialize entry.

        Args:
            uri: Key of the entry among its siblings
            name: Raw name, used for ordering (may be empty)
            title: Human readable title (may be empty)
            parent: Directory to attach the entry to
        """
        self.uri = uri
        self.name = name
        self.title = title
        self._parent: Directory | None = None
        if parent is not None:
            parent.add_child(self)

    @property
    def parent(self) -> Directory | None:
        """Directory holding this entry, None for a root or detached entry."""
        return self._parent

    @parent.setter
    def parent(self, parent: Directory | None) -> None:
        if self._parent is not None:
            self._parent.remove_child(self)
        if parent is not None:
            parent.add_child(self)

    @property
    def url(self) -> URLPath:
        """URL path built from the URIs of this entry and its ancestors."""
        if self._parent is None:
            return URLPath(f"/{self.uri}")
        return URLPath(f"{self._parent.url.rstrip('/')}/{self.uri}")

    def dump(self) -> EntryDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "type": self.kind,
            "name": self.name,
            "uri": self.uri,
            "url": self.url,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(uri={self.uri!r}, name={self.name!r})"


class Content(Entry):
    """Renderable page."""

    kind: ClassVar[str] = "content"

    def __init__(
        self,
        uri: str,
        *,
        name: str = "",
        title: str = "",
        parent: Directory | None = None,
        source_path: Path | None = None,
    ) -> None:
        super().__init__(uri, name=name, title=title, parent=parent)
        self.source_path = source_path


class Directory(Entry):
    """Folder of the content tree.

    Behaves as a container of its children: ``key in directory``,
    ``directory[key]``, ``directory[key] = entry``, ``del directory[key]``,
    ``len(directory)`` and iteration over the entries in their current order.
    """

    kind: ClassVar[str] = "directory"

    def __init__(
        self,
        uri: str,
        *,
        name: str = "",
        title: str = "",
        parent: Directory | None = None,
    ) -> None:
        self._children: dict[str, Entry] = {}
        self._first_page: Content | None = None
        super().__init__(uri, name=name, title=title, parent=parent)

    # Ordering

    def sort(self) -> None:
        """Reorder the children by their naming conventions.

        See ``doctree.core.sorting`` for the rules. Children without a name,
        title or key are dropped.
        """
        ordered = dict(order_entries(self._children.items()))
        for key, entry in self._children.items():
            if key not in ordered:
                entry._parent = None
        self._children = ordered
        self._first_page = None

    # Children

    @property
    def entries(self) -> list[Entry]:
        """Children in their current order."""
        return list(self._children.values())

    def add_child(self, entry: Entry) -> None:
        """Attach an entry under its URI, replacing any entry with that URI.

        The entry is detached from its previous directory first. The new
        child is not ordered until ``sort()`` runs again.
        """
        previous = entry._parent
        if previous is not None and previous is not self:
            previous.remove_child(entry)
        replaced = self._children.get(entry.uri)
        if replaced is not None and replaced is not entry:
            replaced._parent = None
        self._children[entry.uri] = entry
        entry._parent = self
        self._first_page = None

    def remove_child(self, entry: Entry) -> None:
        """Remove the child stored under the entry's URI, if any."""
        self._discard(entry.uri)

    def get(self, key: str) -> Entry | None:
        """Get a child by key, None if absent."""
        return self._children.get(key)

    def _discard(self, key: str) -> None:
        removed = self._children.pop(key, None)
        if removed is None:
            return
        removed._parent = None
        self._first_page = None

    def __contains__(self, key: object) -> bool:
        return key in self._children

    def __getitem__(self, key: str) -> Entry:
        return self._children[key]

    def __setitem__(self, key: str, value: Entry) -> None:
        # Children are always stored under their own URI
        if not isinstance(value, Entry):
            raise TypeError(f"The value is not of type Entry: {value!r}")
        self.add_child(value)

    def __delitem__(self, key: str) -> None:
        self._discard(key)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._children)

    # Navigation

    def get_config(self) -> TreeConfig:
        """Get the tree configuration from the Root.

        Raises:
            TreeStructureError: If the parent chain doesn't reach a Root
        """
        if self._parent is None:
            raise TreeStructureError(
                "Could not retrieve configuration. Are you sure that your tree has a Root?",
            )
        return self._parent.get_config()

    def get_local_index_page(self) -> Entry | None:
        """Get the child stored under the index key, whatever its kind."""
        return self._children.get(self.get_config().index_key)

    def get_index_page(self) -> Content | None:
        """Get the page acting as this folder's index.

        Returns the local index page when it is a page. Otherwise, when
        index inheritance is enabled, the first page found by
        ``seek_first_page()``.

        Returns:
            Index page, or None if the folder has none
        """
        index_page = self.get_local_index_page()
        if isinstance(index_page, Content):
            return index_page

        if self.get_config().inherit_index:
            return self.seek_first_page()

        return None

    def seek_first_page(self) -> Content | None:
        """Find the nearest page in this subtree, depth first.

        The local index page wins. Otherwise children are visited in order:
        a page is returned as is, a directory is searched recursively unless
        its URI starts with a dot.

        Returns:
            First page found, or None if the subtree has none
        """
        index_page = self._children.get(self.get_config().index_key)
        if isinstance(index_page, Content):
            return index_page

        for entry in self._children.values():
            if isinstance(entry, Content):
                return entry
            if isinstance(entry, Directory) and not entry.uri.startswith("."):
                page = entry.seek_first_page()
                if page is not None:
                    return page

        return None

    def get_first_page(self) -> Content | None:
        """Get the first readable page of this subtree.

        Direct child pages are preferred over pages of sub-directories. The
        result is memoized on this directory and on every directory it was
        found through.

        Returns:
            First page, or None if the subtree has no page
        """
        if self._first_page is not None:
            return self._first_page

        for entry in self._children.values():
            if isinstance(entry, Content) and not self._skips_as_first_page(entry):
                self._first_page = entry
                return entry

        for entry in self._children.values():
            if isinstance(entry, Directory):
                page = entry.get_first_page()
                if page is not None:
                    self._first_page = page
                    return page

        return None

    def set_first_page(self, page: Content) -> None:
        self._first_page = page

    def clear_first_page(self) -> None:
        """Forget the memoized first page."""
        self._first_page = None

    def _skips_as_first_page(self, page: Content) -> bool:
        return False

    def has_content(self) -> bool:
        """Check whether any page lives in this subtree.

        Used when building navigation to hide folders without content.
        """
        for entry in self._children.values():
            if isinstance(entry, Content):
                return True
            if isinstance(entry, Directory) and entry.has_content():
                return True
        return False

    def dump(self) -> EntryDict:
        """Convert the subtree to dictionary for JSON serialization."""
        result = super().dump()

        index_page = self.get_index_page()
        first_page = self.get_first_page()
        result["index"] = index_page.url if index_page is not None else ""
        result["first"] = first_page.url if first_page is not None else ""
        result["children"] = [entry.dump() for entry in self._children.values()]

        return result


class Root(Directory):
    """Top directory of a tree, owning its configuration."""

    kind: ClassVar[str] = "root"

    def __init__(self, config: TreeConfig, *, title: str = "") -> None:
        super().__init__("", title=title)
        self._config = config

    @property
    def config(self) -> TreeConfig:
        return self._config

    def get_config(self) -> TreeConfig:
        return self._config

    def _skips_as_first_page(self, page: Content) -> bool:
        # The homepage doesn't count as first page
        return page is self.get_index_page()
