"""Navigation tree builder.

Builds navigation trees from content trees for UI presentation.
Navigation is a view layer over the sorted content tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict

from doctree.core.tree import Content, Directory
from doctree.core.types import URLPath


class NavItemDict(TypedDict, total=False):
    """Dictionary representation of a navigation item."""

    title: str
    path: str
    children: list[NavItemDict]


@dataclass
class NavItem:
    """Navigation item with children for UI tree."""

    title: str
    path: URLPath
    children: list[NavItem] = field(default_factory=list)

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        result: NavItemDict = {"title": self.title, "path": self.path}
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


def build_navigation(directory: Directory) -> list[NavItem]:
    """Build navigation tree from a directory.

    The directory's own index page is not listed, it is reached through the
    directory item. Hidden directories and directories without any page are
    left out.

    Args:
        directory: Directory to build navigation from, usually the Root

    Returns:
        List of NavItem trees for navigation UI
    """
    index_page = directory.get_local_index_page()
    items: list[NavItem] = []
    for entry in directory:
        if entry is index_page and isinstance(entry, Content):
            continue
        if isinstance(entry, Content):
            items.append(NavItem(title=entry.title, path=entry.url))
        elif isinstance(entry, Directory) and _is_navigable(entry):
            items.append(_build_directory_item(entry))
    return items


def find_directory(directory: Directory, path: str) -> Directory | None:
    """Resolve a URL path to a directory.

    Args:
        directory: Directory the path is relative to, usually the Root
        path: URL path (e.g., "guide/setup" or "/guide/setup")

    Returns:
        Directory if found, None otherwise
    """
    current = directory
    for segment in path.strip("/").split("/"):
        if not segment:
            continue
        child = current.get(segment)
        if not isinstance(child, Directory):
            return None
        current = child
    return current


def _is_navigable(directory: Directory) -> bool:
    return not directory.uri.startswith(".") and directory.has_content()


def _build_directory_item(directory: Directory) -> NavItem:
    """Recursively build NavItem from a directory."""
    landing = directory.get_index_page() or directory.get_first_page()
    return NavItem(
        title=directory.title,
        path=landing.url if landing is not None else directory.url,
        children=build_navigation(directory),
    )
