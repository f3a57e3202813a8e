"""Core type definitions."""

from typing import NewType

# URL path of an entry in the tree (e.g., "/", "/guide", "/guide/setup")
# Distinct from the entry URI, which is a single path segment
URLPath = NewType("URLPath", str)
