"""Shared test fixtures."""

import pytest
from doctree.config import TreeConfig
from doctree.core.tree import Root


@pytest.fixture
def tree_config() -> TreeConfig:
    """Tree configuration with defaults (index key "index", no inheritance)."""
    return TreeConfig()


@pytest.fixture
def root(tree_config: TreeConfig) -> Root:
    """Empty Root using the tree_config fixture."""
    return Root(tree_config)
