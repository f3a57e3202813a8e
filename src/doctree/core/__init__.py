"""Content tree, ordering and navigation."""
