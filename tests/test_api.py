"""Tests for tree and navigation API endpoints."""

from pathlib import Path

import pytest
from aiohttp.test_utils import TestClient
from doctree.config import Config, DocsConfig, ServerConfig, TreeConfig
from doctree.server import create_app


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create docs directory with sample structure."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "index.md").write_text("# Home\n\nWelcome.")

    domain_a = docs / "domain-a"
    domain_a.mkdir()
    (domain_a / "index.md").write_text("# Domain A\n\nIndex content.")
    (domain_a / "guide.md").write_text("# Guide\n\nGuide content.")

    subdomain = domain_a / "subdomain"
    subdomain.mkdir()
    (subdomain / "index.md").write_text("# Subdomain\n\nSubdomain index.")
    (subdomain / "details.md").write_text("# Details\n\nDetails content.")

    domain_b = docs / "domain-b"
    domain_b.mkdir()
    (domain_b / "api.md").write_text("# API Docs\n\nAPI content.")

    return docs


def _make_config(source_dir: Path) -> Config:
    """Create a Config for testing."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=source_dir),
        tree=TreeConfig(),
    )


@pytest.fixture
async def client(docs_dir: Path, aiohttp_client) -> TestClient:
    """Create test client with configured app."""
    return await aiohttp_client(create_app(_make_config(docs_dir)))


class TestGetTree:
    """Tests for GET /api/tree."""

    @pytest.mark.asyncio
    async def test__populated_docs__returns_dump(self, client: TestClient) -> None:
        """Return the sorted tree dump."""
        response = await client.get("/api/tree")

        assert response.status == 200
        data = await response.json()
        assert data["type"] == "root"
        assert data["index"] == "/index"
        assert data["first"] == "/domain-a/index"
        assert [child["uri"] for child in data["children"]] == [
            "index",
            "domain-a",
            "domain-b",
        ]

    @pytest.mark.asyncio
    async def test__missing_source_dir__returns_empty_root(
        self,
        tmp_path: Path,
        aiohttp_client,
    ) -> None:
        test_client = await aiohttp_client(create_app(_make_config(tmp_path / "none")))

        response = await test_client.get("/api/tree")

        assert response.status == 200
        data = await response.json()
        assert data["children"] == []
        assert data["index"] == ""
        assert data["first"] == ""


class TestGetNavigation:
    """Tests for GET /api/navigation."""

    @pytest.mark.asyncio
    async def test__populated_docs__returns_full_tree(self, client: TestClient) -> None:
        """Return complete navigation tree."""
        response = await client.get("/api/navigation")

        assert response.status == 200
        data = await response.json()
        assert [item["title"] for item in data["items"]] == ["Domain A", "Domain B"]

    @pytest.mark.asyncio
    async def test__tree_structure__includes_nested_items(
        self,
        client: TestClient,
    ) -> None:
        response = await client.get("/api/navigation")

        data = await response.json()
        domain_a = data["items"][0]
        assert domain_a["path"] == "/domain-a/index"
        assert domain_a["children"] == [
            {"title": "Guide", "path": "/domain-a/guide"},
            {
                "title": "Subdomain",
                "path": "/domain-a/subdomain/index",
                "children": [
                    {"title": "Details", "path": "/domain-a/subdomain/details"},
                ],
            },
        ]


class TestGetNavigationSubtree:
    """Tests for GET /api/navigation/{path}."""

    @pytest.mark.asyncio
    async def test__valid_section__returns_subtree(self, client: TestClient) -> None:
        response = await client.get("/api/navigation/domain-a/subdomain")

        assert response.status == 200
        data = await response.json()
        assert data == {
            "items": [{"title": "Details", "path": "/domain-a/subdomain/details"}],
        }

    @pytest.mark.asyncio
    async def test__unknown_section__returns_404(self, client: TestClient) -> None:
        response = await client.get("/api/navigation/nonexistent")

        assert response.status == 404
        data = await response.json()
        assert data == {"error": "Section not found", "path": "nonexistent"}
