"""Navigation API endpoints.

Provides full navigation tree and subtree endpoints.
"""

from aiohttp import web

from doctree.app_keys import loader_key
from doctree.core.navigation import build_navigation, find_directory


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/{path:.*}", get_navigation_subtree),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    root = request.app[loader_key].load()
    nav_items = build_navigation(root)
    return web.json_response({"items": [item.to_dict() for item in nav_items]})


async def get_navigation_subtree(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    root = request.app[loader_key].load()

    directory = find_directory(root, path)
    if directory is None:
        return web.json_response(
            {"error": "Section not found", "path": path},
            status=404,
        )

    subtree = build_navigation(directory)
    return web.json_response({"items": [item.to_dict() for item in subtree]})
