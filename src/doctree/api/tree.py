"""Content tree API endpoint."""

from aiohttp import web

from doctree.app_keys import loader_key


def create_tree_routes() -> list[web.RouteDef]:
    return [web.get("/api/tree", get_tree)]


async def get_tree(request: web.Request) -> web.Response:
    root = request.app[loader_key].load()
    return web.json_response(root.dump())
