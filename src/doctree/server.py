"""aiohttp server for Doctree.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from doctree.api.navigation import create_navigation_routes
from doctree.api.tree import create_tree_routes
from doctree.app_keys import loader_key
from doctree.config import Config
from doctree.core.loader import TreeLoader


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[loader_key] = TreeLoader(config.docs.source_dir, config.tree)

    app.router.add_routes(create_tree_routes())
    app.router.add_routes(create_navigation_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
