"""Application keys for type-safe app configuration access."""

from aiohttp import web

from doctree.core.loader import TreeLoader

loader_key = web.AppKey("loader", TreeLoader)
