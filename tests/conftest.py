"""
Pytest configuration and fixtures for the Ops Manager client tests.

Each test registers the routes it needs on a local aiohttp test server
and gets a client pointed at it, plus the list of requests the server saw.
"""

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from opsmngr import OpsManagerClient


@pytest_asyncio.fixture
async def serve():
    """Factory returning (client, calls) for a server with the given routes."""
    servers = []
    clients = []

    async def _serve(*routes):
        calls = []

        @web.middleware
        async def record(request, handler):
            calls.append((request.method, request.path))
            return await handler(request)

        app = web.Application(middlewares=[record])
        app.add_routes(list(routes))

        server = TestServer(app)
        await server.start_server()
        servers.append(server)

        client = OpsManagerClient(base_url=str(server.make_url("/")))
        clients.append(client)
        return client, calls

    yield _serve

    for client in clients:
        await client.close()
    for server in servers:
        await server.close()
