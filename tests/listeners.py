"""Loopback helpers shared by the network tests."""

import asyncio
import socket


def free_port() -> int:
    """A loopback port that was free a moment ago; nothing listens on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


async def start_listener(greeting: bytes = b""):
    async def handle(reader, writer):
        if greeting:
            writer.write(greeting)
            await writer.drain()
        try:
            await reader.read(1)
        except ConnectionError:
            pass
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    return server, port
