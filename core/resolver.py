"""
Target resolution: binds a hostname or literal IP to the single address
the scan will run against.
"""

import asyncio
import ipaddress
import logging
import socket
from typing import Optional

from core.errors import ResolutionError

log = logging.getLogger(__name__)


def parse_literal(target: str) -> Optional[str]:
    try:
        return str(ipaddress.ip_address(target.strip()))
    except ValueError:
        return None


async def resolve(target: str) -> str:
    """
    Literal IPv4/IPv6 input is returned as-is without touching the network.
    Anything else gets exactly one getaddrinfo lookup; the first address
    returned wins, whatever its family.
    """
    literal = parse_literal(target)
    if literal is not None:
        return literal

    host = target.strip()
    if not host:
        raise ResolutionError(target, "empty target")

    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(host, None, type=socket.SOCK_STREAM)
    except (socket.gaierror, OSError, UnicodeError) as exc:
        raise ResolutionError(target, str(exc)) from exc

    if not infos:
        raise ResolutionError(target)

    address = infos[0][4][0]
    log.debug("resolved %s -> %s (%d candidates)", host, address, len(infos))
    return address
