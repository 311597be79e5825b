"""
TCP connect prober using plain asyncio streams, no raw packets.
One call owns one socket and always closes it before returning.
"""

import asyncio
import logging

from core.models import ProbeOutcome, ProbeResult
from probers.banner import sanitize_banner

log = logging.getLogger(__name__)

BANNER_READ_SIZE = 128
BANNER_TIMEOUT_S = 0.2


async def _read_banner(reader: asyncio.StreamReader):
    try:
        data = await asyncio.wait_for(reader.read(BANNER_READ_SIZE), timeout=BANNER_TIMEOUT_S)
    except (asyncio.TimeoutError, OSError):
        return None
    if not data:
        return None
    return sanitize_banner(data)


async def probe(address: str, port: int, connect_timeout: float) -> ProbeResult:
    try:
        reader, writer = await asyncio.wait_for(asyncio.open_connection(address, port), timeout=connect_timeout)
    except asyncio.TimeoutError:
        return ProbeResult(host=address, port=port, outcome=ProbeOutcome.TIMED_OUT)
    except ConnectionRefusedError:
        return ProbeResult(host=address, port=port, outcome=ProbeOutcome.CLOSED)
    except (OSError, ValueError) as exc:
        log.debug("probe %s:%d failed: %s", address, port, exc)
        return ProbeResult(host=address, port=port, outcome=ProbeOutcome.ERROR)

    try:
        banner = await _read_banner(reader)
    finally:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
    return ProbeResult(host=address, port=port, outcome=ProbeOutcome.OPEN, banner=banner)
