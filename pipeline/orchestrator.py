"""
Scan orchestrator: a fixed pool of worker tasks drains a queue of ports,
so no more than `concurrency` probes (and sockets) exist at any moment.
Open results are collected in completion order; everything else is dropped.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional, Sequence

from core.config import settings
from core.models import Finding, ProbeResult, ScanReport
from core.ports import expand
from core.resolver import resolve
from probers.tcp_connect import probe

log = logging.getLogger(__name__)

Prober = Callable[[str, int, float], Awaitable[ProbeResult]]


class Scanner:
    def __init__(self, prober: Optional[Prober] = None) -> None:
        self.prober: Prober = prober or probe
        self._stop: Optional[asyncio.Event] = None

    def cancel(self) -> None:
        """Ask a running scan to stop; it returns what it has found so far. No-op when idle."""
        if self._stop is not None:
            self._stop.set()

    async def _worker(self, address: str, queue: "asyncio.Queue[int]", timeout: float, findings: List[Finding]) -> None:
        while True:
            try:
                port = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            try:
                result = await self.prober(address, port, timeout)
            except Exception:  # noqa: BLE001
                log.exception("probe %s:%d raised", address, port)
                continue
            log.debug("probe %s:%d -> %s", address, port, result.outcome.value)
            finding = result.to_finding()
            if finding is not None:
                findings.append(finding)

    async def scan(
        self,
        address: str,
        ports: Sequence[int],
        concurrency: int,
        connect_timeout: float,
        target: Optional[str] = None,
    ) -> ScanReport:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        if connect_timeout <= 0:
            raise ValueError("connect timeout must be > 0")

        start = time.monotonic()
        findings: List[Finding] = []
        queue: "asyncio.Queue[int]" = asyncio.Queue()
        for port in ports:
            queue.put_nowait(port)

        self._stop = asyncio.Event()

        pool_size = min(concurrency, len(ports))
        log.info("scanning %s: %d ports, %d workers, timeout %.3fs", address, len(ports), pool_size, connect_timeout)
        workers = [
            asyncio.create_task(self._worker(address, queue, connect_timeout, findings))
            for _ in range(pool_size)
        ]
        stopper = asyncio.create_task(self._stop.wait())
        cancelled = False
        try:
            if workers:
                done_all = asyncio.gather(*workers)
                await asyncio.wait({done_all, stopper}, return_when=asyncio.FIRST_COMPLETED)
                if not done_all.done():
                    cancelled = True
                    log.warning("scan of %s cancelled, returning partial results", address)
                    for w in workers:
                        w.cancel()
                await asyncio.gather(done_all, return_exceptions=True)
        finally:
            stopper.cancel()
            for w in workers:
                w.cancel()
            self._stop = None

        duration_ms = int((time.monotonic() - start) * 1000)
        log.info("scan of %s finished in %dms: %d open", address, duration_ms, len(findings))
        return ScanReport(
            target=target or address,
            ip=address,
            ports_scanned=len(ports),
            findings=list(findings),
            cancelled=cancelled,
            duration_ms=duration_ms,
        )


async def run_scan(
    target: str,
    ports_spec: Optional[str] = None,
    concurrency: Optional[int] = None,
    timeout_ms: Optional[int] = None,
    scanner: Optional[Scanner] = None,
) -> ScanReport:
    """Expand, resolve, then scan. Both setup steps fail before any probe."""
    ports = expand(ports_spec if ports_spec is not None else settings.default_ports)
    address = await resolve(target)
    scanner = scanner or Scanner()
    return await scanner.scan(
        address,
        ports,
        concurrency=settings.concurrency if concurrency is None else concurrency,
        connect_timeout=(settings.timeout_ms if timeout_ms is None else timeout_ms) / 1000.0,
        target=target,
    )
