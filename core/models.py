"""
Shared data models: per-port probe outcomes and the scan report handed
to the output layer. Only open ports ever become Findings.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Literal, Optional, Set

from pydantic import BaseModel, Field


class ProbeOutcome(str, enum.Enum):
    OPEN = "open"
    CLOSED = "closed"
    TIMED_OUT = "timed_out"
    ERROR = "error"


class Finding(BaseModel):
    host: str
    port: int = Field(ge=0, le=65535)
    status: Literal["open"] = "open"
    banner: Optional[str] = None


@dataclass(frozen=True)
class ProbeResult:
    host: str
    port: int
    outcome: ProbeOutcome
    banner: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.outcome is ProbeOutcome.OPEN

    def to_finding(self) -> Optional[Finding]:
        if not self.is_open:
            return None
        return Finding(host=self.host, port=self.port, banner=self.banner)


class ScanReport(BaseModel):
    target: str
    ip: str
    ports_scanned: int = 0
    findings: List[Finding] = Field(default_factory=list)
    cancelled: bool = False
    duration_ms: int = 0

    def open_ports(self) -> Set[int]:
        return {f.port for f in self.findings}
