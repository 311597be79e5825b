from __future__ import annotations

import json
from typing import List

from core.models import Finding, ScanReport


def format_finding(f: Finding) -> str:
    line = f"{f.host}:{f.port} open"
    if f.banner:
        line += f" | {f.banner}"
    return line


def render_header(target: str, port_count: int) -> str:
    return f"Starting scan of {target} ({port_count} ports)..."


def render_target_ip(ip: str) -> str:
    return f"Target IP: {ip}"


def render_text(report: ScanReport) -> List[str]:
    lines = [f"Scan completed! Found {len(report.findings)} open ports:"]
    lines.extend(format_finding(f) for f in report.findings)
    if not report.findings:
        lines.append("No open ports found")
    if report.cancelled:
        lines.append("Scan interrupted, results are partial")
    return lines


def render_json(report: ScanReport) -> str:
    return json.dumps([f.model_dump() for f in report.findings], indent=2)
