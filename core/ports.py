from __future__ import annotations

import re
from typing import List

from core.errors import PortSpecError

MIN_PORT = 1
MAX_PORT = 65535

_DIGITS = re.compile(r"[0-9]+")


def _parse_port(text: str, token: str) -> int:
    text = text.strip()
    if not _DIGITS.fullmatch(text):
        raise PortSpecError(token, "invalid port")
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(MAX_PORT)):
        raise PortSpecError(token, f"port out of range {MIN_PORT}-{MAX_PORT}")
    port = int(digits)
    if port < MIN_PORT or port > MAX_PORT:
        raise PortSpecError(token, f"port out of range {MIN_PORT}-{MAX_PORT}")
    return port


def expand(spec: str) -> List[int]:
    """
    Expands a port specification into a sorted, de-duplicated port list.
    Supports:
    - Single ports: "80"
    - Ranges: "1-1024" (reversed bounds such as "443-80" are normalized)
    - Comma-separated: "22,80,443"
    - Mixed: "1-1024,8080,9000-9005"
    Raises PortSpecError naming the first bad token; nothing is returned
    for a partially valid spec.
    """
    if not spec or not spec.strip():
        raise PortSpecError(spec or "", "empty port spec")

    ports = set()
    for part in spec.split(","):
        token = part.strip()
        if not token:
            raise PortSpecError(part, "empty port token")
        if "-" in token:
            start_s, end_s = token.split("-", 1)
            if not start_s.strip() or not end_s.strip():
                raise PortSpecError(token, "malformed port range")
            a = _parse_port(start_s, token)
            b = _parse_port(end_s, token)
            ports.update(range(min(a, b), max(a, b) + 1))
        else:
            ports.add(_parse_port(token, token))

    return sorted(ports)
