"""
Banner sanitization: turns the first bytes a service sends into a short
printable string, or None when there is nothing worth showing.
"""

from typing import Optional

BANNER_PLACEHOLDER = "."


def _printable(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


def sanitize_banner(data: bytes) -> Optional[str]:
    # placeholders alone are not a banner
    if not any(0x21 <= b <= 0x7E for b in data):
        return None
    text = "".join(chr(b) if _printable(b) else BANNER_PLACEHOLDER for b in data)
    return text.strip() or None
