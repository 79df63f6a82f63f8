from typing import Iterable, List
from constants import *


def byte_to_hex(b: int) -> str:
    if not 0 <= b <= 0xFF:
        raise ValueError(f"Invalid byte: {b} (expected 0-255)")
    return f"{b:02X}"


def byte_to_printable(b: int) -> str:
    if not 0 <= b <= 0xFF:
        raise ValueError(f"Invalid byte: {b} (expected 0-255)")
    return chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else PLACEHOLDER


def to_hex(data: Iterable[int]) -> List[str]:
    """Convert bytes to a list of two-digit uppercase hex octets.

    to_hex(b"\\x00\\xff\\x01") == ["00", "FF", "01"]
    """
    return [byte_to_hex(b) for b in data]


def to_printable(data: Iterable[int]) -> str:
    """Render bytes as text, replacing anything outside space..tilde with '.'"""
    return "".join(byte_to_printable(b) for b in data)
