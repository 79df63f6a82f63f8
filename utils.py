import sys
from typing import Any


def as_bytes(data: Any) -> bytes:
    """Coerce a byte sequence to bytes, rejecting anything that is not one."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    # bytes(5) is five zero bytes, not a sequence
    if data is None or isinstance(data, (str, int, float)):
        raise TypeError(f"Expected a byte sequence, got {type(data).__name__}")
    try:
        return bytes(data)
    except ValueError as e:
        raise ValueError(f"Invalid byte sequence: {e}") from e


def write_stdout(text: str):
    sys.stdout.write(text)
    sys.stdout.flush()
