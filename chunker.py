from typing import List, Sequence, Tuple, TypeVar
from constants import *

S = TypeVar("S", bound=Sequence)


def chunk(seq: S, n: int = CHUNK_LEN) -> List[Tuple[S, int]]:
    """Split seq into chunks of at most n elements, each paired with its index.

    Chunks are slices of seq, so a str yields str chunks and a list yields
    list chunks. The last chunk may be shorter than n; an empty seq yields
    no chunks at all.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Invalid chunk size: {n!r}")
    if n < 1:
        raise ValueError(f"Invalid chunk size: {n} (min 1)")
    return [
        (seq[start : start + n], i) for i, start in enumerate(range(0, len(seq), n))
    ]
