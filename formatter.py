from typing import List, Sequence, Tuple
from constants import *
from termcolor import colored

Chunk = Tuple[Sequence, int]
Fragment = Tuple[Chunk, Chunk]


def _unpack_fragment(fragment: Fragment) -> Tuple[Sequence[str], str, int]:
    (octets, index), (text, text_index) = fragment
    if index != text_index:
        raise ValueError(f"Fragment index mismatch: {index} != {text_index}")
    if len(octets) != len(text):
        raise ValueError(
            f"Fragment length mismatch: {len(octets)} octets, {len(text)} characters"
        )
    return octets, "".join(text), index


def format_line(fragment: Fragment) -> str:
    octets, text, index = _unpack_fragment(fragment)
    return (
        str(index).ljust(OFFSET_LEN)
        + " ".join(octets).ljust(HEX_FIELD_LEN)
        + text
        + "\n"
    )


def format_lines(fragments: List[Fragment]) -> List[str]:
    """Render dump fragments as lines of index, hex octets and printable text.

    The hex column is padded to fit a full row of CHUNK_LEN octets, so a
    short final row still lines its text up with the rows above it. Every
    line ends with a newline; no fragments means no lines.
    """
    return [format_line(fragment) for fragment in fragments]


def visualize_fragment(fragment: Fragment) -> str:
    """Visualize a dump fragment in a colorized tree-like structure."""
    octets, text, index = _unpack_fragment(fragment)
    lines = [
        colored(f"FRAGMENT:", "cyan"),
        colored(f"├── Index: {index}", "yellow"),
        colored(f"├── Length: {len(octets)}", "yellow"),
        colored(f"├── Octets: {' '.join(octets)}", "yellow"),
        colored(f"└── Text: {text!r}", "yellow"),
    ]
    return "\n".join(lines)
