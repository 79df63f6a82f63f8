r"""Dump binaries in a similar way to `xxd`.

    puts(b"\x01\x02\x03\xff" + b"Hello cruel world")
    #=> 0       01 02 03 FF 48 65 6C 6C 6F 20 63 72 75 65 6C 20   ....Hello cruel
    #=> 1       77 6F 72 6C 64                                    world
"""

import sys
from argparse import ArgumentParser
from typing import Any, Callable, List, Optional
from chunker import chunk
from encoder import to_hex, to_printable
from formatter import Fragment, format_lines, visualize_fragment
from utils import as_bytes, write_stdout
from termcolor import colored


def dump(data: Any) -> List[Fragment]:
    r"""Dump a binary into a list of indexed fragments.

    Every fragment pairs a chunk of hexadecimal octets with the chunk of
    printable characters for the same bytes, both tagged with the row index:

        dump(b"abc") == [((["61", "62", "63"], 0), ("abc", 0))]
        dump(b"\xff") == [((["FF"], 0), (".", 0))]
        dump(b"") == []
    """
    data = as_bytes(data)
    return list(zip(chunk(to_hex(data)), chunk(to_printable(data))))


def puts(data: Any, sink: Callable[[str], Any] = write_stdout) -> bool:
    """Format a binary dump and hand the whole text to sink in one call."""
    sink("".join(format_lines(dump(data))))
    return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgumentParser(description="Dumps text arguments as hex and ASCII")
    parser.add_argument("texts", metavar="TEXT", nargs="+", help="text to dump")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Shows every row as a tree instead of the plain dump",
    )
    args = parser.parse_args(argv)

    for text in args.texts:
        if len(args.texts) > 1:
            print(colored(f"** {text!r}:", "cyan"))
        try:
            data = text.encode("utf-8")
            if args.verbose:
                for fragment in dump(data):
                    print(visualize_fragment(fragment))
            else:
                puts(data)
        except (ValueError, TypeError) as e:
            print(colored(f"Failed to dump {text!r}: {e}", "red"), file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
