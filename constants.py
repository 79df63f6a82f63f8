# Bytes per dump row
CHUNK_LEN = 16

# Field widths
OFFSET_LEN = 8
HEX_FIELD_LEN = 2 + CHUNK_LEN * 3

# Printable ASCII range, space through tilde
PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E
PLACEHOLDER = "."
