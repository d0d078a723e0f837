"""Reordering tile data from row-major strips to column-major layout."""


def row_to_column_order(
    src: bytes,
    tiles_per_row: int,
    tiles_per_column: int,
    bytes_per_tile: int,
    bits_per_pixel: int,
) -> bytes:
    """Move each two-byte pixel row of ``src`` to its column-ordered position."""
    size = len(src)
    dst = bytearray(size)
    column_len = bits_per_pixel * bytes_per_tile * tiles_per_column
    for i in range(0, size - 1, 2):
        j = (i % column_len) * tiles_per_row + (i // column_len) * 2
        if j + 1 >= size:
            raise ValueError("source data does not fit the given tile layout")
        dst[j : j + 2] = src[i : i + 2]
    return bytes(dst)