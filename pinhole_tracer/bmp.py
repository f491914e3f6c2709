"""Writing 32-bit top-down BMP files."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from os import PathLike
from typing import Union

FILE_HEADER_SIZE = 14
DIB_HEADER_SIZE = 40
BITS_PER_PIXEL = 32


def little_endian_32_to_8(value: int) -> bytes:
    """The low 32 bits of ``value`` as four little-endian bytes."""
    return struct.pack("<I", value & 0xFFFFFFFF)


def little_endian_16_to_8(value: int) -> bytes:
    """The low 16 bits of ``value`` as two little-endian bytes."""
    return struct.pack("<H", value & 0xFFFF)


def write_bmp(file_name: Union[str, PathLike], pixel_buffer: Sequence[int],
              width: int, height: int) -> None:
    """Write an RGBA pixel buffer, rows top to bottom, as a BMP file.

    Raises ValueError if the buffer holds fewer than ``width * height``
    pixels, and OSError if the file cannot be written.
    """
    pixel_count = width * height
    if len(pixel_buffer) < pixel_count * 4:
        raise ValueError(
            f"pixel buffer holds {len(pixel_buffer)} bytes, "
            f"{pixel_count * 4} needed for {width}x{height}")

    data_offset = FILE_HEADER_SIZE + DIB_HEADER_SIZE
    header = b"".join((
        b"BM",
        little_endian_32_to_8(data_offset + len(pixel_buffer)),
        little_endian_32_to_8(0),                   # reserved
        little_endian_32_to_8(data_offset),
        little_endian_32_to_8(DIB_HEADER_SIZE),
        little_endian_32_to_8(width),
        little_endian_32_to_8(-height),             # negative: top-down rows
        little_endian_16_to_8(1),                   # colour planes
        little_endian_16_to_8(BITS_PER_PIXEL),
        little_endian_32_to_8(0),                   # no compression
        little_endian_32_to_8(0),                   # raw data size
        little_endian_32_to_8(0),                   # horizontal resolution
        little_endian_32_to_8(0),                   # vertical resolution
        little_endian_32_to_8(0),                   # palette colours
        little_endian_32_to_8(0),                   # important colours
    ))

    source = bytes(pixel_buffer[:pixel_count * 4])
    pixels = bytearray(len(source))
    # RGBA -> BGRA
    pixels[0::4] = source[2::4]
    pixels[1::4] = source[1::4]
    pixels[2::4] = source[0::4]
    pixels[3::4] = source[3::4]

    with open(file_name, "wb") as handle:
        handle.write(header)
        handle.write(pixels)