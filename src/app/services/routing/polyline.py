"""Google polyline algorithm format codec.

Coordinates are rounded to ``precision`` decimal digits (5 by default, about
1.1 m), so decoding only recovers an approximation of the encoded input.
"""

from __future__ import annotations

import math
from typing import Iterable

DEFAULT_PRECISION = 5


def _round_half_up(value: float) -> int:
    # Halves round toward +inf, as JavaScript Math.round does.
    return math.floor(value + 0.5)


def _encode_value(value: int, chunks: list[str]) -> None:
    value = ~(value << 1) if value < 0 else (value << 1)
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1F)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))


def encode_polyline(coordinates: Iterable[tuple[float, float]], precision: int = DEFAULT_PRECISION) -> str:
    """Encode (lat, lon) pairs into a polyline string."""

    factor = 10 ** precision
    chunks: list[str] = []
    prev_lat = 0
    prev_lon = 0

    for lat, lon in coordinates:
        lat_scaled = _round_half_up(lat * factor)
        lon_scaled = _round_half_up(lon * factor)
        _encode_value(lat_scaled - prev_lat, chunks)
        _encode_value(lon_scaled - prev_lon, chunks)
        prev_lat = lat_scaled
        prev_lon = lon_scaled

    return "".join(chunks)


def _decode_value(polyline: str, index: int) -> tuple[int, int]:
    shift = 0
    result = 0
    while True:
        if index >= len(polyline):
            raise ValueError("Polyline string is truncated.")
        b = ord(polyline[index]) - 63
        if not 0 <= b <= 63:
            raise ValueError(f"Invalid polyline character {polyline[index]!r} at position {index}.")
        index += 1
        result |= (b & 0x1F) << shift
        shift += 5
        if b < 0x20:
            break
    delta = ~(result >> 1) if (result & 1) else (result >> 1)
    return delta, index


def decode_polyline(polyline: str, precision: int = DEFAULT_PRECISION) -> list[tuple[float, float]]:
    """Decode a polyline string to a list of (lat, lon) coordinates."""

    factor = 10 ** precision
    coordinates = []
    index = 0
    lat = 0
    lon = 0

    while index < len(polyline):
        dlat, index = _decode_value(polyline, index)
        dlon, index = _decode_value(polyline, index)
        lat += dlat
        lon += dlon
        coordinates.append((lat / factor, lon / factor))

    return coordinates
