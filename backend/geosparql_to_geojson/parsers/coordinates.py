from geosparql_to_geojson.enums.geometry_type import GeometryType
from geosparql_to_geojson.exceptions import CoordinateParseError
from geosparql_to_geojson.parsers.geosparql import TYPE_NAME_PATTERN
from typing import Any
import logging
import math
import re


logger = logging.getLogger(__name__)

_SEPARATOR_PATTERN = re.compile(r'[\s,()]+')
_NUMBER_PATTERN = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')

_UNWRAPPED_TYPES = (GeometryType.LINESTRING, GeometryType.MULTILINE)


def parse_numbers(raw: str, geometry_type: GeometryType | None = None) -> list[float]:
    text = raw
    if geometry_type == GeometryType.GEOMETRYCOLLECTION:
        # Members are flattened into a single coordinate stream
        text = TYPE_NAME_PATTERN.sub(' ', text)

    numbers = []
    for token in _SEPARATOR_PATTERN.split(text):
        if not token:
            continue
        if not _NUMBER_PATTERN.fullmatch(token):
            raise CoordinateParseError(raw, token)
        number = float(token)
        if not math.isfinite(number):
            raise CoordinateParseError(raw, token, 'out of range')
        numbers.append(number)
    return numbers

def pair_up(numbers: list[float]) -> list[list[float]]:
    return [numbers[i:i + 2] for i in range(0, len(numbers), 2)]

def format_coordinates(raw: str, geometry_type: GeometryType, reverse: bool = False) -> Any:
    numbers = parse_numbers(raw, geometry_type)
    if reverse:
        numbers.reverse()

    if geometry_type == GeometryType.POINT:
        return numbers

    pairs = pair_up(numbers)
    if geometry_type in _UNWRAPPED_TYPES:
        return pairs
    return [pairs]

def format_geometries(raw_map: dict[GeometryType, list[str]], reverse: bool = False) -> dict[GeometryType, list[Any]]:
    """Formats every non-polygon entry; polygon entries are carried over raw for the polygon resolver."""
    formatted = {}
    for geometry_type, raw_values in raw_map.items():
        if geometry_type == GeometryType.POLYGON:
            formatted[geometry_type] = list(raw_values)
            continue
        formatted[geometry_type] = [format_coordinates(raw, geometry_type, reverse) for raw in raw_values]
        logger.debug(f'Formatted {len(raw_values)} {geometry_type} literals')
    return formatted
