from collections.abc import Iterable
from dataclasses import dataclass
from geosparql_to_geojson.enums.geometry_type import GeometryType
import logging
import re


logger = logging.getLogger(__name__)

# Longest names first so that MultiPolygon is never read as a shorter name
_TYPE_NAMES = sorted((geometry_type.value for geometry_type in GeometryType), key=len, reverse=True)

# A type name not glued to a preceding letter, e.g. "LineString" inside "MultiLineString" does not count
TYPE_NAME_PATTERN = re.compile(r'(?<![A-Za-z])(' + '|'.join(_TYPE_NAMES) + r')', re.IGNORECASE)
_LITERAL_START_PATTERN = re.compile(TYPE_NAME_PATTERN.pattern + r'\s*\(', re.IGNORECASE)


@dataclass(frozen=True)
class RawGeometryRecord:
    geometry_type: GeometryType
    coordinates: str


def _find_closing_paren(text: str, opening: int) -> int | None:
    depth = 0
    for index in range(opening, len(text)):
        char = text[index]
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                return index
    return None

def _strip_payload(payload: str) -> str:
    # "Polygon((a), (b))" carries "(a), (b)": the outer ring parens go, the inner boundary stays
    return payload.strip().lstrip('(').rstrip(')').strip()

def scan_literals(text: str) -> Iterable[RawGeometryRecord]:
    position = 0
    while True:
        m = _LITERAL_START_PATTERN.search(text, position)
        if m is None:
            return

        opening = m.end() - 1
        closing = _find_closing_paren(text, opening)
        if closing is None:
            logger.warning(f'Skipping unbalanced {m.group(1)} literal at offset {m.start()}')
            position = m.end()
            continue

        yield RawGeometryRecord(
            geometry_type=GeometryType.from_name(m.group(1)),
            coordinates=_strip_payload(text[opening + 1:closing]),
        )
        position = closing + 1

def extract_geometries(values: str | Iterable[str]) -> list[RawGeometryRecord]:
    if isinstance(values, str):
        values = [values]

    records = []
    for value in values:
        records.extend(scan_literals(value))

    logger.debug(f'Extracted {len(records)} geometry literals')
    return records

def group_by_type(records: Iterable[RawGeometryRecord]) -> dict[GeometryType, list[str]]:
    """Raw coordinate strings per type, types in order of first appearance."""
    grouped: dict[GeometryType, list[str]] = {}
    for record in records:
        grouped.setdefault(record.geometry_type, []).append(record.coordinates)
    return grouped
