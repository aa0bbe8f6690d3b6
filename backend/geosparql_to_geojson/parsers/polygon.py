from geosparql_to_geojson.enums.geometry_type import GeometryType
from geosparql_to_geojson.exceptions import CoordinateParseError
from geosparql_to_geojson.parsers.coordinates import parse_numbers
from geosparql_to_geojson.utils import BoundingBox, Ring, shoelace_sum
from typing import Any
import logging
import re


logger = logging.getLogger(__name__)

# "0 0, 4 0), (1 1, 2 1" -> one ring on each side, plus any stray paren
_RING_BOUNDARY_PATTERN = re.compile(r'\)\s*,\s*\(|[()]')


def parse_rings(raw: str) -> list[Ring]:
    """Splits a polygon payload into rings of float coordinates.

    Fragments without any coordinate are dropped. Axis reversal never applies here.
    """
    rings = []
    for ring_text in _RING_BOUNDARY_PATTERN.split(raw):
        ring = []
        for coordinate_text in ring_text.split(','):
            if not coordinate_text.strip():
                continue
            coordinate = parse_numbers(coordinate_text)
            if len(coordinate) < 2:
                raise CoordinateParseError(raw, coordinate_text.strip(), 'expected at least two values')
            ring.append(coordinate)
        if ring:
            rings.append(ring)
    return rings

def is_hole(ring: Ring) -> bool:
    # A negative sum marks a hole. This is the reverse of the usual right-hand rule and is kept as is.
    return shoelace_sum(ring) < 0

def split_outers_and_holes(rings: list[Ring]) -> tuple[list[Ring], list[Ring]]:
    outers = []
    holes = []
    for ring in rings:
        if is_hole(ring):
            holes.append(ring)
        else:
            outers.append(ring)
    return outers, holes

def match_holes(outers: list[Ring], holes: list[Ring]) -> list[list[Ring]]:
    """Holes per outer ring, by strict bounding-box containment.

    A hole goes to the first outer ring whose box strictly contains its own box. Holes inside no box are left out.
    """
    outer_boxes = [BoundingBox.from_ring(outer) for outer in outers]
    matches: list[list[Ring]] = [[] for _ in outers]

    orphans = 0
    for hole in holes:
        hole_box = BoundingBox.from_ring(hole)
        for index, outer_box in enumerate(outer_boxes):
            if outer_box.strictly_contains(hole_box):
                matches[index].append(hole)
                break
        else:
            orphans += 1

    if orphans:
        logger.warning(f'Dropping {orphans} hole ring(s) not enclosed by any outer ring')
    return matches

def resolve_polygons(type_map: dict[GeometryType, list[Any]], raw_polygons: list[str]) -> dict[GeometryType, list[Any]]:
    rings = [ring for raw in raw_polygons for ring in parse_rings(raw)]
    outers, holes = split_outers_and_holes(rings)
    logger.debug(f'Polygon rings: {len(outers)} outer, {len(holes)} hole')

    matches = match_holes(outers, holes)
    polygons = [[outer, *outer_holes] for outer, outer_holes in zip(outers, matches)]

    resolved = dict(type_map)
    resolved[GeometryType.POLYGON] = polygons
    return resolved
