from collections.abc import Iterable
from dataclasses import dataclass
from geosparql_to_geojson.core.constants import FEATURE, FEATURE_COLLECTION
from geosparql_to_geojson.enums.geometry_type import GeometryType
from geosparql_to_geojson.parsers.coordinates import format_geometries
from geosparql_to_geojson.parsers.geosparql import extract_geometries, group_by_type
from geosparql_to_geojson.parsers.polygon import resolve_polygons
from geosparql_to_geojson.schemas import responses
from typing import Any
import logging


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Geometry:
    type: GeometryType
    coordinates: Any

    def to_dict(self) -> dict[str, Any]:
        return {'type': self.type.value, 'coordinates': self.coordinates}


def build_feature(geometry: Geometry, properties: dict[str, Any]) -> dict[str, Any]:
    return {
        'type': FEATURE,
        'geometry': geometry.to_dict(),
        'properties': properties,
    }

def build_feature_collection(geometries: Iterable[Geometry], properties: dict[str, Any]) -> dict[str, Any]:
    # The same properties object is shared by every feature
    return {
        'type': FEATURE_COLLECTION,
        'features': [build_feature(geometry, properties) for geometry in geometries],
    }


class GeoJson:
    """Result of a conversion: a GeoJSON FeatureCollection document."""

    def __init__(self, document: dict[str, Any]):
        self.document = document

    @property
    def features(self) -> list[dict[str, Any]]:
        return self.document['features']

    def to_dict(self) -> dict[str, Any]:
        return self.document

    def validate(self) -> responses.FeatureCollection:
        """Checks the document against the GeoJSON schema, raising pydantic.ValidationError when it does not fit."""
        return responses.FeatureCollection.model_validate(self.document)

    def to_json(self) -> str:
        return self.validate().model_dump_json()

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f'GeoJson(features={len(self.features)})'


def collect_geometries(values: str | Iterable[str], reverse: bool = False) -> list[Geometry]:
    raw_map = group_by_type(extract_geometries(values))
    type_map = format_geometries(raw_map, reverse)
    if GeometryType.POLYGON in raw_map:
        type_map = resolve_polygons(type_map, raw_map[GeometryType.POLYGON])

    return [
        Geometry(type=geometry_type, coordinates=coordinates)
        for geometry_type, entries in type_map.items()
        for coordinates in entries
    ]

def to_geojson(values: str | Iterable[str], properties: dict[str, Any] | None = None, reverse: bool = False) -> GeoJson:
    """Converts GeoSPARQL literals into a GeoJSON FeatureCollection.

    Example:
        >>> str(to_geojson('Point(1.23 9.87)'))
        '{"type":"FeatureCollection","features":[{"type":"Feature","geometry":{"type":"Point","coordinates":[1.23,9.87]},"properties":{}}]}'
    """
    if properties is None:
        properties = {}

    geometries = collect_geometries(values, reverse)
    logger.debug(f'Converted {len(geometries)} geometries')
    return GeoJson(build_feature_collection(geometries, properties))

def convert(values: str | Iterable[str], properties: dict[str, Any] | None = None, reverse: bool = False) -> str:
    return to_geojson(values, properties, reverse).to_json()
