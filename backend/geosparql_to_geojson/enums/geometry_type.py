from enum import StrEnum


class GeometryType(StrEnum):
    POINT = 'Point'
    LINESTRING = 'LineString'
    POLYGON = 'Polygon'
    MULTIPOINT = 'MultiPoint'
    MULTIPOLYGON = 'MultiPolygon'
    GEOMETRYCOLLECTION = 'GeometryCollection'
    MULTILINE = 'Multiline'

    @classmethod
    def from_name(cls, name: str) -> 'GeometryType':
        """Case-insensitive lookup of a type name as written in a literal."""
        lowered = name.lower()
        for geometry_type in cls:
            if geometry_type.value.lower() == lowered:
                return geometry_type
        raise KeyError(name)
