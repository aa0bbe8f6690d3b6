from geosparql_to_geojson.schemas.responses.geojson import (
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    LineString,
    MultiPoint,
    MultiPolygon,
    Multiline,
    Point,
    Polygon,
)
