from geosparql_to_geojson.converter import GeoJson, convert, to_geojson
from geosparql_to_geojson.enums.geometry_type import GeometryType
from geosparql_to_geojson.exceptions import CoordinateParseError, GeoSparqlError

__version__ = '0.1.0'
