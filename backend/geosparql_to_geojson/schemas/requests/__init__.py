from geosparql_to_geojson.schemas.requests.convert_geosparql import ConvertGeoSparql
