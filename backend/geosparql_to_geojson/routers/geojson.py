from geosparql_to_geojson.converter import to_geojson
from geosparql_to_geojson.core.settings import Settings
from geosparql_to_geojson.exceptions import GeoSparqlError
from geosparql_to_geojson.schemas import requests, responses
from fastapi import APIRouter, HTTPException
import logging


logger = logging.getLogger(__name__)

api_router = APIRouter(prefix='')


@api_router.post('/convert')
def convert_geosparql(conversion: requests.ConvertGeoSparql) -> responses.FeatureCollection:
    reverse = Settings.DEFAULT_REVERSE if conversion.reverse is None else conversion.reverse
    try:
        geojson = to_geojson(conversion.values, conversion.properties, reverse)
    except GeoSparqlError as e:
        logger.info(f'Rejected conversion: {e}')
        raise HTTPException(status_code=422, detail=str(e))

    return geojson.validate()
