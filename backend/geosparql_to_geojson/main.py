from geosparql_to_geojson.core.settings import Settings
from geosparql_to_geojson.routers import geojson as geojson_router
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging


logging.basicConfig(level=Settings.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

app = FastAPI(title='GeoSPARQL to GeoJSON')

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"], # Allows all methods
    allow_headers=["*"], # Allows all headers
)

app.include_router(geojson_router.api_router, prefix='/geojson', tags=['geojson'])
