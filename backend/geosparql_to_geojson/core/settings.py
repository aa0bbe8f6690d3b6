from geosparql_to_geojson.core.constants import DEFAULT_CORS_ORIGINS
from dotenv import load_dotenv
import logging
import os


load_dotenv()


def _read_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')

def _read_log_level(name: str, default: str) -> str:
    value = os.getenv(name, default).strip().upper()
    if value not in logging.getLevelNamesMapping():
        return default
    return value

def _read_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


class Settings:
    CORS_ORIGINS: list[str] = _read_list('CORS_ORIGINS', DEFAULT_CORS_ORIGINS)
    # Axis order applied when a request does not say
    DEFAULT_REVERSE: bool = _read_bool('DEFAULT_REVERSE', False)
    LOG_LEVEL: str = _read_log_level('LOG_LEVEL', 'INFO')
