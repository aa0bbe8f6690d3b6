import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from geosparql_to_geojson.main import app
    return TestClient(app)
