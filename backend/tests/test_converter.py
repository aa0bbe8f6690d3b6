import json

import pytest
from pydantic import ValidationError

from geosparql_to_geojson import CoordinateParseError, GeoJson, convert, to_geojson
from geosparql_to_geojson.converter import Geometry, build_feature_collection
from geosparql_to_geojson.enums.geometry_type import GeometryType
from geosparql_to_geojson.schemas import responses

from rings import INNER_HOLE, INNER_HOLE_RING, OUTER_SQUARE, OUTER_SQUARE_RING


def _geometries(document: dict) -> list[dict]:
    return [feature['geometry'] for feature in document['features']]


def test_convert_point():
    assert json.loads(convert('Point(1.23 9.87)')) == {
        'type': 'FeatureCollection',
        'features': [
            {
                'type': 'Feature',
                'geometry': {'type': 'Point', 'coordinates': [1.23, 9.87]},
                'properties': {},
            },
        ],
    }

def test_convert_point_reversed():
    document = json.loads(convert('Point(1.23 9.87)', reverse=True))
    assert _geometries(document) == [{'type': 'Point', 'coordinates': [9.87, 1.23]}]

def test_convert_linestring():
    document = json.loads(convert('LineString(0 0, 1 1, 2 2)'))
    assert _geometries(document) == [{'type': 'LineString', 'coordinates': [[0, 0], [1, 1], [2, 2]]}]

def test_reversal_swaps_every_simple_pair():
    text = 'MultiPoint(1 2, 3 4) LineString(5 6, 7 8) Point(9 10)'
    plain = _geometries(json.loads(convert(text)))
    reversed_ = _geometries(json.loads(convert(text, reverse=True)))

    for before, after in zip(plain, reversed_):
        assert before['type'] == after['type']
        if before['type'] == 'Point':
            assert after['coordinates'] == before['coordinates'][::-1]
            continue
        pairs = before['coordinates'][0] if before['type'] == 'MultiPoint' else before['coordinates']
        swapped = after['coordinates'][0] if after['type'] == 'MultiPoint' else after['coordinates']
        assert sorted(swapped) == sorted([[y, x] for x, y in pairs])

def test_mixed_input_keeps_first_seen_type_order():
    document = json.loads(convert('Point(1 2) LineString(0 0, 3 3)'))
    assert [geometry['type'] for geometry in _geometries(document)] == ['Point', 'LineString']

def test_list_input_groups_types_across_values():
    document = json.loads(convert(['Point(1 2)', 'LineString(0 0, 3 3)', 'Point(5 6)']))
    assert _geometries(document) == [
        {'type': 'Point', 'coordinates': [1, 2]},
        {'type': 'Point', 'coordinates': [5, 6]},
        {'type': 'LineString', 'coordinates': [[0, 0], [3, 3]]},
    ]

def test_polygon_keeps_its_first_seen_position():
    document = json.loads(convert(f'LineString(0 0, 1 1) Polygon(({OUTER_SQUARE})) Point(1 2)'))
    assert [geometry['type'] for geometry in _geometries(document)] == ['LineString', 'Polygon', 'Point']

def test_polygon_with_hole():
    document = json.loads(convert(f'Polygon(({OUTER_SQUARE}), ({INNER_HOLE}))'))
    assert _geometries(document) == [
        {'type': 'Polygon', 'coordinates': [OUTER_SQUARE_RING, INNER_HOLE_RING]},
    ]

def test_polygon_rings_ignore_reversal():
    text = f'Polygon(({OUTER_SQUARE}), ({INNER_HOLE}))'
    assert convert(text, reverse=True) == convert(text)

def test_empty_input_gives_an_empty_collection():
    assert json.loads(convert('nothing to see')) == {'type': 'FeatureCollection', 'features': []}

def test_malformed_number_fails_the_conversion():
    with pytest.raises(CoordinateParseError):
        convert('Point(1 2) LineString(0 0, 1 one)')

def test_properties_are_shared_by_every_feature():
    properties = {'name': 'Westminster'}
    geojson = to_geojson('Point(1 2) Point(3 4)', properties)

    assert len(geojson.features) == 2
    assert all(feature['properties'] is properties for feature in geojson.features)

def test_properties_are_serialized():
    document = json.loads(convert('Point(1 2)', {'name': 'a', 'count': 3, 'tags': ['x']}))
    assert document['features'][0]['properties'] == {'name': 'a', 'count': 3, 'tags': ['x']}

def test_geojson_views():
    geojson = to_geojson('Point(1 2)')

    assert isinstance(geojson, GeoJson)
    assert str(geojson) == geojson.to_json()
    assert json.loads(geojson.to_json()) == geojson.to_dict()
    assert repr(geojson) == 'GeoJson(features=1)'

def test_validate_returns_the_schema_model():
    collection = to_geojson(f'Point(1 2) Polygon(({OUTER_SQUARE}))').validate()

    assert isinstance(collection, responses.FeatureCollection)
    assert isinstance(collection.features[0].geometry, responses.Point)
    assert isinstance(collection.features[1].geometry, responses.Polygon)

def test_validate_rejects_malformed_documents():
    with pytest.raises(ValidationError):
        GeoJson({'type': 'FeatureCollection', 'features': [{'type': 'Feature', 'geometry': {'type': 'Circle'}}]}).validate()

def test_build_feature_collection():
    geometries = [Geometry(GeometryType.MULTILINE, [[0.0, 1.0], [2.0, 3.0]])]
    assert build_feature_collection(geometries, {}) == {
        'type': 'FeatureCollection',
        'features': [
            {
                'type': 'Feature',
                'geometry': {'type': 'Multiline', 'coordinates': [[0.0, 1.0], [2.0, 3.0]]},
                'properties': {},
            },
        ],
    }
