import logging
from unittest.mock import MagicMock, patch

import requests

from utils.geojson_loader import GeoJsonLoader, empty_feature_collection


def test_load_local_file(geojson_files):
    gdp_path, _ = geojson_files
    data = GeoJsonLoader().load(gdp_path, 'GDP Layer')
    assert data['type'] == 'FeatureCollection'
    assert len(data['features']) == 3


def test_missing_file_gives_empty_layer(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        data = GeoJsonLoader().load(tmp_path / 'nope.geojson', 'Endorsers')
    assert data == empty_feature_collection()
    assert 'Error loading Endorsers GeoJSON data' in caplog.text


def test_malformed_json_gives_empty_layer(tmp_path):
    path = tmp_path / 'broken.geojson'
    path.write_text('{"type": "FeatureCollection", "features": [', encoding='utf-8')
    assert GeoJsonLoader().load(path) == empty_feature_collection()


def test_non_collection_is_rejected(tmp_path):
    path = tmp_path / 'point.geojson'
    path.write_text('{"type": "Point", "coordinates": [0, 0]}', encoding='utf-8')
    assert GeoJsonLoader().load(path) == empty_feature_collection()


def test_url_source(gdp_data):
    response = MagicMock()
    response.json.return_value = gdp_data
    with patch('utils.geojson_loader.requests.get', return_value=response) as get:
        data = GeoJsonLoader(timeout=5).load('https://data.example/gdp.geojson', 'GDP Layer')
    get.assert_called_once_with('https://data.example/gdp.geojson', timeout=5)
    response.raise_for_status.assert_called_once()
    assert len(data['features']) == 3


def test_url_failure_gives_empty_layer(caplog):
    with patch('utils.geojson_loader.requests.get',
               side_effect=requests.ConnectionError('unreachable')):
        with caplog.at_level(logging.ERROR):
            data = GeoJsonLoader().load('https://data.example/endorsers.geojson', 'Endorsers')
    assert data == empty_feature_collection()
    assert 'unreachable' in caplog.text


def test_http_error_status(gdp_data):
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError('404 Client Error')
    with patch('utils.geojson_loader.requests.get', return_value=response):
        data = GeoJsonLoader().load('https://data.example/missing.geojson')
    assert data == empty_feature_collection()


def test_load_all_isolates_failures(tmp_path, geojson_files):
    gdp_path, _ = geojson_files
    layers = GeoJsonLoader().load_all({
        'GDP Layer': gdp_path,
        'Endorsers': tmp_path / 'missing.geojson',
    })
    assert set(layers) == {'GDP Layer', 'Endorsers'}
    assert len(layers['GDP Layer']['features']) == 3
    assert layers['Endorsers']['features'] == []


def test_load_all_empty():
    assert GeoJsonLoader().load_all({}) == {}
