import json

import pytest


def _country(name, gdp, offset):
    ring = [[offset, 0], [offset + 1, 0], [offset + 1, 1], [offset, 1], [offset, 0]]
    return {
        'type': 'Feature',
        'properties': {'name': name, 'GDP': gdp},
        'geometry': {'type': 'Polygon', 'coordinates': [ring]},
    }


def _endorser(name, category, lon, lat):
    return {
        'type': 'Feature',
        'properties': {'Name': name, 'Category': category, 'Website': f'https://{name.lower()}.example'},
        'geometry': {'type': 'Point', 'coordinates': [lon, lat]},
    }


@pytest.fixture
def gdp_data():
    return {
        'type': 'FeatureCollection',
        'features': [
            _country('Alpha', 300_000_000_000, 0),
            _country('Beta', 1_000_000, 2),
            _country('Gamma', None, 4),
        ],
    }


@pytest.fixture
def endorser_data():
    return {
        'type': 'FeatureCollection',
        'features': [
            _endorser('Bank', 'Finance', 10.0, 50.0),
            _endorser('Fleet', 'Fleets and Users', 10.1, 50.1),
            _endorser('Mystery', 'Unlisted', 10.2, 50.2),
            _endorser('Anon', None, 10.3, 50.3),
        ],
    }


@pytest.fixture
def geojson_files(tmp_path, gdp_data, endorser_data):
    gdp_path = tmp_path / 'country_gdp.geojson'
    endorser_path = tmp_path / 'endorser.geojson'
    gdp_path.write_text(json.dumps(gdp_data), encoding='utf-8')
    endorser_path.write_text(json.dumps(endorser_data), encoding='utf-8')
    return gdp_path, endorser_path


@pytest.fixture
def map_config(tmp_path, geojson_files):
    from config import Config

    gdp_path, endorser_path = geojson_files

    class MapTestConfig(Config):
        GDP_GEOJSON_SOURCE = str(gdp_path)
        ENDORSER_GEOJSON_SOURCE = str(endorser_path)
        MAP_OUTPUT_PATH = str(tmp_path / 'out' / 'index.html')
        CACHE_TYPE = 'SimpleCache'

    return MapTestConfig
