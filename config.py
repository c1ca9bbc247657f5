"""Configuration settings for the Endorser & GDP Map"""
import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Data Sources (local path or http(s) URL)
    GDP_GEOJSON_SOURCE = os.getenv('GDP_GEOJSON_SOURCE', 'country_gdp.geojson')
    ENDORSER_GEOJSON_SOURCE = os.getenv('ENDORSER_GEOJSON_SOURCE', 'endorser.geojson')
    REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '30'))

    # Output
    MAP_OUTPUT_PATH = os.getenv('MAP_OUTPUT_PATH', 'index.html')

    # Initial view
    MAP_CENTER_LAT = float(os.getenv('MAP_CENTER_LAT', '25'))
    MAP_CENTER_LON = float(os.getenv('MAP_CENTER_LON', '15'))
    MAP_ZOOM_START = int(os.getenv('MAP_ZOOM_START', '3'))
    MAP_MAX_ZOOM = 19

    # Tile endpoints
    BASE_TILES_URL = os.getenv(
        'BASE_TILES_URL',
        'https://{s}.basemaps.cartocdn.com/light_nolabels/{z}/{x}/{y}{r}.png'
    )
    LABEL_TILES_URL = os.getenv(
        'LABEL_TILES_URL',
        'https://{s}.basemaps.cartocdn.com/light_only_labels/{z}/{x}/{y}{r}.png'
    )
    BASE_TILES_ATTRIBUTION = '&copy; OpenStreetMap contributors'
    LABEL_TILES_ATTRIBUTION = '&copy; <a href="https://carto.com/attributions">CARTO</a>'

    # Pane z-order (labels drawn above vectors, vectors above the base map)
    PANE_Z_INDEX = {
        'basePane': 100,
        'vectorPane': 200,
        'labelsPane': 300,
    }

    # Cluster icon sizing: min(BASE + GROWTH * members, MAX)
    CLUSTER_BASE_SIZE = int(os.getenv('CLUSTER_BASE_SIZE', '30'))
    CLUSTER_SIZE_PER_MEMBER = int(os.getenv('CLUSTER_SIZE_PER_MEMBER', '2'))
    CLUSTER_MAX_SIZE = int(os.getenv('CLUSTER_MAX_SIZE', '100'))

    # Endorser marker style
    ENDORSER_MARKER_RADIUS = 10

    # Caching for the served page
    CACHE_TYPE = os.getenv('CACHE_TYPE', 'SimpleCache')
    CACHE_DEFAULT_TIMEOUT = int(os.getenv('CACHE_DEFAULT_TIMEOUT', '3600'))
    REDIS_URL = os.getenv('REDIS_URL')
