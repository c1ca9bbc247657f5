# -*- coding: utf-8 -*-
"""Choropleth-and-marker map generator for GDP and endorser layers"""

import copy
import logging
from pathlib import Path
from typing import Callable, Dict, Optional

import folium
from folium import plugins
from folium.map import CustomPane
from folium.utilities import JsCode

from config import Config
from config_validator import MapSettings
from utils.cluster_icon import icon_create_function
from utils.color_scheme import ColorScheme, get_endorser_color, get_gdp_color
from utils.geojson_loader import GeoJsonLoader, empty_feature_collection
from utils.legend import MapLegend
from utils.metrics import metrics_collector
from utils.popups import endorser_popup_html, gdp_popup_html

logger = logging.getLogger(__name__)

GDP_LAYER_NAME = 'GDP Layer'
ENDORSER_LAYER_NAME = 'Endorsers'

# Property carrying the pre-rendered popup on each feature
POPUP_PROPERTY = '_popup_html'

BIND_POPUP_JS = JsCode(
    "function(feature, layer) {"
    " var html = feature.properties && feature.properties." + POPUP_PROPERTY + ";"
    " if (html) { layer.bindPopup(html); }"
    " }"
)


def gdp_style(feature: Dict) -> Dict:
    props = feature.get('properties') or {}
    return {
        'fillColor': get_gdp_color(props.get('GDP')),
        'weight': 1,
        'opacity': 1,
        'color': 'white',
        'dashArray': '3',
        'fillOpacity': 0.8,
    }


def endorser_style(feature: Dict) -> Dict:
    props = feature.get('properties') or {}
    return {
        'fillColor': get_endorser_color(props.get('Category')),
        'color': '#FFFFFF',  # white border for contrast
        'weight': 1,
        'opacity': 1,
        'fillOpacity': 1,
    }


def with_popups(data: Optional[Dict], render: Callable[[Dict], str]) -> Dict:
    """Copy of a FeatureCollection with each feature's popup HTML attached"""
    if not data or not isinstance(data.get('features'), list):
        return empty_feature_collection()
    data = copy.deepcopy(data)
    for feature in data['features']:
        props = feature.get('properties')
        if not isinstance(props, dict):
            props = {}
            feature['properties'] = props
        props[POPUP_PROPERTY] = render(props)
    return data


class MapGenerator:
    """Build the GDP choropleth with clustered endorser markers"""

    def __init__(self, config=Config, loader: Optional[GeoJsonLoader] = None):
        self.config = config
        # Fail fast on invalid settings
        self.settings = MapSettings.from_config(config)
        self.loader = loader or GeoJsonLoader(timeout=self.settings.request_timeout)
        self.color_scheme = ColorScheme()

    def create_map(self, gdp_data: Optional[Dict] = None,
                   endorser_data: Optional[Dict] = None) -> folium.Map:
        """Create the map from already-loaded FeatureCollections"""
        logger.info("Creating endorser map")

        m = folium.Map(
            location=[self.settings.center_lat, self.settings.center_lon],
            zoom_start=self.settings.zoom_start,
            tiles=None,
        )

        self._add_panes(m)
        self._add_base_tiles(m)

        gdp_layer = self._create_gdp_layer(gdp_data)
        gdp_layer.add_to(m)
        endorser_cluster = self._create_endorser_cluster(endorser_data)
        endorser_cluster.add_to(m)

        # Only the two overlays are listed; tile layers are not switchable
        folium.LayerControl().add_to(m)

        MapLegend(position='bottomright').add_to(m)

        self._add_label_tiles(m)
        plugins.Geocoder(add_marker=True).add_to(m)

        m.get_root().header.add_child(folium.Element(self.color_scheme.cluster_style_html()))

        logger.info("Endorser map created")
        return m

    def _add_panes(self, m: folium.Map):
        for name, z_index in self.config.PANE_Z_INDEX.items():
            # Labels must not swallow clicks meant for the vector layers
            CustomPane(name, z_index=z_index, pointer_events=(name != 'labelsPane')).add_to(m)

    def _add_base_tiles(self, m: folium.Map):
        folium.TileLayer(
            tiles=self.settings.base_tiles_url,
            attr=self.config.BASE_TILES_ATTRIBUTION,
            max_zoom=self.config.MAP_MAX_ZOOM,
            pane='basePane',
            control=False,
        ).add_to(m)

    def _add_label_tiles(self, m: folium.Map):
        folium.TileLayer(
            tiles=self.settings.label_tiles_url,
            attr=self.config.LABEL_TILES_ATTRIBUTION,
            max_zoom=self.config.MAP_MAX_ZOOM,
            pane='labelsPane',
            control=False,
        ).add_to(m)

    def _create_gdp_layer(self, data: Optional[Dict]) -> folium.GeoJson:
        data = with_popups(data, gdp_popup_html)
        logger.info(f"Adding {len(data['features'])} GDP features")
        return folium.GeoJson(
            data,
            name=GDP_LAYER_NAME,
            style_function=gdp_style,
            on_each_feature=BIND_POPUP_JS,
            pane='vectorPane',
        )

    def _create_endorser_cluster(self, data: Optional[Dict]) -> plugins.MarkerCluster:
        data = with_popups(data, endorser_popup_html)
        logger.info(f"Adding {len(data['features'])} endorser markers")

        cluster = plugins.MarkerCluster(
            name=ENDORSER_LAYER_NAME,
            icon_create_function=icon_create_function(self.config),
            pane='vectorPane',
        )
        # GeoJson keeps marker.feature set, which the icon factory reads
        folium.GeoJson(
            data,
            marker=folium.CircleMarker(radius=self.config.ENDORSER_MARKER_RADIUS),
            style_function=endorser_style,
            on_each_feature=BIND_POPUP_JS,
            control=False,
        ).add_to(cluster)
        return cluster

    @metrics_collector.track_map_build
    def build_from_sources(self, gdp_source: Optional[str] = None,
                           endorser_source: Optional[str] = None) -> folium.Map:
        """Load both sources concurrently and build the map"""
        layers = self.loader.load_all({
            GDP_LAYER_NAME: gdp_source or self.settings.gdp_source,
            ENDORSER_LAYER_NAME: endorser_source or self.settings.endorser_source,
        })
        return self.create_map(layers.get(GDP_LAYER_NAME), layers.get(ENDORSER_LAYER_NAME))

    def render_html(self, m: Optional[folium.Map] = None) -> str:
        """Full standalone page for the map"""
        if m is None:
            m = self.build_from_sources()
        return m.get_root().render()

    def save(self, m: Optional[folium.Map] = None, path: Optional[str] = None) -> Path:
        output = Path(path or self.settings.output_path)
        html = self.render_html(m)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding='utf-8')
        logger.info(f"Map written to {output}")
        return output
