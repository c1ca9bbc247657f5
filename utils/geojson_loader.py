"""GeoJSON source loading for the map layers"""
import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Union

import requests

from config import Config
from utils.metrics import metrics_collector

logger = logging.getLogger(__name__)


class GeoJsonLoadError(Exception):
    """Raised internally when a source cannot be fetched or parsed"""


def empty_feature_collection() -> Dict:
    return {'type': 'FeatureCollection', 'features': []}


class GeoJsonLoader:
    """Loads GeoJSON FeatureCollections from local files or URLs.

    A failed load never propagates: it is logged and the layer is left
    empty. There is no retry.
    """

    def __init__(self, timeout: float = None):
        self.timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT

    def _read(self, source: Union[str, Path]) -> Dict:
        source = str(source)
        if source.lower().startswith(('http://', 'https://')):
            try:
                response = requests.get(source, timeout=self.timeout)
                response.raise_for_status()
                data = response.json()
            except (requests.RequestException, ValueError) as e:
                raise GeoJsonLoadError(f"Request for {source} failed: {e}") from e
        else:
            try:
                with open(source, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise GeoJsonLoadError(f"Could not read {source}: {e}") from e

        if not isinstance(data, dict) or data.get('type') != 'FeatureCollection' \
                or not isinstance(data.get('features'), list):
            raise GeoJsonLoadError(f"{source} is not a GeoJSON FeatureCollection")
        return data

    def load(self, source: Union[str, Path], layer: str = 'geojson') -> Dict:
        """Load one source; returns an empty FeatureCollection on failure"""
        try:
            data = self._read(source)
        except GeoJsonLoadError as e:
            logger.error(f"Error loading {layer} GeoJSON data: {e}")
            metrics_collector.record_load(layer, 'failed')
            return empty_feature_collection()

        count = len(data['features'])
        logger.info(f"Loaded {count} features for {layer} from {source}")
        metrics_collector.record_load(layer, 'success', count)
        return data

    def load_all(self, sources: Dict[str, Union[str, Path]]) -> Dict[str, Dict]:
        """Load each source as an independent concurrent task, keyed by layer name"""
        results = {}
        if not sources:
            return results
        with ThreadPoolExecutor(max_workers=len(sources), thread_name_prefix='geojson_loader') as pool:
            futures = {
                pool.submit(self.load, source, layer): layer
                for layer, source in sources.items()
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        return results
