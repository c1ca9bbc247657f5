"""Application metrics collection using Prometheus"""
import time
import functools
import logging
from prometheus_client import (
    Counter, Histogram, Gauge, CollectorRegistry, CONTENT_TYPE_LATEST, generate_latest
)
from flask import Response

logger = logging.getLogger(__name__)

REGISTRY = CollectorRegistry()

map_build_counter = Counter(
    'map_builds_total',
    'Total number of map builds',
    ['status'],
    registry=REGISTRY
)

map_build_duration = Histogram(
    'map_build_duration_seconds',
    'Time spent building the map page',
    buckets=[0.1, 0.5, 1, 2, 5, 10, 30],
    registry=REGISTRY
)

geojson_load_counter = Counter(
    'geojson_loads_total',
    'Total GeoJSON source loads',
    ['layer', 'status'],
    registry=REGISTRY
)

geojson_features_gauge = Gauge(
    'geojson_features_loaded',
    'Number of features in the most recent load of a layer',
    ['layer'],
    registry=REGISTRY
)


class MetricsCollector:
    @staticmethod
    def track_map_build(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.time()
            status = 'success'
            try:
                return func(*args, **kwargs)
            except Exception:
                status = 'failed'
                raise
            finally:
                dur = time.time() - start
                map_build_duration.observe(dur)
                map_build_counter.labels(status=status).inc()
                logger.info(f"Map build finished: status={status}, duration={dur:.2f}s")
        return wrapper

    @staticmethod
    def record_load(layer: str, status: str, feature_count: int = 0):
        geojson_load_counter.labels(layer=layer, status=status).inc()
        geojson_features_gauge.labels(layer=layer).set(feature_count)


def get_metrics() -> Response:
    return Response(generate_latest(REGISTRY), mimetype=CONTENT_TYPE_LATEST)


metrics_collector = MetricsCollector()
