"""Caching for the served map page"""
import logging
from typing import Any, Optional

from flask import Flask, current_app
from flask_caching import Cache as FlaskCache

logger = logging.getLogger(__name__)

MAP_PAGE_KEY = 'endorser_map_page'


class Cache:
    """
    A wrapper for Flask-Caching to handle initialization.
    It can be initialized with a Flask app instance to avoid relying on `current_app`.
    """
    def __init__(self, app: Optional[Flask] = None):
        self._app = app
        self._cache = FlaskCache()
        self._initialized = False
        if app:
            self.init_app(app)

    def init_app(self, app: Flask):
        """Initializes the cache with a Flask app instance."""
        self._app = app
        cache_type = app.config.get('CACHE_TYPE', 'SimpleCache')
        cache_config = {
            'CACHE_TYPE': cache_type,
            'CACHE_DEFAULT_TIMEOUT': app.config.get('CACHE_DEFAULT_TIMEOUT', 3600),
        }
        if cache_type == 'RedisCache':
            redis_url = app.config.get('REDIS_URL')
            if not redis_url:
                logger.warning("RedisCache requested without REDIS_URL; using SimpleCache")
                cache_config['CACHE_TYPE'] = 'SimpleCache'
            else:
                cache_config['CACHE_REDIS_URL'] = redis_url
                cache_config['CACHE_KEY_PREFIX'] = 'endorser_map_'
        if cache_config['CACHE_TYPE'] == 'SimpleCache':
            cache_config['CACHE_THRESHOLD'] = 500

        app.config.update(cache_config)
        self._cache.init_app(app)
        self._initialized = True
        logger.info(f"Cache initialized with {cache_config['CACHE_TYPE']}")

    @property
    def cache(self):
        """Underlying Flask-Caching instance, initialized on first use."""
        if self._initialized:
            return self._cache

        app = self._app or current_app
        if app:
            self.init_app(app)
            return self._cache

        raise RuntimeError("Flask-Caching has not been initialized with a Flask app.")

    def get(self, key: str) -> Optional[Any]:
        return self.cache.get(key)

    def set(self, key: str, value: Any, timeout: Optional[int] = None):
        self.cache.set(key, value, timeout=timeout)
        logger.debug(f"Set cache key: {key}")

    def delete(self, key: str):
        self.cache.delete(key)

    def clear(self):
        self.cache.clear()
        logger.info("Cache cleared.")


# A default instance to be initialized by the app factory
cache = Cache()
