# -*- coding: utf-8 -*-
"""Flask web application serving the Endorser & GDP Map"""
import logging
import os

from flask import Flask, Response, jsonify

from config import Config
from utils.cache import MAP_PAGE_KEY, cache
from utils.legend import legend_rows
from utils.map_generator import MapGenerator
from utils.metrics import get_metrics

# --- App Setup ---
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config_class=Config, map_generator: MapGenerator = None):
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.config['JSON_AS_ASCII'] = False

    cache.init_app(app)

    # Settings are validated here so a bad configuration fails at startup
    generator = map_generator or MapGenerator(config=config_class)

    @app.route('/', methods=['GET'])
    def index():
        html = cache.get(MAP_PAGE_KEY)
        if html is None:
            try:
                html = generator.render_html()
            except Exception as e:
                logger.error(f"Error rendering map page: {e}")
                return jsonify({'error': 'Map rendering failed'}), 500
            cache.set(MAP_PAGE_KEY, html)
        return Response(html, mimetype='text/html')

    @app.route('/api/legend', methods=['GET'])
    def legend():
        return jsonify(legend_rows())

    @app.route('/metrics')
    def metrics():
        return get_metrics()

    # Health and readiness endpoints
    @app.route('/healthz', methods=['GET'])
    def healthz():
        return jsonify({'status': 'ok'}), 200

    @app.route('/readyz', methods=['GET'])
    def readyz():
        try:
            cache.set('ready_check', 'ok', timeout=10)
            if cache.get('ready_check') != 'ok':
                raise RuntimeError('cache round-trip failed')
            return jsonify({'status': 'ready'}), 200
        except Exception as e:
            logger.error(f"Readiness check failed: {e}")
            return jsonify({'status': 'not_ready', 'error': str(e)}), 503

    return app


if __name__ == '__main__':
    flask_app = create_app()
    port = int(os.getenv('PORT', '5001'))
    flask_app.run(host='127.0.0.1', port=port, debug=False, use_reloader=False)
