from flask import Flask
from flask_cors import CORS
from unitconv import STATIC_DIR, TEMPLATE_DIR
from unitconv.api import api_bp, init_api
from unitconv.api.request_logging import init_request_logging
from unitconv.config.config import DEBUG, HOST, LOG_LEVEL, PORT
from unitconv.services.conversion_service import ConversionService
from unitconv.units import build_default_registry
from unitconv.utils.unit_converter import UnitConverter
import logging

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(registry=None, test_config=None):
    """
    Build the Flask application.

    Args:
        registry: Unit registry to serve (default: built-in units)
        test_config: Extra Flask config values, mainly for tests
    """
    app = Flask(__name__, template_folder=TEMPLATE_DIR, static_folder=STATIC_DIR)
    if test_config:
        app.config.update(test_config)

    # Unit symbols such as µm and m³ are sent as-is
    app.json.ensure_ascii = False

    # Enable CORS for all routes
    CORS(app)

    if registry is None:
        registry = build_default_registry()
    init_api(app, ConversionService(UnitConverter(registry)))
    init_request_logging(app)

    # Register blueprints
    app.register_blueprint(api_bp)

    return app


app = create_app()

if __name__ == '__main__':
    logger.info(f"Server started on http://localhost:{PORT}")
    app.run(host=HOST, port=PORT, debug=DEBUG)
