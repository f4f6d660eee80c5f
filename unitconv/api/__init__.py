"""HTTP endpoints package."""
from flask import Blueprint, Flask, current_app

from unitconv.services.conversion_service import ConversionService

api_bp = Blueprint('api', __name__)

EXTENSION_KEY = 'unitconv'


def init_api(app: Flask, service: ConversionService):
    """Attach the conversion service that request handlers read from."""
    app.extensions[EXTENSION_KEY] = service


def get_service() -> ConversionService:
    return current_app.extensions[EXTENSION_KEY]


# Import all endpoints to register routes
from unitconv.api import pages, conversion, units  # noqa: E402,F401
