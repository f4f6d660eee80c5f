"""Converter page and health endpoints."""
import logging
from datetime import datetime

from flask import Blueprint, jsonify, render_template
from jinja2 import TemplateError

from unitconv.api import api_bp, get_service
from unitconv.config.config import TEMPLATE_NAME

logger = logging.getLogger(__name__)

pages_bp = Blueprint('pages', __name__)
api_bp.register_blueprint(pages_bp)


def build_page_context(registry) -> dict:
    """Collect the registry data the selection form is populated from."""
    dimensions = registry.all_dimensions()
    return {
        'dimensions': dimensions,
        'dimension_names': {tag: registry.dimension_display_name(tag) for tag in dimensions},
        'units': registry.units_by_dimension(),
        'current_year': datetime.now().year,
    }


@pages_bp.route('/', methods=['GET'])
def index():
    """Render the converter page."""
    context = build_page_context(get_service().registry)
    try:
        return render_template(TEMPLATE_NAME, **context)
    except TemplateError:
        logger.exception(f"Error rendering template {TEMPLATE_NAME}")
        return jsonify({
            'success': False,
            'error': 'Error rendering page'
        }), 500


@pages_bp.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'unitconv'
    }), 200
