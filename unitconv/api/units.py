"""Unit lookup API endpoints."""
import logging

from flask import Blueprint, jsonify, request

from unitconv.api import api_bp, get_service
from unitconv.utils.errors import (
    ConversionError,
    InvalidUnitError,
    MissingFieldError,
    UnknownDimensionError,
)

logger = logging.getLogger(__name__)

units_bp = Blueprint('units', __name__)
api_bp.register_blueprint(units_bp)


@units_bp.route('/unit-info', methods=['GET'])
def get_unit_info():
    """Get name, dimension and factor of a single unit."""
    try:
        symbol = request.args.get('unit', '')
        if not symbol:
            raise MissingFieldError(('unit',), "Unit symbol is required")

        unit = get_service().registry.lookup(symbol)
        if unit is None:
            raise InvalidUnitError(symbol)

        return jsonify(unit.to_dict()), 200

    except ConversionError as e:
        logger.warning(f"Unit info request rejected: {e}")
        return jsonify({
            'success': False,
            'error': str(e)
        }), e.status_code


@units_bp.route('/units-by-dimension', methods=['GET'])
def get_units_by_dimension():
    """List symbol and name of every unit in a dimension."""
    try:
        dimension = request.args.get('dimension', '')
        if not dimension:
            raise MissingFieldError(('dimension',), "Dimension is required")

        units = get_service().registry.units_in_dimension(dimension)
        if not units:
            raise UnknownDimensionError(dimension)

        return jsonify([
            {'symbol': unit.symbol, 'name': unit.display_name}
            for unit in units
        ]), 200

    except ConversionError as e:
        logger.warning(f"Units by dimension request rejected: {e}")
        return jsonify({
            'success': False,
            'error': str(e)
        }), e.status_code
