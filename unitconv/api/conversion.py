"""Conversion API endpoint."""
import logging

from flask import Blueprint, Response, jsonify, request

from unitconv.api import api_bp, get_service
from unitconv.config.config import PLAIN_RESULT_DECIMALS
from unitconv.utils.errors import MethodNotAllowedError

logger = logging.getLogger(__name__)

conversion_bp = Blueprint('conversion', __name__)
api_bp.register_blueprint(conversion_bp)


def _wants_json() -> bool:
    best = request.accept_mimetypes.best_match(['text/plain', 'application/json'])
    return best == 'application/json'


@conversion_bp.route('/convert', methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE'])
def convert():
    """
    Convert a value between two units.

    Form fields: value, from, to. Answers with plain text such as
    '10000.000 g', or the full outcome as JSON when the client accepts it.
    """
    try:
        if request.method != 'POST':
            raise MethodNotAllowedError(('POST',))

        outcome = get_service().convert_form(request.form)
        if not outcome.success:
            return jsonify(outcome.to_dict()), 400

        if _wants_json():
            return jsonify(outcome.to_dict()), 200

        body = f"{outcome.result:.{PLAIN_RESULT_DECIMALS}f} {outcome.to_unit}"
        return Response(body, status=200, mimetype='text/plain')

    except MethodNotAllowedError as e:
        response = jsonify({
            'success': False,
            'error': str(e)
        })
        response.status_code = e.status_code
        response.headers['Allow'] = ', '.join(e.allowed)
        return response
    except Exception:
        logger.exception("Unexpected error during conversion")
        return jsonify({
            'success': False,
            'error': 'Internal server error'
        }), 500
