from functools import wraps
import hmac
import logging

from flask import current_app, jsonify, request

from ..constants import API_KEY_HEADER

logger = logging.getLogger(__name__)


def api_key_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        expected_key = current_app.config.get('DEBUG_API_KEY')

        request_key = request.headers.get(API_KEY_HEADER)
        if not request_key:
            return jsonify({"status": "error", "message": f"Unauthorized: Missing {API_KEY_HEADER} header"}), 401

        if not expected_key or not hmac.compare_digest(request_key, expected_key):
            logger.warning(f"Rejected debug endpoint access from {request.remote_addr}")
            return jsonify({"status": "error", "message": "Unauthorized: Invalid API Key"}), 401

        return f(*args, **kwargs)
    return decorated_function
