import logging

from flask import jsonify, request

from ..exceptions import ValidationError
from ..log_manager import get_live_logs
from . import bp_debug
from .api import get_resolver
from .auth import api_key_required

logger = logging.getLogger(__name__)


def _override_state():
    resolver = get_resolver()
    return {
        "enabled": resolver.debug_override_enabled,
        "ip": resolver.debug_override_ip,
        "country_code": resolver.debug_override_country_code,
    }


@bp_debug.route('/override', methods=['GET'])
@api_key_required
def get_override():
    return jsonify(_override_state())


@bp_debug.route('/override', methods=['POST'])
@api_key_required
def set_override():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"status": "error", "message": "Expected a JSON object."}), 400

    enabled = data.get('enabled')
    if not isinstance(enabled, bool):
        return jsonify({"status": "error", "message": "'enabled' must be a JSON boolean."}), 400

    try:
        get_resolver().resolve_debug_override(
            enabled,
            data.get('ip'),
            data.get('country_code'),
        )
    except ValidationError as e:
        return jsonify({"status": "error", "message": str(e)}), 400

    logger.info(f"Debug override updated from {request.remote_addr}")
    return jsonify({"status": "success", **_override_state()})


@bp_debug.route('/logs')
@api_key_required
def live_logs():
    return jsonify({"logs": get_live_logs()})
