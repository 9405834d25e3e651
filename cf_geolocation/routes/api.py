import logging

from flask import current_app, jsonify, request

from ..exceptions import CountryLookupError, ResolutionError
from ..request_view import FlaskRequestView
from ..version import __version__
from . import bp_api

logger = logging.getLogger(__name__)


def get_resolver():
    return current_app.extensions['cf_geolocation']


@bp_api.route('/geolocation')
def geolocation():
    view = FlaskRequestView(request)
    try:
        result = get_resolver().resolve(view)
    except (ResolutionError, CountryLookupError) as e:
        logger.warning(f"Country could not be resolved: {e}")
        return jsonify({
            "status": "unknown",
            "ip": getattr(e, 'ip', None),
            "country_code": None,
            "message": str(e),
        })

    return jsonify({
        "status": "success",
        "ip": result.ip,
        "country_code": result.country_code,
        "source": result.source,
    })


@bp_api.route('/ip')
def client_ip():
    return jsonify({"ip": get_resolver().resolve_ip(FlaskRequestView(request))})


@bp_api.route('/health')
def health():
    return jsonify({
        "status": "ok",
        "version": __version__,
        "database": get_resolver().database_path,
    })
