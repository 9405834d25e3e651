import logging
import os

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from .config_manager import read_config
from .exceptions import ConfigurationError
from .log_manager import setup_logging
from .services.geolocation_service import GeolocationResolver, SynchronizedResolver
from .version import __version__

logger = logging.getLogger(__name__)


def build_resolver(config, lookup_provider=None):
    """
    Creates the shared resolver from config and applies a configured debug override.
    Raises ConfigurationError for a missing database, ValidationError for a bad override block.
    """
    resolver = GeolocationResolver(config.get('geoip_db_path'), lookup_provider=lookup_provider)

    override = config.get('debug_override') or {}
    if override.get('enabled'):
        try:
            resolver.resolve_debug_override(True, override.get('ip'), override.get('country_code'))
        except Exception:
            resolver.close()
            raise
        logger.warning("Debug override loaded from configuration; request headers will be ignored.")

    return SynchronizedResolver(resolver)


def create_app(config=None, lookup_provider=None):
    if config is None:
        config = read_config()

    setup_logging(config.get('log_level', 'INFO'), config.get('timezone', 'UTC'))

    app = Flask(__name__)

    secret_key = os.environ.get('SECRET_KEY')
    if not secret_key:
        logger.warning("Environment variable 'SECRET_KEY' is not set. Please set it for production use.")
        secret_key = 'dev_key_do_not_use_in_production'
    app.secret_key = secret_key

    try:
        proxy_count = int(config.get('trusted_proxy_count', 1))
    except (TypeError, ValueError) as e:
        raise ConfigurationError("trusted_proxy_count must be an integer.") from e
    if proxy_count < 0:
        raise ConfigurationError("trusted_proxy_count must not be negative.")
    if proxy_count:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxy_count)

    app.extensions['cf_geolocation'] = build_resolver(config, lookup_provider)

    from .routes import bp_api, bp_debug
    app.register_blueprint(bp_api)

    debug_endpoints = config.get('debug_endpoints') or {}
    if debug_endpoints.get('enabled'):
        if not debug_endpoints.get('api_key'):
            raise ConfigurationError("debug_endpoints.api_key is required when debug endpoints are enabled.")
        app.config['DEBUG_API_KEY'] = debug_endpoints['api_key']
        app.register_blueprint(bp_debug)
        logger.info("Debug endpoints enabled under /debug")

    logger.info(f"cf-geolocation {__version__} using database {config.get('geoip_db_path')}")
    return app


def main():
    app = create_app()
    port = int(os.environ.get("PORT", 8080))
    app.run(host='0.0.0.0', port=port, threaded=True)


if __name__ == '__main__':
    main()
