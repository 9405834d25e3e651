import logging
import sys

from .config_manager import read_config
from .exceptions import GeolocationError
from .services.geolocation_service import GeolocationResolver

# Configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def run_checks(config=None):
    """
    Validates configuration, database presence and the configured debug override.
    Returns True when the service can start.
    """
    try:
        if config is None:
            config = read_config()
        with GeolocationResolver(config.get('geoip_db_path')) as resolver:
            override = config.get('debug_override') or {}
            if override.get('enabled'):
                resolver.resolve_debug_override(True, override.get('ip'), override.get('country_code'))
                logger.info(f"Debug override configured: {resolver.debug_override_ip} / {resolver.debug_override_country_code}")
    except GeolocationError as e:
        logger.error(f"Pre-start check failed: {e}")
        return False

    logger.info(f"GeoIP database verified at {config.get('geoip_db_path')}")
    return True


def prestart():
    logger.info("Running pre-start checks...")
    if not run_checks():
        sys.exit(1)


if __name__ == "__main__":
    prestart()
