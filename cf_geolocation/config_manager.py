import copy
import json
import logging
import os

from .constants import GEOIP_DB_FILENAME
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_data_dir():
    """ Data directory holding config.json and the GeoIP database """
    env_dir = os.environ.get('CF_GEOLOCATION_DATA_DIR')
    if env_dir:
        return env_dir
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


DATA_DIR = get_data_dir()
CONFIG_FILE = os.path.join(DATA_DIR, "config.json")

DEFAULT_CONFIG = {
    "geoip_db_path": os.path.join(DATA_DIR, GEOIP_DB_FILENAME),
    "trusted_proxy_count": 1,
    "timezone": "UTC",
    "log_level": "INFO",
    "debug_override": {"enabled": False, "ip": None, "country_code": None},
    "debug_endpoints": {"enabled": False, "api_key": None},
}

_config_cache = None
_config_cache_mtime = 0


def _merge(defaults, overrides):
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env(config):
    if os.environ.get('GEOIP_DB_PATH'):
        config['geoip_db_path'] = os.environ['GEOIP_DB_PATH']
    if os.environ.get('LOG_LEVEL'):
        config['log_level'] = os.environ['LOG_LEVEL'].upper()
    return config


def read_config(config_file=None):
    """
    Returns config.json merged over DEFAULT_CONFIG, with environment overrides.
    The file is only re-parsed when its mtime changes.
    Raises ConfigurationError if the file exists but is not valid JSON.
    """
    global _config_cache, _config_cache_mtime
    target_file = config_file or CONFIG_FILE

    if not os.path.exists(target_file):
        return _apply_env(copy.deepcopy(DEFAULT_CONFIG))

    current_mtime = os.stat(target_file).st_mtime
    if config_file is None and _config_cache is not None and current_mtime == _config_cache_mtime:
        return _apply_env(copy.deepcopy(_config_cache))

    try:
        with open(target_file) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"[Config] ERROR reading {target_file}: {e}")
        raise ConfigurationError(f"Unable to read configuration file: {target_file}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file must contain a JSON object: {target_file}")

    merged = _merge(DEFAULT_CONFIG, data)
    if config_file is None:
        _config_cache = merged
        _config_cache_mtime = current_mtime
    return _apply_env(copy.deepcopy(merged))


def clear_config_cache():
    global _config_cache, _config_cache_mtime
    _config_cache = None
    _config_cache_mtime = 0
