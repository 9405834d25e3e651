import logging
import os
import threading
from dataclasses import dataclass
from typing import NamedTuple, Optional

from ..constants import (
    CF_COUNTRY_HEADER,
    CF_IP_HEADER,
    SOURCE_DATABASE,
    SOURCE_DEBUG,
    SOURCE_HEADER,
)
from ..exceptions import ConfigurationError, CountryLookupError, ResolutionError, ValidationError
from ..geoip_manager import GeoIP2CountryProvider
from ..utils import is_alpha2_code, is_cf_country_code, is_valid_ip

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DebugOverride:
    """A fixed IP/country pair that bypasses request-derived resolution."""
    ip: str
    country_code: str


class GeolocationResult(NamedTuple):
    ip: Optional[str]
    country_code: str
    source: str


class GeolocationResolver:
    """
    Resolves the client IP and ISO 3166-1 alpha-2 country of a request.

    Cloudflare's CF-Connecting-IP and CF-IPCountry headers are trusted when
    well-formed. Otherwise the connection-level client IP is used and the
    country comes from the offline lookup provider. A debug override, when
    set, takes precedence over everything the request carries.

    Instances are not safe for concurrent mutation of the override; share
    them across threads through SynchronizedResolver.
    """

    def __init__(self, database_path, lookup_provider=None):
        if not database_path or not os.path.isfile(database_path) or not os.access(database_path, os.R_OK):
            raise ConfigurationError(f"Database file not found: {database_path}")

        self.database_path = database_path
        self.lookup_provider = lookup_provider or GeoIP2CountryProvider(database_path)
        self._debug_override = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.lookup_provider.close()

    # --- Debug override ---

    def resolve_debug_override(self, enabled, ip=None, country_code=None):
        """
        Sets or clears the debug override.

        Disabling ignores ip and country_code. Enabling validates both before
        anything is stored, so a rejected call leaves the previous state intact.
        """
        if not enabled:
            if self._debug_override is not None:
                logger.info("Debug override disabled.")
            self._debug_override = None
            return

        if not is_valid_ip(ip):
            raise ValidationError("Invalid debug IP address.")
        if not is_alpha2_code(country_code):
            raise ValidationError("Invalid debug country code. Expected ISO 3166-1 alpha-2.")

        self._debug_override = DebugOverride(ip=ip, country_code=country_code.upper())
        logger.info(f"Debug override enabled: {ip} / {self._debug_override.country_code}")

    @property
    def debug_override(self):
        return self._debug_override

    @property
    def debug_override_enabled(self):
        return self._debug_override is not None

    @property
    def debug_override_ip(self):
        return self._debug_override.ip if self._debug_override else None

    @property
    def debug_override_country_code(self):
        return self._debug_override.country_code if self._debug_override else None

    # --- Resolution ---

    def resolve_ip(self, request):
        """
        Returns the client IP, or None when neither the trusted header nor
        the connection supplies one.
        """
        return self._resolve_ip(request, self._debug_override)

    def resolve_country(self, request):
        """
        Returns the ISO 3166-1 alpha-2 country code of the request.

        CF-IPCountry is only trusted when it is already two uppercase letters;
        'us' or 'Us' fall through to the database lookup.
        Raises ResolutionError or CountryLookupError.
        """
        return self._resolve(request, self._debug_override).country_code

    def resolve(self, request):
        """
        Resolves both facts at once and reports where the country came from.
        """
        return self._resolve(request, self._debug_override)

    # The helpers below take the override as an argument so that one call
    # works against a single snapshot of it.

    def _resolve_ip(self, request, override):
        if override is not None:
            return override.ip

        cf_ip = request.get_header(CF_IP_HEADER)
        if is_valid_ip(cf_ip):
            return cf_ip

        if cf_ip is not None:
            logger.debug(f"Ignoring malformed {CF_IP_HEADER} header: {cf_ip!r}")
        return request.client_ip

    def _resolve(self, request, override):
        if override is not None:
            return GeolocationResult(override.ip, override.country_code, SOURCE_DEBUG)

        cf_country = request.get_header(CF_COUNTRY_HEADER)
        if cf_country and is_cf_country_code(cf_country):
            return GeolocationResult(self._resolve_ip(request, None), cf_country.upper(), SOURCE_HEADER)

        if cf_country is not None:
            logger.debug(f"Ignoring {CF_COUNTRY_HEADER} header {cf_country!r}, falling back to database")

        try:
            ip = self._resolve_ip(request, None)
        except Exception as e:
            logger.error(f"Client IP resolution failed: {e}")
            raise ResolutionError("Unable to determine client IP address.") from e

        # A missing IP is left for the provider to reject.
        try:
            country_code = self.lookup_provider.lookup_country(ip)
        except CountryLookupError as e:
            e.ip = ip
            raise
        return GeolocationResult(ip, country_code.upper(), SOURCE_DATABASE)


class SynchronizedResolver:
    """
    Wrapper for sharing one GeolocationResolver between concurrent request
    handlers. The lock only guards the override; each resolution runs
    unlocked against the override read at its start, so database lookups
    proceed in parallel.
    """

    def __init__(self, resolver):
        self._resolver = resolver
        self._lock = threading.RLock()

    @property
    def resolver(self):
        return self._resolver

    @property
    def database_path(self):
        return self._resolver.database_path

    def resolve_debug_override(self, enabled, ip=None, country_code=None):
        with self._lock:
            self._resolver.resolve_debug_override(enabled, ip, country_code)

    @property
    def debug_override(self):
        with self._lock:
            return self._resolver.debug_override

    @property
    def debug_override_enabled(self):
        return self.debug_override is not None

    @property
    def debug_override_ip(self):
        override = self.debug_override
        return override.ip if override else None

    @property
    def debug_override_country_code(self):
        override = self.debug_override
        return override.country_code if override else None

    def resolve_ip(self, request):
        return self._resolver._resolve_ip(request, self.debug_override)

    def resolve_country(self, request):
        return self._resolver._resolve(request, self.debug_override).country_code

    def resolve(self, request):
        return self._resolver._resolve(request, self.debug_override)

    def close(self):
        with self._lock:
            self._resolver.close()
