import logging
import threading
from typing import Protocol, runtime_checkable

import geoip2.database
import geoip2.errors
import maxminddb

from .exceptions import CountryLookupError

logger = logging.getLogger(__name__)


@runtime_checkable
class CountryLookupProvider(Protocol):
    """
    Offline IP-to-country capability.

    lookup_country() raises CountryLookupError for unknown or unroutable
    addresses and for backing-store failures. Implementations must allow
    concurrent read-only lookups.
    """

    def lookup_country(self, ip: str) -> str: ...

    def close(self) -> None: ...


class GeoIP2CountryProvider:
    """
    Country lookups against a MaxMind GeoLite2/GeoIP2 Country database.
    The reader is opened on first use and shared afterwards.
    """

    def __init__(self, database_path):
        self.database_path = database_path
        self._reader = None
        self._lock = threading.Lock()

    def get_reader(self):
        if self._reader is None:
            with self._lock:
                if self._reader is None:
                    try:
                        self._reader = geoip2.database.Reader(self.database_path)
                    except (OSError, ValueError, maxminddb.InvalidDatabaseError) as e:
                        logger.error(f"Error opening GeoIP DB {self.database_path}: {e}")
                        raise CountryLookupError(f"Unable to open GeoIP database: {self.database_path}") from e
        return self._reader

    def lookup_country(self, ip):
        """
        Returns the ISO country code for an IP address.
        """
        if not ip:
            raise CountryLookupError("No IP address available for lookup.")

        reader = self.get_reader()
        try:
            response = reader.country(ip)
        except geoip2.errors.AddressNotFoundError as e:
            raise CountryLookupError(f"IP address not found in GeoIP database: {ip}") from e
        except ValueError as e:
            raise CountryLookupError(f"Invalid IP address for GeoIP lookup: {ip}") from e
        except TypeError as e:
            # geoip2 refuses country() on non-Country databases (ASN, ISP, ...)
            logger.error(f"GeoIP database {self.database_path} is not a country database: {e}")
            raise CountryLookupError(f"GeoIP lookup failed for {ip}") from e
        except (geoip2.errors.GeoIP2Error, maxminddb.InvalidDatabaseError, OSError) as e:
            logger.error(f"GeoIP lookup failed for {ip}: {e}")
            raise CountryLookupError(f"GeoIP lookup failed for {ip}") from e

        iso_code = response.country.iso_code
        if not iso_code:
            raise CountryLookupError(f"No country recorded for IP address: {ip}")
        return iso_code

    def close(self):
        with self._lock:
            if self._reader is not None:
                self._reader.close()
                self._reader = None
