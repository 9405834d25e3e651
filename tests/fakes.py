import os
import tempfile

from cf_geolocation.exceptions import CountryLookupError


class FakeLookupProvider:
    """In-memory CountryLookupProvider recording every lookup."""

    def __init__(self, countries=None, error=None):
        self.countries = dict(countries or {})
        self.error = error
        self.calls = []
        self.closed = False

    def lookup_country(self, ip):
        self.calls.append(ip)
        if self.error is not None:
            raise self.error
        if not ip or ip not in self.countries:
            raise CountryLookupError(f"IP address not found in GeoIP database: {ip}")
        return self.countries[ip]

    def close(self):
        self.closed = True


def make_database_file():
    """Creates an empty placeholder .mmdb file and returns its path."""
    fd, path = tempfile.mkstemp(suffix='.mmdb')
    os.close(fd)
    return path
