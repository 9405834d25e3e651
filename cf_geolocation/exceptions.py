class GeolocationError(Exception):
    """Base class for every error raised by cf_geolocation."""


class ConfigurationError(GeolocationError):
    """The lookup database or the configuration is unusable."""


class ValidationError(GeolocationError, ValueError):
    """Debug override arguments are malformed."""


class ResolutionError(GeolocationError):
    """The client IP could not be determined for a country lookup."""


class CountryLookupError(GeolocationError, LookupError):
    """
    The offline country database could not answer for an IP.
    When raised through a resolver, ip holds the address that was looked up.
    """
    ip = None
