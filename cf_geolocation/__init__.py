from .exceptions import (
    ConfigurationError,
    CountryLookupError,
    GeolocationError,
    ResolutionError,
    ValidationError,
)
from .geoip_manager import CountryLookupProvider, GeoIP2CountryProvider
from .request_view import FlaskRequestView, RequestView, StaticRequestView
from .services.geolocation_service import (
    DebugOverride,
    GeolocationResolver,
    GeolocationResult,
    SynchronizedResolver,
)
from .version import __version__
