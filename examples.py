import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from cf_geolocation import GeolocationError, GeolocationResolver, StaticRequestView
from cf_geolocation.config_manager import read_config


def show(title, resolver, request):
    print(f"=== {title} ===")
    try:
        result = resolver.resolve(request)
        print(f"Client IP: {result.ip or 'Unknown'}")
        print(f"Country Code: {result.country_code} (source: {result.source})")
    except GeolocationError as e:
        print(f"Error: {e}")
    print()


def main():
    db_path = read_config().get('geoip_db_path')
    try:
        resolver = GeolocationResolver(db_path)
    except GeolocationError as e:
        print(f"Error: {e}")
        print("Download a GeoLite2-Country.mmdb and set GEOIP_DB_PATH.")
        return 1

    with resolver:
        show("With Cloudflare headers", resolver,
             StaticRequestView({'CF-Connecting-IP': '8.8.8.8', 'CF-IPCountry': 'US'}))
        show("GeoIP database fallback", resolver, StaticRequestView(client_ip='8.8.8.8'))
        show("Invalid CF-Connecting-IP", resolver,
             StaticRequestView({'CF-Connecting-IP': 'invalid-ip'}, '203.0.113.1'))
        show("Lowercase CF-IPCountry is not trusted", resolver,
             StaticRequestView({'CF-IPCountry': 'us'}, '8.8.8.8'))

        resolver.resolve_debug_override(True, '203.0.113.77', 'nl')
        show("Debug override", resolver,
             StaticRequestView({'CF-Connecting-IP': '8.8.8.8', 'CF-IPCountry': 'US'}))
        resolver.resolve_debug_override(False)
    return 0


if __name__ == '__main__':
    sys.exit(main())
