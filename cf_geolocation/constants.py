import re

# Cloudflare edge headers
CF_IP_HEADER = 'CF-Connecting-IP'
CF_COUNTRY_HEADER = 'CF-IPCountry'

# CF-IPCountry must already be two uppercase letters
CF_COUNTRY_PATTERN = re.compile(r'[A-Z]{2}')
# Debug override country codes are matched case-insensitively
ALPHA2_PATTERN = re.compile(r'[A-Za-z]{2}')

GEOIP_DB_FILENAME = 'GeoLite2-Country.mmdb'

API_KEY_HEADER = 'X-API-KEY'

LOG_BUFFER_SIZE = 1000
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

SOURCE_DEBUG = 'debug'
SOURCE_HEADER = 'header'
SOURCE_DATABASE = 'database'
