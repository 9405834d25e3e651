import ipaddress

from .constants import ALPHA2_PATTERN, CF_COUNTRY_PATTERN


def is_valid_ip(value):
    """
    Returns True if value is a well-formed IPv4 or IPv6 address string.
    Networks, integers and scoped IPv6 addresses are rejected.
    """
    if not isinstance(value, str) or not value:
        return False
    if '%' in value:
        return False
    try:
        ipaddress.ip_address(value)
        return True
    except ValueError:
        return False


def is_cf_country_code(value):
    """
    Strict check for the CF-IPCountry header: exactly two uppercase ASCII letters.
    Lowercase values such as 'us' do not match.
    """
    if not isinstance(value, str):
        return False
    return CF_COUNTRY_PATTERN.fullmatch(value) is not None


def is_alpha2_code(value):
    """Case-insensitive ISO 3166-1 alpha-2 shape check."""
    if not isinstance(value, str):
        return False
    return ALPHA2_PATTERN.fullmatch(value) is not None
