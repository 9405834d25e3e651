from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class RequestView(Protocol):
    """Read-only view of an inbound request, as consumed by the resolver."""

    def get_header(self, name: str) -> Optional[str]: ...

    @property
    def client_ip(self) -> Optional[str]: ...


class FlaskRequestView:
    """
    Adapts a Flask/Werkzeug request.
    client_ip is request.remote_addr, which ProxyFix rewrites from
    X-Forwarded-For when the app trusts a proxy chain.
    """

    def __init__(self, request):
        self._request = request

    def get_header(self, name):
        return self._request.headers.get(name)

    @property
    def client_ip(self):
        return self._request.remote_addr


class StaticRequestView:
    """Request view over an already parsed header mapping and peer address."""

    def __init__(self, headers=None, client_ip=None):
        self._headers = dict(headers or {})
        self._client_ip = client_ip

    def get_header(self, name):
        return self._headers.get(name)

    @property
    def client_ip(self):
        return self._client_ip

    def __repr__(self):
        return f"StaticRequestView(headers={self._headers!r}, client_ip={self._client_ip!r})"
