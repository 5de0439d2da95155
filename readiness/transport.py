# STACKUP v1.0
import re
import socket
from typing import Callable, Optional

import requests

from readiness.errors import ConfigurationError, ProbeFailure
from utils.validation import validate_http_url, parse_host_port


DEFAULT_TIMEOUT = 5.0
USER_AGENT = "stackup-readiness/1.0"


def _sanitize(error):
    '''Strip memory addresses like <HTTPConnection(...) at 0x...> from messages'''
    return re.sub(r'0x[0-9a-fA-F]+', '<ptr>', str(error))


def http_ok(response) -> bool:
    '''Default HTTP success predicate, same as `curl -f`'''
    return response.status_code < 400


class HttpTransport:
    """Probe an http(s) endpoint with a GET request.

    Any network error, timeout or response rejected by ``success`` raises
    ProbeFailure. The session is borrowed, not owned, when one is passed in.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        success: Callable = http_ok,
        session: Optional[requests.Session] = None,
        verify: bool = True,
    ):
        self.timeout = timeout
        self.success = success
        self.verify = verify
        self._owns_session = session is None
        self.session = session or requests.Session()
        if self._owns_session:
            self.session.headers.update({'User-Agent': USER_AGENT})

    def validate(self, endpoint: str) -> str:
        try:
            return validate_http_url(endpoint)
        except ValueError as e:
            raise ConfigurationError(str(e))

    def probe(self, endpoint: str):
        try:
            response = self.session.get(
                endpoint,
                timeout=self.timeout,
                allow_redirects=True,
                verify=self.verify,
            )
        except requests.exceptions.Timeout:
            raise ProbeFailure(endpoint, "timed out")
        except requests.exceptions.ConnectionError as e:
            raise ProbeFailure(endpoint, f"connection failed ({_sanitize(e)})")
        except requests.exceptions.RequestException as e:
            raise ProbeFailure(endpoint, f"request error ({_sanitize(e)})")
        except ValueError as e:
            # urllib3 LocationParseError and UnicodeError are both ValueErrors
            raise ProbeFailure(endpoint, f"invalid address ({_sanitize(e)})")

        try:
            if not self.success(response):
                raise ProbeFailure(endpoint, f"HTTP {response.status_code}")
        finally:
            response.close()

        return response.status_code

    def close(self):
        if self._owns_session:
            self.session.close()


class TcpTransport:
    '''Probe "host:port" / "tcp://host:port" with a plain TCP connect'''

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, connect=socket.create_connection):
        self.timeout = timeout
        self._connect = connect

    def validate(self, endpoint: str):
        try:
            return parse_host_port(endpoint)
        except ValueError as e:
            raise ConfigurationError(str(e))

    def probe(self, endpoint: str):
        host, port = self.validate(endpoint)
        try:
            conn = self._connect((host, port), timeout=self.timeout)
        except socket.timeout:
            raise ProbeFailure(endpoint, "timed out")
        except OSError as e:
            raise ProbeFailure(endpoint, f"connection failed ({e.strerror or e})")
        except UnicodeError as e:
            raise ProbeFailure(endpoint, f"invalid address ({e})")
        conn.close()
        return True

    def close(self):
        pass


def get_transport(endpoint: str, timeout: float = DEFAULT_TIMEOUT):
    '''Pick a transport from the endpoint scheme'''
    if not isinstance(endpoint, str) or not endpoint.strip():
        raise ConfigurationError("Endpoint is required")

    scheme = endpoint.strip().split('://', 1)[0].lower() if '://' in endpoint else ''
    if scheme in ('http', 'https'):
        return HttpTransport(timeout=timeout)
    if scheme in ('tcp', ''):
        return TcpTransport(timeout=timeout)

    raise ConfigurationError(f"Unsupported endpoint scheme: {scheme}")
