# STACKUP v1.0 - Endpoint validation
import re
from urllib.parse import urlparse


_HOST_RE = re.compile(r'^[a-zA-Z0-9]([a-zA-Z0-9._-]*[a-zA-Z0-9])?$')


def validate_port(port):
    '''Validate port number. Returns int or raises ValueError.'''
    try:
        port = int(port)
    except (ValueError, TypeError):
        raise ValueError("Port must be a number")

    if not (1 <= port <= 65535):
        raise ValueError("Port must be between 1 and 65535")

    return port


def validate_host(host):
    '''Validate a hostname, IPv4 or bracket-less IPv6 address.'''
    if not host or not isinstance(host, str):
        raise ValueError("Host is required")

    if ':' in host:
        # IPv6 literal
        if not re.match(r'^[0-9a-fA-F:.]+$', host):
            raise ValueError(f"Invalid host: {host}")
        return host

    if len(host) > 253 or not _HOST_RE.match(host):
        raise ValueError(f"Invalid host: {host}")

    # DNS labels: non-empty, at most 63 characters
    if any(not label or len(label) > 63 for label in host.split('.')):
        raise ValueError(f"Invalid host: {host}")
    try:
        host.encode('idna')
    except UnicodeError:
        raise ValueError(f"Invalid host: {host}")

    return host


def validate_http_url(url):
    '''Validate an http(s) URL. Returns the stripped URL or raises ValueError.'''
    if not url or not isinstance(url, str):
        raise ValueError("URL is required")

    url = url.strip()
    if any(c.isspace() for c in url):
        raise ValueError("URL must not contain whitespace")

    parsed = urlparse(url)
    if parsed.scheme not in ('http', 'https'):
        raise ValueError(f"Unsupported URL scheme: {parsed.scheme or 'none'}")
    if not parsed.hostname:
        raise ValueError("URL has no host")

    validate_host(parsed.hostname)
    try:
        port = parsed.port
    except ValueError:
        raise ValueError("URL has an invalid port")
    if port is not None:
        validate_port(port)

    return url


def parse_host_port(address):
    '''Split "host:port" or "tcp://host:port" into (host, port).
    IPv6 hosts must be bracketed: "[::1]:5432".
    '''
    if not address or not isinstance(address, str):
        raise ValueError("Address is required")

    address = address.strip()
    if address.startswith('tcp://'):
        address = address[len('tcp://'):]
    address = address.rstrip('/')

    if address.startswith('['):
        host, sep, rest = address[1:].partition(']')
        if not sep or not rest.startswith(':'):
            raise ValueError(f"Invalid address: {address}")
        port = rest[1:]
    else:
        host, sep, port = address.rpartition(':')
        if not sep:
            raise ValueError(f"Address must be host:port, got: {address}")

    return validate_host(host), validate_port(port)
