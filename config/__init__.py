# STACKUP v1.0
import math
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_number(name, default, cast=float, minimum=0):
    '''Read a numeric setting from the environment'''
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


# Central config directory for STACKUP data files (event log)
STACKUP_CONFIG_DIR = Path(os.getenv('STACKUP_CONFIG_DIR', Path.home() / 'stackup_configs'))

# Directory holding docker-compose.yml
PROJECT_DIR = Path(os.getenv('STACKUP_PROJECT_DIR', '.')).resolve()

MAX_ATTEMPTS = _env_number('STACKUP_MAX_ATTEMPTS', 10, cast=int, minimum=1)
PROBE_INTERVAL = _env_number('STACKUP_PROBE_INTERVAL', 2.0)
PROBE_TIMEOUT = _env_number('STACKUP_PROBE_TIMEOUT', 5.0)
STARTUP_DELAY = _env_number('STACKUP_STARTUP_DELAY', 30.0)

REQUIRED_DIRS = [
    Path('grafana') / 'provisioning' / 'datasources',
]


STACK_SERVICES = [
    {
        'name': 'wordpress',
        'display_name': 'WordPress',
        'url': 'http://localhost:8080',
        'note': '',
        'ready_check': True,
    },
    {
        'name': 'grafana',
        'display_name': 'Grafana',
        'url': 'http://localhost:3000',
        'note': '(admin/admin123)',
        'ready_check': True,
    },
    {
        'name': 'prometheus',
        'display_name': 'Prometheus',
        'url': 'http://localhost:9090',
        'note': '',
        'ready_check': True,
    },
    {
        'name': 'cadvisor',
        'display_name': 'cAdvisor',
        'url': 'http://localhost:8081',
        'note': '',
        'ready_check': False,
    },
]


def build_targets(services=None, max_attempts=None, interval=None):
    '''ProbeTargets for every service with ready_check enabled'''
    from readiness import ProbeTarget

    services = STACK_SERVICES if services is None else services
    return [
        ProbeTarget(
            name=s['display_name'],
            endpoint=s['url'],
            max_attempts=MAX_ATTEMPTS if max_attempts is None else max_attempts,
            interval=PROBE_INTERVAL if interval is None else interval,
        )
        for s in services
        if s.get('ready_check')
    ]
