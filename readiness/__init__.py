# STACKUP v1.0
from readiness.errors import ConfigurationError, ProbeFailure
from readiness.models import ProbeTarget, ProbeOutcome
from readiness.transport import HttpTransport, TcpTransport, get_transport, http_ok
from readiness.checker import ReadinessChecker, fixed_interval, exponential_backoff
from readiness.cancel import Deadline, CancelGroup

__all__ = [
    'ConfigurationError',
    'ProbeFailure',
    'ProbeTarget',
    'ProbeOutcome',
    'HttpTransport',
    'TcpTransport',
    'get_transport',
    'http_ok',
    'ReadinessChecker',
    'fixed_interval',
    'exponential_backoff',
    'Deadline',
    'CancelGroup',
]
