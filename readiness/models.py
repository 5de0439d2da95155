# STACKUP v1.0
import math
from dataclasses import dataclass
from typing import Optional

from readiness.errors import ConfigurationError


DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_INTERVAL = 2.0


@dataclass(frozen=True)
class ProbeTarget:
    '''What to probe and how persistently'''

    name: str
    endpoint: str
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    interval: float = DEFAULT_INTERVAL

    def validate(self):
        '''Raise ConfigurationError when the target cannot be probed'''
        if not isinstance(self.endpoint, str) or not self.endpoint.strip():
            raise ConfigurationError("Endpoint is required", self.name)

        # bool is an int subclass, reject it explicitly
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise ConfigurationError("max_attempts must be an integer", self.name)
        if self.max_attempts < 1:
            raise ConfigurationError("max_attempts must be at least 1", self.name)

        if isinstance(self.interval, bool) or not isinstance(self.interval, (int, float)):
            raise ConfigurationError("interval must be a number of seconds", self.name)
        if not math.isfinite(self.interval):
            raise ConfigurationError("interval must be finite", self.name)
        if self.interval < 0:
            raise ConfigurationError("interval must not be negative", self.name)

        return self


@dataclass(frozen=True)
class ProbeOutcome:
    '''Result of a bounded sequence of probes against one target'''

    target: ProbeTarget
    succeeded: bool
    attempts_used: int
    last_error: Optional[str] = None

    @property
    def name(self):
        return self.target.name

    def to_dict(self):
        return {
            'name': self.target.name,
            'endpoint': self.target.endpoint,
            'succeeded': self.succeeded,
            'attempts_used': self.attempts_used,
            'max_attempts': self.target.max_attempts,
            'last_error': self.last_error,
        }
