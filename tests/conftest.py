import pytest

from readiness import ConfigurationError, ProbeFailure
from utils.event_log import EventLogger
from utils.validation import validate_http_url


class FakeTransport:
    '''Scripted transport: `results` is a list of True/False per attempt,
    the last entry repeats once the list runs out.'''

    def __init__(self, results=(False,), on_probe=None):
        self.results = list(results)
        self.calls = []
        self.closed = False
        self.on_probe = on_probe

    def validate(self, endpoint):
        try:
            return validate_http_url(endpoint)
        except ValueError as e:
            raise ConfigurationError(str(e))

    def probe(self, endpoint):
        self.calls.append(endpoint)
        if self.on_probe:
            self.on_probe(len(self.calls))
        index = min(len(self.calls), len(self.results)) - 1
        if not self.results[index]:
            raise ProbeFailure(endpoint, "connection refused")
        return 200

    def close(self):
        self.closed = True


class RecordingSleep:
    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def fake_transport_factory():
    return FakeTransport


@pytest.fixture
def event_logger(tmp_path):
    return EventLogger(log_file=tmp_path / 'events.log')
