# STACKUP v1.0
import json
import logging
import getpass
from pathlib import Path
from datetime import datetime
from enum import Enum

from config import STACKUP_CONFIG_DIR

_log = logging.getLogger(__name__)


class EventType(Enum):
    """Types of workflow events"""
    SETUP_START = "SETUP_START"
    SETUP_COMPLETE = "SETUP_COMPLETE"
    SETUP_FAILED = "SETUP_FAILED"
    DOCKER_CHECK = "DOCKER_CHECK"
    COMPOSE_DOWN = "COMPOSE_DOWN"
    COMPOSE_PULL = "COMPOSE_PULL"
    COMPOSE_UP = "COMPOSE_UP"
    HEALTH_CHECK = "HEALTH_CHECK"


class EventLogger:
    """
    Append-only JSON-lines log of setup and readiness events
    """

    def __init__(self, log_file=None, enabled=True):
        self.enabled = enabled
        self.log_file = Path(log_file) if log_file else STACKUP_CONFIG_DIR / 'events.log'

    def log_event(self, event_type: EventType, subject: str, details: dict = None):
        """Log an event. Write errors are reported, not raised."""
        if not self.enabled:
            return None

        event = {
            'timestamp': datetime.now().isoformat(),
            'user': self._get_current_user(),
            'event_type': event_type.value,
            'subject': subject,
            'details': details or {}
        }

        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(json.dumps(event) + '\n')
        except OSError as e:
            _log.warning("Could not write event log %s: %s", self.log_file, e)
            return None

        return event

    def log_outcome(self, outcome):
        '''Record a ProbeOutcome as a HEALTH_CHECK event'''
        return self.log_event(EventType.HEALTH_CHECK, outcome.name, outcome.to_dict())

    def _get_current_user(self):
        try:
            return getpass.getuser()
        except (KeyError, OSError):
            return "unknown"

    def get_recent_events(self, limit=100, event_type=None):
        """Get recent events, newest first"""
        if not self.log_file.exists():
            return []

        with open(self.log_file, 'r', encoding='utf-8') as f:
            lines = f.readlines()[::-1]

        events = []
        for line in lines:
            line = line.strip()
            if not line:
                continue
            try:
                event = json.loads(line)
            except json.JSONDecodeError:
                _log.debug("Skipping corrupt event line: %s", line[:80])
                continue

            if event_type and event.get('event_type') != event_type.value:
                continue

            events.append(event)
            if len(events) >= limit:
                break

        return events


# Global event logger instance
_event_logger = None


def get_event_logger():
    """Get global event logger instance"""
    global _event_logger
    if _event_logger is None:
        _event_logger = EventLogger()
    return _event_logger
