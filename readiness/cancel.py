# STACKUP v1.0
import threading
import time


class Deadline:
    '''Cancel signal that trips once `seconds` have passed.

    Quacks like threading.Event (is_set / wait) so either can be handed
    to ReadinessChecker.check().
    '''

    def __init__(self, seconds: float, clock=time.monotonic):
        if seconds < 0:
            raise ValueError("Deadline must not be negative")
        self._clock = clock
        self._expires_at = clock() + seconds
        self._cancelled = threading.Event()

    @property
    def remaining(self) -> float:
        return max(0.0, self._expires_at - self._clock())

    def cancel(self):
        '''Trip the deadline early'''
        self._cancelled.set()

    def is_set(self) -> bool:
        return self._cancelled.is_set() or self.remaining <= 0

    def wait(self, timeout=None) -> bool:
        '''Block until tripped or `timeout` elapses. Returns is_set().'''
        limit = self.remaining if timeout is None else min(timeout, self.remaining)
        self._cancelled.wait(limit)
        return self.is_set()


class CancelGroup:
    '''Cancel signal that is set when it, or any wrapped signal, is set.

    ``check_all`` hands one to every worker so a Ctrl-C in the caller can
    stop all of them, while an outer Event or Deadline still works.
    '''

    POLL_INTERVAL = 0.1

    def __init__(self, *signals, clock=time.monotonic):
        self._signals = [s for s in signals if s is not None]
        self._clock = clock
        self._cancelled = threading.Event()

    def cancel(self):
        self._cancelled.set()

    def is_set(self) -> bool:
        return self._cancelled.is_set() or any(s.is_set() for s in self._signals)

    def wait(self, timeout=None) -> bool:
        '''Block until set or `timeout` elapses. Returns is_set().
        Wrapped signals are polled every POLL_INTERVAL seconds.
        '''
        expires_at = None if timeout is None else self._clock() + timeout
        while not self.is_set():
            if expires_at is None:
                slice_ = self.POLL_INTERVAL
            else:
                remaining = expires_at - self._clock()
                if remaining <= 0:
                    break
                slice_ = min(remaining, self.POLL_INTERVAL)
            self._cancelled.wait(slice_)
        return self.is_set()
