# STACKUP v1.0
"""Bounded, fixed-interval readiness polling.

The checker never logs and never exits the process. Callers render
progress through ``on_attempt`` and present the final ProbeOutcome.
"""
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from readiness.cancel import CancelGroup
from readiness.errors import ProbeFailure
from readiness.models import ProbeTarget, ProbeOutcome
from readiness.transport import get_transport


def fixed_interval(attempt: int, interval: float) -> float:
    '''Default policy: same delay after every failed attempt'''
    return interval


def exponential_backoff(factor: float = 2.0, max_interval: float = 30.0) -> Callable:
    '''Delay grows by `factor` per failed attempt, capped at `max_interval`'''
    if factor < 1:
        raise ValueError("Backoff factor must be >= 1")

    def _delay(attempt: int, interval: float) -> float:
        return min(interval * (factor ** (attempt - 1)), max_interval)

    return _delay


class ReadinessChecker:
    """Probe a target until it answers or attempts run out.

    Args:
        transport: object with ``validate(endpoint)`` and ``probe(endpoint)``;
            chosen per target from the endpoint scheme when omitted.
        sleep: wait primitive, injectable for tests. When omitted the wait
            goes through the cancel signal's ``wait()`` if it has one, so a
            cancel wakes the loop early.
        backoff: ``(attempt, interval) -> delay``; fixed interval by default.
        on_attempt: ``(target, attempt, error)`` called after every attempt,
            ``error`` is None on success.
        timeout: per-probe timeout for transports chosen per target.
    """

    def __init__(
        self,
        transport=None,
        sleep: Optional[Callable[[float], None]] = None,
        backoff: Callable = fixed_interval,
        on_attempt: Optional[Callable] = None,
        timeout: float = 5.0,
    ):
        self.transport = transport
        self.backoff = backoff
        self.on_attempt = on_attempt
        self.timeout = timeout
        self._sleep = sleep

    def _transport_for(self, target: ProbeTarget):
        if self.transport is not None:
            return self.transport
        return get_transport(target.endpoint, timeout=self.timeout)

    def _release(self, transport):
        if transport is not self.transport:
            transport.close()

    def validate(self, target: ProbeTarget):
        '''Raise ConfigurationError if `target` could not be probed'''
        target.validate()
        transport = self._transport_for(target)
        try:
            transport.validate(target.endpoint)
        finally:
            self._release(transport)

    def _wait(self, delay: float, cancel):
        if delay <= 0:
            return
        if self._sleep is not None:
            self._sleep(delay)
        elif cancel is not None and hasattr(cancel, 'wait'):
            cancel.wait(delay)
        else:
            time.sleep(delay)

    def check(self, target: ProbeTarget, cancel=None) -> ProbeOutcome:
        '''Probe `target` up to max_attempts times.

        Raises ConfigurationError before any attempt when the target or its
        endpoint is malformed. Probe errors only show up in the outcome.
        '''
        target.validate()
        transport = self._transport_for(target)
        attempts = 0
        last_error = None
        try:
            endpoint = transport.validate(target.endpoint)
            if not isinstance(endpoint, str):
                endpoint = target.endpoint.strip()

            while attempts < target.max_attempts:
                if cancel is not None and cancel.is_set():
                    break

                attempts += 1
                try:
                    transport.probe(endpoint)
                except ProbeFailure as e:
                    last_error = e.reason
                    self._notify(target, attempts, last_error)
                else:
                    self._notify(target, attempts, None)
                    return ProbeOutcome(target, True, attempts)

                if attempts >= target.max_attempts:
                    break

                if cancel is not None and cancel.is_set():
                    break
                self._wait(self.backoff(attempts, target.interval), cancel)
                if cancel is not None and cancel.is_set():
                    break
        finally:
            self._release(transport)

        return ProbeOutcome(target, False, attempts, last_error)

    def check_all(self, targets: List[ProbeTarget], cancel=None, max_workers=None) -> List[ProbeOutcome]:
        '''Check targets concurrently, one worker per target.
        Outcomes come back in the order of `targets`.
        '''
        targets = list(targets)
        if not targets:
            return []

        # Fail fast on configuration before any probing starts
        for target in targets:
            self.validate(target)

        group = CancelGroup(cancel)
        workers = max_workers or len(targets)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.check, target, group) for target in targets]
            try:
                return [future.result() for future in futures]
            except BaseException:
                # Ctrl-C or a worker crash: stop the remaining workers
                group.cancel()
                raise

    def _notify(self, target, attempt, error):
        if self.on_attempt:
            self.on_attempt(target, attempt, error)
