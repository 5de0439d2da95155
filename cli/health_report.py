# STACKUP v1.0
import logging

from rich.table import Table

from cli.ui import (
    console, show_success, show_warning, show_info,
    show_progress_start, show_progress_dot, show_progress_end
)
from config import build_targets, PROBE_TIMEOUT
from readiness import ReadinessChecker
from utils.event_log import get_event_logger

_log = logging.getLogger(__name__)


def _dot_on_failure(target, attempt, error):
    if error is not None:
        _log.debug("%s attempt %d failed: %s", target.name, attempt, error)
        show_progress_dot()


def check_services_sequential(targets, checker=None, event_logger=None, cancel=None):
    '''Check targets one by one, printing a dot per failed attempt.
    Unready services are a warning, never an error.
    '''
    checker = checker or ReadinessChecker(on_attempt=_dot_on_failure, timeout=PROBE_TIMEOUT)
    event_logger = event_logger or get_event_logger()

    targets = list(targets)
    for target in targets:
        checker.validate(target)

    outcomes = []
    for target in targets:
        show_progress_start(f"Checking {target.name}")
        try:
            outcome = checker.check(target, cancel=cancel)
        finally:
            show_progress_end()

        if outcome.succeeded:
            show_success(f"{target.name} is responding ✓")
        else:
            show_warning(f"{target.name} is not responding yet")

        event_logger.log_outcome(outcome)
        outcomes.append(outcome)

    return outcomes


def outcomes_table(outcomes):
    '''Rich table summarizing ProbeOutcomes'''
    table = Table(title="🩺 Service Readiness", show_header=True, header_style="bold cyan")
    table.add_column("Service", style="cyan")
    table.add_column("Endpoint", style="white")
    table.add_column("Status")
    table.add_column("Attempts", justify="right")
    table.add_column("Last error", style="dim")

    for outcome in outcomes:
        status = "[green]✅ ready[/green]" if outcome.succeeded else "[yellow]⚠️  not responding[/yellow]"
        table.add_row(
            outcome.name,
            outcome.target.endpoint,
            status,
            f"{outcome.attempts_used}/{outcome.target.max_attempts}",
            "" if outcome.succeeded else (outcome.last_error or "")
        )

    return table


def run_check(parallel=False, max_attempts=None, interval=None, checker=None, event_logger=None):
    '''Readiness-only command. Always returns exit code 0.'''
    targets = build_targets(max_attempts=max_attempts, interval=interval)
    event_logger = event_logger or get_event_logger()

    if parallel:
        checker = checker or ReadinessChecker(timeout=PROBE_TIMEOUT)
        show_info(f"Checking {len(targets)} services in parallel...")
        outcomes = checker.check_all(targets)
        for outcome in outcomes:
            event_logger.log_outcome(outcome)
    else:
        outcomes = check_services_sequential(targets, checker=checker, event_logger=event_logger)

    console.print()
    console.print(outcomes_table(outcomes))

    ready = sum(1 for o in outcomes if o.succeeded)
    if ready == len(outcomes):
        show_success(f"All {ready} services are ready")
    else:
        show_warning(f"{ready}/{len(outcomes)} services ready")

    return 0
