import logging
import sys

from rich.logging import RichHandler

USAGE = '''Usage:
  stackup [setup] [--no-browser] [--verbose]
  stackup check [--parallel] [--attempts N] [--interval SECONDS] [--verbose]
  stackup events [--limit N]
'''


def _option(argv, name, cast, default=None):
    '''Value following `name` in argv, e.g. --attempts 5'''
    for i, arg in enumerate(argv):
        if arg == name and i + 1 < len(argv):
            try:
                return cast(argv[i + 1])
            except ValueError:
                print(f"⚠️  Invalid value for {name}: {argv[i + 1]}")
                sys.exit(2)
    return default


def setup_logging(verbose=False):
    '''Diagnostics go through logging; user output goes through rich'''
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)]
    )
    # urllib3 is noisy at DEBUG
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def run(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    if '-h' in argv or '--help' in argv:
        print(USAGE)
        return 0

    setup_logging(verbose='--verbose' in argv)
    command = argv[0] if argv and not argv[0].startswith('-') else 'setup'

    from cli.ui import print_header, show_error

    try:
        if command == 'setup':
            print_header()
            from cli.setup_flow import run_setup
            return run_setup(open_browser_prompt='--no-browser' not in argv)

        if command == 'check':
            from cli.health_report import run_check
            return run_check(
                parallel='--parallel' in argv,
                max_attempts=_option(argv, '--attempts', int),
                interval=_option(argv, '--interval', float),
            )

        if command == 'events':
            from cli.event_log_view import show_recent_events
            return show_recent_events(limit=_option(argv, '--limit', int, 50))
    except ValueError as e:
        # Bad STACKUP_* settings or an invalid probe target
        show_error(f"Configuration error: {e}")
        return 2
    except KeyboardInterrupt:
        print("\n🛑 Stopped by user")
        return 130

    print(f"Unknown command: {command}")
    print(USAGE)
    return 2


if __name__ == "__main__":
    sys.exit(run())
