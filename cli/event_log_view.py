# STACKUP v1.0
from datetime import datetime

from rich.table import Table

from cli.ui import console, show_info
from utils.event_log import get_event_logger


def show_recent_events(limit=50, event_logger=None):
    """Show recent workflow events"""
    event_logger = event_logger or get_event_logger()
    events = event_logger.get_recent_events(limit=limit)

    if not events:
        show_info(f"No events found in {event_logger.log_file}")
        return 0

    table = Table(title="Recent Events", show_header=True, header_style="bold cyan")
    table.add_column("Time", style="cyan")
    table.add_column("User", style="magenta")
    table.add_column("Event", style="yellow")
    table.add_column("Subject", style="green")
    table.add_column("Details", style="dim")

    for event in events:
        try:
            time_str = datetime.fromisoformat(event['timestamp']).strftime("%Y-%m-%d %H:%M:%S")
        except (KeyError, ValueError):
            time_str = event.get('timestamp', '?')

        details = event.get('details', {})
        detail_str = ', '.join(f'{k}={v}' for k, v in details.items()) if details else ''
        if len(detail_str) > 60:
            detail_str = detail_str[:57] + '...'

        table.add_row(
            time_str,
            event.get('user', 'unknown'),
            event.get('event_type', ''),
            event.get('subject', ''),
            detail_str
        )

    console.print(table)
    return 0
