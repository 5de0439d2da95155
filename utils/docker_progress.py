# STACKUP v1.0
import subprocess
import platform
from rich.console import Console
from rich.spinner import Spinner
from rich.live import Live

# Platform detection for compatible symbols
IS_WINDOWS = platform.system().lower() == 'windows'

# Use ASCII-compatible symbols for Windows cmd.exe, Unicode for Linux/Mac
if IS_WINDOWS:
    SYMBOL_SUCCESS = "[OK]"
    SYMBOL_FAILED = "[X]"
    SPINNER_STYLE = "line"  # ASCII-compatible spinner for Windows
else:
    SYMBOL_SUCCESS = "✅"
    SYMBOL_FAILED = "❌"
    SPINNER_STYLE = "dots"  # Unicode spinner for Linux/Mac

console = Console()


class ProgressMonitor:
    """Context manager showing a spinner while a command runs."""

    def __init__(self, message: str = "Operation in progress"):
        self.message = message
        self.spinner = Spinner(SPINNER_STYLE, text=f"│     {message}")
        self.live = None
        self.result = None
        self.success = False

    def __enter__(self):
        """Start the spinner display."""
        self.live = Live(self.spinner, console=console, refresh_per_second=10, transient=True)
        self.live.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop the spinner and show final status."""
        if self.live:
            self.live.stop()

        if self.success:
            console.print(f"  │     {SYMBOL_SUCCESS} {self.message} - Complete!", style="bold green")
        elif exc_type is not None:
            console.print(f"  │     {SYMBOL_FAILED} {self.message} - Failed (Exception)", style="bold red")
        elif self.result is not None and self.result.returncode != 0:
            console.print(f"  │     {SYMBOL_FAILED} {self.message} - Failed", style="bold red")

    def set_result(self, result):
        """Set subprocess result and determine success status."""
        self.result = result
        self.success = result.returncode == 0


def run_command_with_progress(
    command,
    message: str,
    cwd=None,
    capture_output: bool = True,
    text: bool = True,
    encoding: str = 'utf-8',
    errors: str = 'ignore'
) -> subprocess.CompletedProcess:
    """Run a command with a progress spinner."""
    with ProgressMonitor(message) as monitor:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=capture_output,
            text=text,
            encoding=encoding,
            errors=errors
        )
        monitor.set_result(result)

    return result


def filter_docker_errors(stderr: str) -> str:
    """Filter Docker stderr to show only real errors, not progress lines."""
    if not stderr:
        return ""

    # Progress indicators to filter out
    progress_keywords = [
        'Pulling', 'Pulled', 'Download', 'Extracting', 'Pull complete',
        'Waiting', 'Verifying', 'Already exists', 'Digest:',
        'Status:', 'Image is up to date', 'Downloaded newer image',
        'Container', 'Network', 'Volume'
    ]

    error_lines = []
    for line in stderr.split('\n'):
        # Skip progress lines
        if any(keyword in line for keyword in progress_keywords):
            continue

        # Keep non-empty lines
        if line.strip():
            error_lines.append(line)

    return '\n'.join(error_lines)
