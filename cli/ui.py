# STACKUP v1.0
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
import inquirer

console = Console()


def show_success(message):
    '''Show success message in green'''
    console.print(f"  ✅ {message}", style="bold green")

def show_error(message):
    '''Show error message in red'''
    console.print(f"  ❌ {message}", style="bold red")

def show_warning(message):
    '''Show warning message in yellow'''
    console.print(f"  ⚠️  {message}", style="yellow")

def show_info(message):
    '''Show info message in blue'''
    console.print(f"  ℹ️  {message}", style="bold blue")

def print_header():
    '''Print the STACKUP header panel'''
    logo = Text()
    logo.append("  WordPress + Grafana Monitoring Setup\n\n", style="bold cyan")
    logo.append("  STACKUP v1.0", style="bold white")
    logo.append("  |  WordPress · Grafana · Prometheus · cAdvisor", style="dim")
    console.print()
    console.print(Panel(logo, border_style="cyan", padding=(1, 2)))
    console.print()

def show_step(number, message):
    '''Show a numbered workflow step header'''
    console.print()
    console.print(f"  [bold cyan]Step {number}:[/bold cyan] {message}")
    console.print(f"  │", style="dim cyan")

def show_step_detail(message):
    '''Show a detail line under a step, maintaining the vertical line'''
    console.print(f"  │     {message}", style="dim green")

def show_progress_start(message):
    '''Start a progress line that dots are appended to'''
    console.print(f"  │     {message}", end="")

def show_progress_dot():
    console.print(".", end="", style="dim")

def show_progress_end():
    console.print()

def show_result_panel(content, title="Success"):
    '''Show result info in a styled panel'''
    panel = Panel(
        content,
        title=f"[bold green]{title}[/bold green]",
        border_style="green",
        padding=(1, 2)
    )
    console.print()
    console.print(panel)

def confirm(message, default=False):
    '''Yes/no question. Returns default when the prompt is aborted.'''
    answer = inquirer.prompt([inquirer.Confirm('confirm', message=message, default=default)])
    if not answer:
        return default
    return answer['confirm']
