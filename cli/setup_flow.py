# STACKUP v1.0
import logging
import time
import webbrowser

from rich.text import Text

from cli.ui import (
    console, show_step, show_step_detail, show_success, show_error,
    show_warning, show_info, show_result_panel, confirm
)
from cli.health_report import check_services_sequential
from config import PROJECT_DIR, REQUIRED_DIRS, STACK_SERVICES, STARTUP_DELAY, build_targets
from utils.docker_progress import filter_docker_errors
from utils.docker_utils import check_docker_status, get_docker_compose_command, compose
from utils.event_log import get_event_logger, EventType
from utils.system import is_root, has_browser_opener, ensure_directories

_log = logging.getLogger(__name__)


def check_requirements(event_logger):
    '''Step 1. Returns the compose command, or None when setup cannot continue.'''
    if is_root():
        show_warning("Running as root. Consider using a non-root user with sudo privileges.")

    status = check_docker_status()
    event_logger.log_event(EventType.DOCKER_CHECK, 'docker', status)

    if not status['installed']:
        show_error("Docker is not installed!")
        show_step_detail(status['message'])
        return None
    show_success("Docker is installed ✓")

    compose_cmd = get_docker_compose_command()
    if compose_cmd is None:
        show_error("Docker Compose is not available!")
        show_step_detail("Install the Docker Compose plugin or the legacy docker-compose binary.")
        return None
    show_success(f"Docker Compose is available ({' '.join(compose_cmd)}) ✓")

    if not status['running']:
        show_error("Docker daemon is not running!")
        show_step_detail(status['message'])
        return None
    show_success("Docker daemon is running ✓")

    return compose_cmd


def prepare_directories(project_dir):
    '''Step 2'''
    for path, created in ensure_directories(project_dir, REQUIRED_DIRS):
        rel = path.relative_to(project_dir)
        if created:
            show_success(f"Created {rel}")
        else:
            show_success(f"{rel} already exists")


def start_stack(compose_cmd, project_dir, event_logger):
    '''Steps 3-5. Returns False when the services could not be started.'''
    show_step(3, "Stopping any existing containers...")
    result = compose(compose_cmd, 'down', message="Stopping containers", project_dir=project_dir)
    event_logger.log_event(EventType.COMPOSE_DOWN, 'stack', {'returncode': getattr(result, 'returncode', None)})
    if result is None or result.returncode != 0:
        # Nothing running yet is fine
        show_step_detail("No running containers stopped")

    show_step(4, "Pulling required images...")
    result = compose(compose_cmd, 'pull', message="Pulling images", project_dir=project_dir)
    event_logger.log_event(EventType.COMPOSE_PULL, 'stack', {'returncode': getattr(result, 'returncode', None)})
    if result is None or result.returncode != 0:
        show_warning("Image pull failed, trying to start with local images")
        errors = filter_docker_errors(getattr(result, 'stderr', ''))
        if errors:
            show_step_detail(errors[-300:])

    show_step(5, "Starting all services...")
    result = compose(compose_cmd, 'up', '-d', message="Starting services", project_dir=project_dir)
    event_logger.log_event(EventType.COMPOSE_UP, 'stack', {'returncode': getattr(result, 'returncode', None)})
    if result is None or result.returncode != 0:
        show_error("Failed to start services")
        errors = filter_docker_errors(getattr(result, 'stderr', ''))
        if errors:
            show_step_detail(errors[-500:])
        return False

    return True


def show_container_status(compose_cmd, project_dir):
    '''Step 7'''
    result = compose(compose_cmd, 'ps', project_dir=project_dir, spinner=False)
    if result is None or result.returncode != 0:
        show_warning("Could not read container status")
        return
    console.print(result.stdout.rstrip())


def show_summary(compose_cmd):
    '''Completion banner with URLs, next steps and useful commands'''
    cmd = ' '.join(compose_cmd)
    width = max(len(s['display_name']) for s in STACK_SERVICES) + 2

    content = Text()
    content.append("Service URLs:\n", style="bold blue")
    for service in STACK_SERVICES:
        line = f"{service['display_name'] + ':':<{width}} {service['url']}"
        if service['note']:
            line += f" {service['note']}"
        content.append(f"  {line}\n")

    wordpress = STACK_SERVICES[0]['url']
    grafana = STACK_SERVICES[1]['url']
    content.append("\nNext steps:\n", style="bold yellow")
    content.append(f"  1. Setup WordPress at {wordpress}\n")
    content.append(f"  2. Login to Grafana at {grafana}\n")
    content.append("  3. Import dashboard templates (see README.md)\n")
    content.append("  4. Configure monitoring alerts (optional)\n")

    content.append("\nUseful commands:\n", style="bold green")
    content.append(f"  • View logs: {cmd} logs -f [service-name]\n")
    content.append(f"  • Stop services: {cmd} down\n")
    content.append(f"  • Restart services: {cmd} restart\n")
    content.append(f"  • Update services: {cmd} pull && {cmd} up -d\n")
    content.append("  • Re-check readiness: stackup check")

    show_result_panel(content, title="Setup Complete! 🎉")


def offer_browser(url):
    if not has_browser_opener():
        return
    if confirm("Open WordPress in browser?", default=False):
        webbrowser.open(url)


def run_setup(open_browser_prompt=True, project_dir=None, sleep=time.sleep, event_logger=None):
    '''Full bootstrap workflow. Returns a process exit code.'''
    project_dir = project_dir or PROJECT_DIR
    event_logger = event_logger or get_event_logger()
    event_logger.log_event(EventType.SETUP_START, 'stack', {'project_dir': str(project_dir)})

    show_step(1, "Checking system requirements...")
    compose_cmd = check_requirements(event_logger)
    if compose_cmd is None:
        event_logger.log_event(EventType.SETUP_FAILED, 'stack', {'step': 'requirements'})
        return 1

    show_step(2, "Creating required directories...")
    try:
        prepare_directories(project_dir)
    except OSError as e:
        show_error(f"Could not create directories: {e}")
        event_logger.log_event(EventType.SETUP_FAILED, 'stack', {'step': 'directories', 'error': str(e)})
        return 1

    if not start_stack(compose_cmd, project_dir, event_logger):
        event_logger.log_event(EventType.SETUP_FAILED, 'stack', {'step': 'compose_up'})
        return 1

    show_step(6, "Waiting for services to start...")
    if STARTUP_DELAY > 0:
        show_info(f"Giving containers {STARTUP_DELAY:g}s to boot")
        sleep(STARTUP_DELAY)

    show_step(7, "Checking container status...")
    show_container_status(compose_cmd, project_dir)

    show_step(8, "Checking service health...")
    outcomes = check_services_sequential(build_targets(), event_logger=event_logger)

    ready = [o.name for o in outcomes if o.succeeded]
    not_ready = [o.name for o in outcomes if not o.succeeded]
    _log.info("Readiness: ready=%s not_ready=%s", ready, not_ready)

    # Unready services do not fail the setup
    event_logger.log_event(EventType.SETUP_COMPLETE, 'stack', {'ready': ready, 'not_ready': not_ready})
    show_summary(compose_cmd)

    if open_browser_prompt:
        offer_browser(STACK_SERVICES[0]['url'])

    return 0
