# STACKUP v1.0
import logging
import subprocess

from config import PROJECT_DIR
from utils.docker_progress import run_command_with_progress

_log = logging.getLogger(__name__)


def get_docker_compose_command():
    """Get the docker compose command for the system, or None if unavailable"""

    try:
        # Try new format: docker compose (Docker 20.10+)
        result = subprocess.run(
            ['docker', 'compose', 'version'],
            capture_output=True,
            text=True
        )

        if result.returncode == 0:
            return ['docker', 'compose']
    except FileNotFoundError:
        pass

    try:
        # Fallback to old format: docker-compose (legacy)
        result = subprocess.run(
            ['docker-compose', 'version'],
            capture_output=True,
            text=True
        )

        if result.returncode == 0:
            return ['docker-compose']
    except FileNotFoundError:
        pass

    return None


def check_docker_status():
    """Check Docker availability and return detailed status."""
    try:
        result = subprocess.run(
            ['docker', 'info'],
            capture_output=True,
            text=True,
            timeout=10
        )
        if result.returncode == 0:
            return {'installed': True, 'running': True, 'message': 'Docker daemon is running'}

        # Docker installed but daemon not running
        stderr = result.stderr.lower()
        if 'cannot connect' in stderr or 'is the docker daemon running' in stderr:
            return {'installed': True, 'running': False, 'message': 'Docker is installed but the daemon is not running. Start it with: sudo systemctl start docker'}
        if 'permission denied' in stderr:
            return {'installed': True, 'running': False, 'message': 'Permission denied talking to Docker. Add your user to the docker group and log in again.'}
        return {'installed': True, 'running': False, 'message': f'Docker error: {result.stderr.strip()[:100]}'}
    except FileNotFoundError:
        return {'installed': False, 'running': False, 'message': 'Docker is not installed. See https://docs.docker.com/engine/install/'}
    except subprocess.TimeoutExpired:
        return {'installed': True, 'running': False, 'message': 'Docker is not responding (timeout). Restart Docker.'}


def compose(compose_cmd, action, *args, message=None, project_dir=None, spinner=True):
    '''Run a compose subcommand (down, pull, up, ps) in the project directory.
    Returns the CompletedProcess, or None when the binary is missing.
    '''
    command = list(compose_cmd) + [action] + list(args)
    cwd = str(project_dir or PROJECT_DIR)
    _log.debug("compose: %s (cwd=%s)", ' '.join(command), cwd)

    try:
        if spinner:
            return run_command_with_progress(command, message or f"docker compose {action}", cwd=cwd)
        return subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='ignore',
            cwd=cwd
        )
    except FileNotFoundError:
        _log.warning("compose binary not found: %s", command[0])
        return None
