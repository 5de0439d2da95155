# STACKUP v1.0
import os
import platform
import shutil


def get_platform():
    '''Detect platform (linux/windows/darwin)'''
    return platform.system().lower()


def is_windows():
    '''Check if running on Windows'''
    return get_platform() == 'windows'


def is_root():
    '''True when running as root (never on Windows)'''
    if is_windows() or not hasattr(os, 'geteuid'):
        return False
    return os.geteuid() == 0


def check_command_exists(command):
    '''Check if command exists on PATH'''
    return shutil.which(command) is not None


def has_browser_opener():
    '''Check if a GUI URL opener is available'''
    if is_windows() or get_platform() == 'darwin':
        return True
    return check_command_exists('xdg-open') and bool(
        os.environ.get('DISPLAY') or os.environ.get('WAYLAND_DISPLAY')
    )


def ensure_directories(base_dir, relative_dirs):
    '''Create missing directories under base_dir.
    Returns list of (path, created) tuples.
    '''
    results = []
    for rel in relative_dirs:
        path = base_dir / rel
        if path.is_dir():
            results.append((path, False))
            continue
        path.mkdir(parents=True, exist_ok=True)
        results.append((path, True))
    return results
