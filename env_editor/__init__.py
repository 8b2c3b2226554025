# env_editor/__init__.py
from .commands import COMMANDS, CommandRequest, Dispatcher, dispatch
from .config import Settings
from .errors import EnvEditorError, ExitCode, PersistenceError, UsageError
from .path_list import decode, encode
from .persistence import PersistenceBackend, PosixBackend, WindowsBackend, get_backend
from .platform_utils import Platform, detect_platform

__all__ = [
    "COMMANDS",
    "CommandRequest",
    "Dispatcher",
    "dispatch",
    "Settings",
    "EnvEditorError",
    "ExitCode",
    "PersistenceError",
    "UsageError",
    "decode",
    "encode",
    "PersistenceBackend",
    "PosixBackend",
    "WindowsBackend",
    "get_backend",
    "Platform",
    "detect_platform",
    "__version__",
]
__version__ = "0.1.0"
