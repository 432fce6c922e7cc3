from .console import ConsoleShell, run_console

__all__ = [
    "ConsoleShell",
    "run_console",
]
