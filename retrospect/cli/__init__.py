from .commands import contain_failures, main, run_cli

__all__ = ["contain_failures", "main", "run_cli"]
