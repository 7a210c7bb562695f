"""Local console provider for trying commands without Telegram."""

from .console import LocalConsole

__all__ = ["LocalConsole"]
