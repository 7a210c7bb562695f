from abc import ABC, abstractmethod


class Provider(ABC):
    """Abstract base class for message transports (Telegram, local console)."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return provider name identifier (e.g., "telegram_stats_bot")."""

    @abstractmethod
    async def start_monitoring(self) -> None:
        """Start receiving messages and routing them to the command router."""

    @abstractmethod
    async def stop(self) -> None:
        """Stop provider and release resources (connections, sessions)."""
