"""
Notification interface consumed by the reaction workflow.

Concrete implementation: 'EmailService'.
"""

from abc import ABC, abstractmethod


class ReactionNotifier(ABC):
    """Tells a confession's author that someone reacted to it."""

    @abstractmethod
    def send_reaction_notification(
        self,
        to_email: str,
        username: str,
        reactor_name: str,
        content_preview: str,
        emoji: str,
    ) -> None:
        """Deliver one notification. Raises on any delivery failure."""
        pass
