"""Notifier protocol (change broadcast)."""

from typing import Any, Protocol, runtime_checkable

TOPIC_CREATED = "customer-created"
TOPIC_UPDATED = "customer-updated"
TOPIC_DELETED = "customer-deleted"

TOPICS = (TOPIC_CREATED, TOPIC_UPDATED, TOPIC_DELETED)


@runtime_checkable
class Notifier(Protocol):
    """
    Protocol for broadcasting customer changes to connected clients.

    Delivery is at-most-once and best-effort. Implementations raise
    NotifyError on failure; callers decide whether to swallow it.

    Configuration in settings.py:
        CELIDONE = {
            "NOTIFIER_BACKEND": "celidone.adapters.notifiers.SignalNotifier",
        }
    """

    def broadcast(self, topic: str, payload: Any) -> None:
        """
        Send ``payload`` to subscribers of ``topic``.

        Args:
            topic: One of TOPICS
            payload: Serialized customer (created/updated) or id (deleted)
        """
        ...
