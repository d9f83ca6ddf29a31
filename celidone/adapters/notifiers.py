"""Notifier adapters."""

import logging
from typing import Any

from django.utils.module_loading import import_string

from celidone.conf import celidone_settings
from celidone.exceptions import NotifyError
from celidone.protocols import TOPICS, Notifier

logger = logging.getLogger(__name__)


class SignalNotifier:
    """
    Notifier that dispatches celidone.signals.

    Transports (websocket bridges, webhooks, audit logs) subscribe with
    ``customer_created.connect(receiver)`` and friends.
    """

    def broadcast(self, topic: str, payload: Any) -> None:
        from celidone.signals import SIGNALS_BY_TOPIC

        signal = SIGNALS_BY_TOPIC.get(topic)
        if signal is None:
            raise NotifyError(topic, f"Unknown topic: {topic}")

        try:
            signal.send(sender=self.__class__, topic=topic, payload=payload)
        except Exception as exc:
            raise NotifyError(topic, str(exc)) from exc


class LoggingNotifier:
    """Notifier that only logs. No subscribers are reached."""

    def broadcast(self, topic: str, payload: Any) -> None:
        if topic not in TOPICS:
            raise NotifyError(topic, f"Unknown topic: {topic}")
        logger.info("Broadcast %s: %r", topic, payload)


def get_notifier() -> Notifier:
    """Instantiate the configured NOTIFIER_BACKEND."""
    backend_class = import_string(celidone_settings.NOTIFIER_BACKEND)
    return backend_class()
