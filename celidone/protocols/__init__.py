"""Celidone protocols."""

from celidone.protocols.notifier import (
    TOPIC_CREATED,
    TOPIC_DELETED,
    TOPIC_UPDATED,
    TOPICS,
    Notifier,
)
from celidone.protocols.repository import CustomerRepository
from celidone.protocols.statistics import NO_CITY, StatsSnapshot

__all__ = [
    # Storage
    "CustomerRepository",
    # Broadcast
    "Notifier",
    "TOPIC_CREATED",
    "TOPIC_UPDATED",
    "TOPIC_DELETED",
    "TOPICS",
    # Statistics
    "StatsSnapshot",
    "NO_CITY",
]
