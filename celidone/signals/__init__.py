"""
Celidone signals - public event API.

Emitted by adapters.notifiers.SignalNotifier after a committed write:
- customer_created: payload=dict (serialized customer)
- customer_updated: payload=dict (serialized customer)
- customer_deleted: payload=int (customer id)

Receivers receive ``topic`` and ``payload`` keyword arguments.
"""

from django.dispatch import Signal

from celidone.protocols import TOPIC_CREATED, TOPIC_DELETED, TOPIC_UPDATED

customer_created = Signal()  # topic, payload
customer_updated = Signal()  # topic, payload
customer_deleted = Signal()  # topic, payload

SIGNALS_BY_TOPIC = {
    TOPIC_CREATED: customer_created,
    TOPIC_UPDATED: customer_updated,
    TOPIC_DELETED: customer_deleted,
}
