"""Customer registry - create/update/delete workflow.

Each write runs in one repository transaction (validation included) and is
broadcast only after that transaction block has exited. A failed broadcast is
logged and never fails the write.
"""

import logging
from datetime import timedelta
from typing import Any, Callable

from django.utils import timezone

from celidone.conf import celidone_settings
from celidone.exceptions import CustomerNotFound
from celidone.gates import CustomerValidationPolicy
from celidone.identifiers import only_digits
from celidone.models import Customer, PersonType
from celidone.protocols import (
    TOPIC_CREATED,
    TOPIC_DELETED,
    TOPIC_UPDATED,
    CustomerRepository,
    Notifier,
)
from celidone.serializers import CUSTOMER_FIELDS, customer_to_dict

logger = logging.getLogger(__name__)

# Client-writable fields. id, registered_at and updated_at are never accepted.
UPDATABLE_FIELDS = frozenset(CUSTOMER_FIELDS)


def normalize_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Keep whitelisted fields; digits-only ids, lowercase email, stripped text."""
    data = {}
    for key, value in fields.items():
        if key not in UPDATABLE_FIELDS:
            logger.debug("Ignoring non-writable field %r", key)
            continue
        if value is None and key != "birth_date":
            value = ""
        if isinstance(value, str):
            value = value.strip()
        data[key] = value

    for key in ("individual_id", "organization_id"):
        if key in data:
            data[key] = only_digits(data[key])
    if "email" in data:
        data["email"] = data["email"].lower()
    if "person_type" in data and not data["person_type"]:
        data["person_type"] = PersonType.INDIVIDUAL
    return data


class CustomerRegistry:
    """
    Orchestrates validation, persistence and broadcast for customers.

    Args:
        repository: CustomerRepository (owner of all durable state)
        notifier: Notifier for change events
        policy: CustomerValidationPolicy (defaults to one over ``repository``)
        clock: Callable returning the current aware datetime
    """

    def __init__(
        self,
        repository: CustomerRepository,
        notifier: Notifier,
        policy: CustomerValidationPolicy | None = None,
        clock: Callable = timezone.now,
    ):
        self.repository = repository
        self.notifier = notifier
        self.policy = policy or CustomerValidationPolicy(repository)
        self.clock = clock

    # ======================================================================
    # Reads
    # ======================================================================

    def list_page(self, page: int = 1, page_size: int | None = None):
        """One page of customers (django.core.paginator.Page)."""
        size = page_size or celidone_settings.PAGE_SIZE
        size = max(1, min(size, celidone_settings.MAX_PAGE_SIZE))
        logger.info("Listing customers page=%s size=%s", page, size)
        return self.repository.find_all(page=page, page_size=size)

    def get(self, customer_id: int) -> Customer:
        """Get customer by id. Raises CustomerNotFound."""
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)
        return customer

    def search(self, term: str) -> list[Customer]:
        """Case-insensitive substring search on name or email."""
        logger.info("Searching customers: %r", term)
        return self.repository.search(
            (term or "").strip(), limit=celidone_settings.SEARCH_LIMIT
        )

    def recent(self, limit: int | None = None) -> list[Customer]:
        """Most recently registered customers first, at most MAX_PAGE_SIZE."""
        size = limit or celidone_settings.RECENT_LIMIT
        size = max(1, min(size, celidone_settings.MAX_PAGE_SIZE))
        return self.repository.recent_first(size)

    # ======================================================================
    # Writes
    # ======================================================================

    def create(self, **fields) -> Customer:
        """
        Validate and store a new customer, then broadcast customer-created.

        Raises:
            GateError: duplicate email / organization id
            StorageError: repository failure
        """
        data = normalize_fields(fields)
        logger.info("Creating customer: %s", data.get("name", ""))

        with self.repository.atomic():
            candidate = Customer(**data)
            self.policy.validate(candidate)
            now = self.clock()
            candidate.registered_at = now
            candidate.updated_at = now
            customer = self.repository.save(candidate)

        logger.info("Customer created. id=%s", customer.pk)
        self._broadcast(TOPIC_CREATED, customer_to_dict(customer))
        return customer

    def update(self, customer_id: int, **fields) -> Customer:
        """
        Merge ``fields`` into an existing customer, then broadcast customer-updated.

        id and registered_at are preserved; updated_at always moves forward.

        Raises:
            CustomerNotFound: unknown id
            GateError: duplicate email / organization id
            StorageError: repository failure
        """
        data = normalize_fields(fields)
        logger.info("Updating customer id=%s", customer_id)

        with self.repository.atomic():
            customer = self.repository.find_by_id(customer_id)
            if customer is None:
                raise CustomerNotFound(customer_id)

            changed = []
            for key, value in data.items():
                if getattr(customer, key) != value:
                    changed.append(key)
                setattr(customer, key, value)

            self.policy.validate(customer, existing_id=customer.pk)
            customer.updated_at = self._next_update_time(customer.updated_at)
            customer = self.repository.save(customer)

        logger.info("Customer updated. id=%s changed=%s", customer.pk, changed)
        self._broadcast(TOPIC_UPDATED, customer_to_dict(customer))
        return customer

    def delete(self, customer_id: int) -> None:
        """
        Physically delete a customer, then broadcast customer-deleted.

        Raises:
            CustomerNotFound: unknown id (nothing is broadcast)
            StorageError: repository failure
        """
        logger.info("Deleting customer id=%s", customer_id)

        with self.repository.atomic():
            if not self.repository.exists_by_id(customer_id):
                raise CustomerNotFound(customer_id)
            self.repository.delete_by_id(customer_id)

        logger.info("Customer deleted. id=%s", customer_id)
        self._broadcast(TOPIC_DELETED, customer_id)

    # ======================================================================
    # Internals
    # ======================================================================

    def _next_update_time(self, previous):
        now = self.clock()
        if previous is not None and now <= previous:
            return previous + timedelta(microseconds=1)
        return now

    def _broadcast(self, topic: str, payload) -> None:
        """Best-effort broadcast. Failures are logged, never raised."""
        try:
            self.notifier.broadcast(topic, payload)
        except Exception:
            logger.exception("Broadcast of %s failed", topic)
