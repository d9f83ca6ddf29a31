"""Repository protocol (customer persistence)."""

from contextlib import AbstractContextManager
from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from django.core.paginator import Page

    from celidone.models import Customer


@runtime_checkable
class CustomerRepository(Protocol):
    """
    Protocol for customer storage.

    Every query is an explicit, parameterized method. Implementations own
    all durable state and transaction semantics; callers never cache records.

    Implemented by adapters/repository.py (Django ORM).
    """

    def atomic(self) -> AbstractContextManager:
        """Scoped transaction for a write path."""
        ...

    def find_all(self, page: int = 1, page_size: int = 20) -> "Page":
        """Return one page of customers in natural order."""
        ...

    def find_by_id(self, customer_id: int) -> "Customer | None":
        ...

    def save(self, customer: "Customer") -> "Customer":
        """Insert or update. Returns the stored record (with id assigned)."""
        ...

    def delete_by_id(self, customer_id: int) -> None:
        ...

    def exists_by_id(self, customer_id: int) -> bool:
        ...

    def exists_by_email(self, email: str, exclude_id: int | None = None) -> bool:
        """True if another customer (not ``exclude_id``) uses ``email``."""
        ...

    def exists_by_organization_id(
        self, organization_id: str, exclude_id: int | None = None
    ) -> bool:
        """True if another customer (not ``exclude_id``) uses ``organization_id``."""
        ...

    def count(self) -> int:
        ...

    def count_by_registered_at_between(self, start: datetime, end: datetime) -> int:
        """Count customers with ``start <= registered_at <= end``."""
        ...

    def count_by_person_type(self, person_type: str) -> int:
        ...

    def top_city_by_count(self) -> str | None:
        """Non-empty city with most customers, ties broken alphabetically."""
        ...

    def count_by_city(self, city: str) -> int:
        ...

    def search(self, term: str, limit: int | None = None) -> "list[Customer]":
        """Case-insensitive substring match on name OR email."""
        ...

    def recent_first(self, limit: int) -> "list[Customer]":
        """Most recently registered customers first."""
        ...
