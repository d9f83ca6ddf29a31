"""Django ORM CustomerRepository adapter."""

import logging
from contextlib import contextmanager
from datetime import datetime
from functools import wraps

from django.core.paginator import Page, Paginator
from django.db import DatabaseError, transaction
from django.db.models import Count, Q

from celidone.exceptions import StorageError
from celidone.models import Customer

logger = logging.getLogger(__name__)


def _storage_errors(method):
    """Re-raise ORM failures as StorageError."""

    @wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except DatabaseError as exc:
            logger.error("Repository %s failed: %s", method.__name__, exc)
            raise StorageError(str(exc), operation=method.__name__) from exc

    return wrapper


class DjangoCustomerRepository:
    """
    Adapter that implements CustomerRepository with the Django ORM.

    Stateless: safe to share between requests.
    """

    def __init__(self, using: str | None = None):
        self.using = using

    def _qs(self):
        return Customer.objects.using(self.using) if self.using else Customer.objects.all()

    @contextmanager
    def atomic(self):
        """Scoped transaction. Commit-time failures surface as StorageError."""
        try:
            with transaction.atomic(using=self.using):
                yield
        except DatabaseError as exc:
            logger.error("Repository transaction failed: %s", exc)
            raise StorageError(str(exc), operation="atomic") from exc

    # ======================================================================
    # Reads
    # ======================================================================

    @_storage_errors
    def find_all(self, page: int = 1, page_size: int = 20) -> Page:
        paginator = Paginator(self._qs(), page_size)
        return paginator.get_page(page)

    @_storage_errors
    def find_by_id(self, customer_id: int) -> Customer | None:
        return self._qs().filter(pk=customer_id).first()

    @_storage_errors
    def exists_by_id(self, customer_id: int) -> bool:
        return self._qs().filter(pk=customer_id).exists()

    @_storage_errors
    def exists_by_email(self, email: str, exclude_id: int | None = None) -> bool:
        qs = self._qs().filter(email__iexact=email)
        if exclude_id is not None:
            qs = qs.exclude(pk=exclude_id)
        return qs.exists()

    @_storage_errors
    def exists_by_organization_id(
        self, organization_id: str, exclude_id: int | None = None
    ) -> bool:
        qs = self._qs().filter(organization_id=organization_id)
        if exclude_id is not None:
            qs = qs.exclude(pk=exclude_id)
        return qs.exists()

    @_storage_errors
    def search(self, term: str, limit: int | None = None) -> list[Customer]:
        qs = self._qs().filter(Q(name__icontains=term) | Q(email__icontains=term))
        if limit:
            qs = qs[:limit]
        return list(qs)

    @_storage_errors
    def recent_first(self, limit: int) -> list[Customer]:
        return list(self._qs().order_by("-registered_at", "-id")[:limit])

    # ======================================================================
    # Aggregates
    # ======================================================================

    @_storage_errors
    def count(self) -> int:
        return self._qs().count()

    @_storage_errors
    def count_by_registered_at_between(self, start: datetime, end: datetime) -> int:
        return self._qs().filter(registered_at__range=(start, end)).count()

    @_storage_errors
    def count_by_person_type(self, person_type: str) -> int:
        return self._qs().filter(person_type=person_type).count()

    @_storage_errors
    def top_city_by_count(self) -> str | None:
        row = (
            self._qs()
            .exclude(city="")
            .values("city")
            .annotate(total=Count("id"))
            .order_by("-total", "city")
            .first()
        )
        return row["city"] if row else None

    @_storage_errors
    def count_by_city(self, city: str) -> int:
        return self._qs().filter(city=city).count()

    # ======================================================================
    # Writes
    # ======================================================================

    @_storage_errors
    def save(self, customer: Customer) -> Customer:
        customer.save(using=self.using)
        return customer

    @_storage_errors
    def delete_by_id(self, customer_id: int) -> None:
        self._qs().filter(pk=customer_id).delete()
