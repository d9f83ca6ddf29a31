"""Celidone services.

- registry: CustomerRegistry (create/update/delete + reads)
- statistics: StatisticsAggregator

build_registry() / build_aggregator() wire the default collaborators
(Django ORM repository, configured notifier).
"""

from celidone.services.registry import CustomerRegistry
from celidone.services.statistics import StatisticsAggregator


def build_registry() -> CustomerRegistry:
    from celidone.adapters.notifiers import get_notifier
    from celidone.adapters.repository import DjangoCustomerRepository

    return CustomerRegistry(DjangoCustomerRepository(), get_notifier())


def build_aggregator() -> StatisticsAggregator:
    from celidone.adapters.repository import DjangoCustomerRepository

    return StatisticsAggregator(DjangoCustomerRepository())


__all__ = [
    "CustomerRegistry",
    "StatisticsAggregator",
    "build_registry",
    "build_aggregator",
]
