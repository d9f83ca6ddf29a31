"""
Celidone - Customer registry.

Usage:
    from celidone.services import build_registry, build_aggregator
    from celidone.identifiers import validate_individual_id, validate_organization_id

    registry = build_registry()
    customer = registry.create(name="Maria", email="maria@example.com")
    registry.update(customer.pk, city="Campinas")
    registry.delete(customer.pk)

    snapshot = build_aggregator().compute_snapshot()

    validate_individual_id("529.982.247-25")       # True
    validate_organization_id("11.444.777/0001-61")  # True
"""


def __getattr__(name):
    if name == "CustomerRegistry":
        from celidone.services.registry import CustomerRegistry

        return CustomerRegistry
    if name == "StatisticsAggregator":
        from celidone.services.statistics import StatisticsAggregator

        return StatisticsAggregator
    if name == "CustomerValidationPolicy":
        from celidone.gates import CustomerValidationPolicy

        return CustomerValidationPolicy
    if name == "CelidoneError":
        from celidone.exceptions import CelidoneError

        return CelidoneError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CustomerRegistry",
    "StatisticsAggregator",
    "CustomerValidationPolicy",
    "CelidoneError",
]
__version__ = "0.1.0"
