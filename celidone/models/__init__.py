"""Celidone models."""

from celidone.models.customer import Customer, PersonType

__all__ = [
    "Customer",
    "PersonType",
]
