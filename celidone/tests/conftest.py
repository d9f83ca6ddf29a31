"""Pytest fixtures for Celidone tests."""

from datetime import date, datetime, timedelta

import pytest
from django.utils import timezone

from celidone.adapters.repository import DjangoCustomerRepository
from celidone.gates import CustomerValidationPolicy
from celidone.models import PersonType
from celidone.services import CustomerRegistry, StatisticsAggregator

VALID_INDIVIDUAL_ID = "529.982.247-25"
VALID_ORGANIZATION_ID = "11.444.777/0001-61"


class RecordingNotifier:
    """Notifier that keeps every broadcast in memory."""

    def __init__(self):
        self.events = []

    def broadcast(self, topic, payload):
        self.events.append((topic, payload))

    @property
    def topics(self):
        return [topic for topic, _ in self.events]


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)
        return self.now


def local_dt(*args) -> datetime:
    """Aware datetime in the configured TIME_ZONE."""
    return timezone.make_aware(datetime(*args))


@pytest.fixture
def clock():
    return FrozenClock(local_dt(2024, 5, 15, 12, 0))


@pytest.fixture
def repository(db):
    return DjangoCustomerRepository()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def policy(repository):
    return CustomerValidationPolicy(repository)


@pytest.fixture
def registry(repository, notifier, clock):
    return CustomerRegistry(repository, notifier, clock=clock)


@pytest.fixture
def aggregator(repository, clock):
    return StatisticsAggregator(repository, clock=clock)


@pytest.fixture
def customer(registry):
    """An individual customer."""
    return registry.create(
        name="Maria Silva",
        person_type=PersonType.INDIVIDUAL,
        individual_id=VALID_INDIVIDUAL_ID,
        birth_date=date(1990, 5, 10),
        postal_code="13010-000",
        street="Rua Barão de Jaguara",
        number="100",
        city="Campinas",
        district="Centro",
        state_code="SP",
        mobile="19999990000",
        email="maria@example.com",
    )


@pytest.fixture
def organization(registry):
    """An organization customer."""
    return registry.create(
        name="Padaria Central Ltda",
        person_type=PersonType.ORGANIZATION,
        organization_id=VALID_ORGANIZATION_ID,
        city="Santos",
        state_code="SP",
        email="contato@padariacentral.com.br",
    )
