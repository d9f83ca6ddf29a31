"""Tests for management commands."""

import json
from io import StringIO

import pytest
from django.core.management import call_command

from celidone.services import build_registry

pytestmark = pytest.mark.django_db


@pytest.fixture
def two_customers(db):
    registry = build_registry()
    registry.create(name="Ana", city="Campinas")
    registry.create(name="Bia", city="Campinas", person_type="organization")


def test_celidone_stats_text(two_customers):
    out = StringIO()
    call_command("celidone_stats", stdout=out)

    output = out.getvalue()
    assert "Total: 2" in output
    assert "Top city: Campinas (2)" in output


def test_celidone_stats_json(two_customers):
    out = StringIO()
    call_command("celidone_stats", "--json", stdout=out)

    data = json.loads(out.getvalue())
    assert data["total"] == 2
    assert data["today"] == 2
    assert data["organizations"] == 1
