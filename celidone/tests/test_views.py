"""Tests for the customer JSON endpoints."""

import json
import logging
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from celidone.models import Customer
from celidone.signals import customer_created, customer_deleted, customer_updated

pytestmark = pytest.mark.django_db

BASE = "/api/clientes/"


@pytest.fixture
def received():
    """Collect every celidone signal sent during the test."""
    events = []

    def receiver(sender, topic, payload, **kwargs):
        events.append((topic, payload))

    signals = (customer_created, customer_updated, customer_deleted)
    for signal in signals:
        signal.connect(receiver, weak=False)
    yield events
    for signal in signals:
        signal.disconnect(receiver)


def post_json(client, url, data):
    return client.post(url, data=json.dumps(data), content_type="application/json")


def put_json(client, url, data):
    return client.put(url, data=json.dumps(data), content_type="application/json")


PAYLOAD = {
    "name": "João Souza",
    "person_type": "individual",
    "individual_id": "529.982.247-25",
    "birth_date": "1985-03-20",
    "postal_code": "01310-100",
    "street": "Avenida Paulista",
    "number": "1000",
    "city": "São Paulo",
    "district": "Bela Vista",
    "state_code": "sp",
    "mobile": "11988887777",
    "email": "joao@example.com",
}


class TestCreateEndpoint:
    def test_create(self, client, received):
        response = post_json(client, BASE, PAYLOAD)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        assert body["individual_id"] == "52998224725"
        assert body["state_code"] == "SP"
        assert body["birth_date"] == "1985-03-20"
        assert body["registered_at"] == body["updated_at"]
        assert received == [("customer-created", body)]

    def test_invalid_fields(self, client, received):
        data = dict(
            PAYLOAD,
            name="",
            postal_code="01310100",
            state_code="S",
            email="not-an-email",
            individual_id="111.111.111-11",
        )
        response = post_json(client, BASE, data)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "INVALID_DATA"
        assert set(body["fields"]) == {
            "name",
            "postal_code",
            "state_code",
            "email",
            "individual_id",
        }
        assert received == []

    def test_invalid_organization_id(self, client):
        data = {
            "name": "Empresa",
            "person_type": "organization",
            "organization_id": "11.444.777/0001-62",
        }
        response = post_json(client, BASE, data)

        assert response.status_code == 400
        assert "organization_id" in response.json()["fields"]

    def test_duplicate_email(self, client):
        post_json(client, BASE, PAYLOAD)
        response = post_json(client, BASE, dict(PAYLOAD, individual_id=""))

        assert response.status_code == 400
        assert response.json()["error"] == "DUPLICATE_EMAIL"

    def test_malformed_json(self, client):
        response = client.post(BASE, data="{not json", content_type="application/json")

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_DATA"


class TestDetailEndpoints:
    @pytest.fixture
    def created(self, client):
        return post_json(client, BASE, PAYLOAD).json()

    def test_get(self, client, created):
        response = client.get(f"{BASE}{created['id']}/")

        assert response.status_code == 200
        assert response.json()["email"] == "joao@example.com"

    def test_get_missing(self, client):
        response = client.get(f"{BASE}999/")

        assert response.status_code == 404
        assert response.json()["error"] == "CUSTOMER_NOT_FOUND"

    def test_put(self, client, created, received):
        response = put_json(
            client, f"{BASE}{created['id']}/", dict(PAYLOAD, city="Guarulhos")
        )

        assert response.status_code == 200
        body = response.json()
        assert body["city"] == "Guarulhos"
        assert body["registered_at"] == created["registered_at"]
        assert received[-1][0] == "customer-updated"

    def test_put_missing(self, client):
        response = put_json(client, f"{BASE}999/", PAYLOAD)
        assert response.status_code == 404

    def test_delete(self, client, created, received):
        response = client.delete(f"{BASE}{created['id']}/")

        assert response.status_code == 204
        assert not Customer.objects.filter(pk=created["id"]).exists()
        assert received[-1] == ("customer-deleted", created["id"])

    def test_delete_missing(self, client, received):
        response = client.delete(f"{BASE}999/")

        assert response.status_code == 404
        assert received == []


class TestStorageFailures:
    def test_create_storage_error_is_generic_500(self, client, received, caplog):
        with patch.object(Customer, "save", side_effect=DatabaseError("disk full")):
            with caplog.at_level(logging.ERROR, logger="celidone.views"):
                response = post_json(client, BASE, PAYLOAD)

        assert response.status_code == 500
        assert response.json()["error"] == "STORAGE_ERROR"
        assert "disk full" not in response.content.decode()
        assert received == []
        assert not Customer.objects.exists()
        record = next(r for r in caplog.records if r.name == "celidone.views")
        assert record.exc_info is not None

    def test_update_storage_error_is_generic_500(self, client, received):
        created = post_json(client, BASE, PAYLOAD).json()
        received.clear()

        with patch.object(Customer, "save", side_effect=DatabaseError("disk full")):
            response = put_json(
                client, f"{BASE}{created['id']}/", dict(PAYLOAD, city="Guarulhos")
            )

        assert response.status_code == 500
        assert response.json()["error"] == "STORAGE_ERROR"
        assert "disk full" not in response.content.decode()
        assert received == []
        assert Customer.objects.get(pk=created["id"]).city == "São Paulo"


class TestReadEndpoints:
    @pytest.fixture
    def customers(self, client):
        post_json(client, BASE, PAYLOAD)
        post_json(
            client,
            BASE,
            {
                "name": "Loja Azul Ltda",
                "person_type": "organization",
                "organization_id": "11.444.777/0001-61",
                "city": "Santos",
                "email": "vendas@lojaazul.com.br",
            },
        )

    def test_list(self, client, customers):
        response = client.get(BASE, {"page": 1, "size": 1})

        body = response.json()
        assert response.status_code == 200
        assert body["total"] == 2
        assert body["total_pages"] == 2
        assert len(body["results"]) == 1
        assert body["has_next"] is True

    def test_search(self, client, customers):
        response = client.get(f"{BASE}search/", {"term": "AZUL"})

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Loja Azul Ltda"]

    def test_recent(self, client, customers):
        response = client.get(f"{BASE}recent/", {"limit": 1})

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_recent_negative_limit(self, client, customers):
        response = client.get(f"{BASE}recent/", {"limit": -1})

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_stats(self, client, customers):
        response = client.get(f"{BASE}stats/")

        body = response.json()
        assert response.status_code == 200
        assert body["total"] == 2
        assert body["individuals"] == 1
        assert body["organizations"] == 1
        assert body["active"] == 2
        assert body["inactive"] == 0
        assert body["top_city"] == "Santos"


class TestHealthEndpoint:
    def test_health(self, client, django_assert_num_queries):
        with django_assert_num_queries(0):
            response = client.get(f"{BASE}health/")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "OK"
        assert isinstance(body["timestamp"], int)
