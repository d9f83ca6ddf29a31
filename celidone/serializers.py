"""Customer -> plain dict conversion (HTTP responses and broadcast payloads)."""

from celidone.models import Customer

CUSTOMER_FIELDS = (
    "name",
    "person_type",
    "individual_id",
    "organization_id",
    "birth_date",
    "postal_code",
    "street",
    "number",
    "city",
    "district",
    "complement",
    "state_code",
    "landline",
    "mobile",
    "email",
)


def _iso(value):
    return value.isoformat() if hasattr(value, "isoformat") else value


def customer_to_dict(customer: Customer) -> dict:
    """Full JSON-friendly representation of a customer."""
    data = {"id": customer.pk}
    for field in CUSTOMER_FIELDS:
        data[field] = getattr(customer, field)
    data["birth_date"] = _iso(customer.birth_date)
    data["registered_at"] = _iso(customer.registered_at)
    data["updated_at"] = _iso(customer.updated_at)
    return data


def page_to_dict(page) -> dict:
    """Serialize a django.core.paginator.Page of customers."""
    return {
        "results": [customer_to_dict(c) for c in page.object_list],
        "page": page.number,
        "size": page.paginator.per_page,
        "total": page.paginator.count,
        "total_pages": page.paginator.num_pages,
        "has_next": page.has_next(),
        "has_previous": page.has_previous(),
    }
