"""
Customer JSON endpoints.

Thin boundary over CustomerRegistry / StatisticsAggregator:
    1. Parses and validates the payload (celidone.forms)
    2. Calls the registry
    3. Maps CelidoneError codes to HTTP statuses
"""

from __future__ import annotations

import json
import logging

from django.http import HttpResponse, JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from celidone.exceptions import (
    CelidoneError,
    CustomerNotFound,
    CustomerValidationError,
)
from celidone.forms import clean_customer_data
from celidone.serializers import customer_to_dict, page_to_dict
from celidone.services import build_aggregator, build_registry

logger = logging.getLogger("celidone.views")


def _error_response(exc: CelidoneError) -> JsonResponse:
    if isinstance(exc, CustomerValidationError):
        return JsonResponse(exc.as_dict(), status=400)
    if isinstance(exc, CustomerNotFound):
        return JsonResponse(exc.as_dict(), status=404)
    logger.exception("Request failed: %s", exc)
    return JsonResponse({"error": exc.code, "message": "Internal error"}, status=500)


def _parse_body(request) -> dict:
    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, ValueError):
        raise CustomerValidationError("INVALID_DATA", "Invalid JSON")
    if not isinstance(data, dict):
        raise CustomerValidationError("INVALID_DATA", "Expected a JSON object")
    return data


def _int_param(request, name: str, default: int | None) -> int | None:
    try:
        return int(request.GET.get(name, default))
    except (TypeError, ValueError):
        return default


@method_decorator(csrf_exempt, name="dispatch")
class CustomerCollectionView(View):
    """GET: paginated list. POST: create."""

    def get(self, request):
        page = _int_param(request, "page", 1)
        size = _int_param(request, "size", None)
        try:
            result = build_registry().list_page(page=page, page_size=size)
        except CelidoneError as exc:
            return _error_response(exc)
        return JsonResponse(page_to_dict(result))

    def post(self, request):
        try:
            data = clean_customer_data(_parse_body(request))
            customer = build_registry().create(**data)
        except CelidoneError as exc:
            return _error_response(exc)
        return JsonResponse(customer_to_dict(customer), status=201)


@method_decorator(csrf_exempt, name="dispatch")
class CustomerDetailView(View):
    """GET / PUT / DELETE a single customer."""

    def get(self, request, customer_id: int):
        try:
            customer = build_registry().get(customer_id)
        except CelidoneError as exc:
            return _error_response(exc)
        return JsonResponse(customer_to_dict(customer))

    def put(self, request, customer_id: int):
        try:
            data = clean_customer_data(_parse_body(request))
            customer = build_registry().update(customer_id, **data)
        except CelidoneError as exc:
            return _error_response(exc)
        return JsonResponse(customer_to_dict(customer))

    def delete(self, request, customer_id: int):
        try:
            build_registry().delete(customer_id)
        except CelidoneError as exc:
            return _error_response(exc)
        return HttpResponse(status=204)


class CustomerSearchView(View):
    """GET ?term= : name or email contains term (case-insensitive)."""

    def get(self, request):
        term = request.GET.get("term", "")
        try:
            customers = build_registry().search(term)
        except CelidoneError as exc:
            return _error_response(exc)
        return JsonResponse([customer_to_dict(c) for c in customers], safe=False)


class CustomerRecentView(View):
    """GET ?limit= : most recently registered first."""

    def get(self, request):
        limit = _int_param(request, "limit", None)
        try:
            customers = build_registry().recent(limit)
        except CelidoneError as exc:
            return _error_response(exc)
        return JsonResponse([customer_to_dict(c) for c in customers], safe=False)


class CustomerStatsView(View):
    """GET: StatsSnapshot."""

    def get(self, request):
        try:
            snapshot = build_aggregator().compute_snapshot()
        except CelidoneError as exc:
            return _error_response(exc)
        return JsonResponse(snapshot.as_dict())


class HealthView(View):
    """GET: liveness check, no database access."""

    def get(self, request):
        return JsonResponse(
            {
                "status": "OK",
                "message": "Back-end funcionando corretamente",
                "timestamp": int(timezone.now().timestamp() * 1000),
            }
        )
