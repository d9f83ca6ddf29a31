from django.urls import path

from .views import (
    CustomerCollectionView,
    CustomerDetailView,
    CustomerRecentView,
    CustomerSearchView,
    CustomerStatsView,
    HealthView,
)

app_name = "celidone"

urlpatterns = [
    path("", CustomerCollectionView.as_view(), name="customer-list"),
    path("<int:customer_id>/", CustomerDetailView.as_view(), name="customer-detail"),
    path("search/", CustomerSearchView.as_view(), name="customer-search"),
    path("recent/", CustomerRecentView.as_view(), name="customer-recent"),
    path("stats/", CustomerStatsView.as_view(), name="customer-stats"),
    path("health/", HealthView.as_view(), name="health"),
]
