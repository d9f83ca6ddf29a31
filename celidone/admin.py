"""Celidone admin.

Read-only: every write must go through CustomerRegistry so that validation,
timestamps and broadcasts are applied.
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from celidone.identifiers import format_individual_id, format_organization_id
from celidone.models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "name",
        "person_type",
        "document_display",
        "email",
        "city",
        "state_code",
        "registered_at",
    ]
    list_filter = ["person_type", "state_code"]
    search_fields = ["name", "email", "individual_id", "organization_id", "city"]
    ordering = ["-registered_at"]
    date_hierarchy = "registered_at"

    fieldsets = [
        (
            _("Identificação"),
            {
                "fields": [
                    "name",
                    "person_type",
                    "individual_id",
                    "organization_id",
                    "birth_date",
                ]
            },
        ),
        (
            _("Endereço"),
            {
                "fields": [
                    "postal_code",
                    "street",
                    "number",
                    "complement",
                    "district",
                    "city",
                    "state_code",
                ]
            },
        ),
        (_("Contato"), {"fields": ["email", "landline", "mobile"]}),
        (
            _("Sistema"),
            {"fields": ["registered_at", "updated_at"], "classes": ["collapse"]},
        ),
    ]

    def document_display(self, obj):
        if obj.is_organization:
            return format_organization_id(obj.organization_id)
        return format_individual_id(obj.individual_id)

    document_display.short_description = _("Documento")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
