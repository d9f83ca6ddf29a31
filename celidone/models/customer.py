"""Customer model.

Identifiers (individual_id / organization_id) are stored as digits only.
Which one is authoritative depends on person_type, but both may be filled
for legacy records.

registered_at / updated_at are written by the registry, never by clients.
"""

from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _


postal_code_validator = RegexValidator(
    regex=r"^\d{5}-\d{3}$",
    message=_("CEP deve seguir o formato 00000-000."),
)


class PersonType(models.TextChoices):
    INDIVIDUAL = "individual", _("Pessoa Física")
    ORGANIZATION = "organization", _("Pessoa Jurídica")


class Customer(models.Model):
    """Registered customer (aggregate root)."""

    name = models.CharField(_("nome"), max_length=100)
    person_type = models.CharField(
        _("tipo de pessoa"),
        max_length=20,
        choices=PersonType.choices,
        default=PersonType.INDIVIDUAL,
        db_index=True,
    )

    # Documents
    individual_id = models.CharField(
        _("CPF"),
        max_length=11,
        blank=True,
        db_index=True,
        help_text=_("CPF (apenas números)"),
    )
    organization_id = models.CharField(
        _("CNPJ"),
        max_length=14,
        blank=True,
        db_index=True,
        help_text=_("CNPJ (apenas números)"),
    )
    birth_date = models.DateField(_("data de nascimento"), null=True, blank=True)

    # Address
    postal_code = models.CharField(
        _("CEP"),
        max_length=9,
        blank=True,
        validators=[postal_code_validator],
    )
    street = models.CharField(_("endereço"), max_length=200, blank=True)
    number = models.CharField(_("número"), max_length=10, blank=True)
    city = models.CharField(_("cidade"), max_length=100, blank=True, db_index=True)
    district = models.CharField(_("bairro"), max_length=100, blank=True)
    complement = models.CharField(_("complemento"), max_length=100, blank=True)
    state_code = models.CharField(
        _("UF"),
        max_length=2,
        blank=True,
        validators=[MinLengthValidator(2)],
    )

    # Contact
    landline = models.CharField(_("telefone fixo"), max_length=15, blank=True)
    mobile = models.CharField(_("celular"), max_length=15, blank=True)
    email = models.EmailField(_("email"), max_length=100, blank=True, db_index=True)

    # Audit
    registered_at = models.DateTimeField(_("data de cadastro"), db_index=True)
    updated_at = models.DateTimeField(_("data de atualização"))

    class Meta:
        verbose_name = _("cliente")
        verbose_name_plural = _("clientes")
        ordering = ["name", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["email"],
                condition=~Q(email=""),
                name="celidone_customer_unique_email",
            ),
            models.UniqueConstraint(
                fields=["organization_id"],
                condition=Q(person_type="organization") & ~Q(organization_id=""),
                name="celidone_customer_unique_organization_id",
            ),
        ]

    def __str__(self):
        return f"{self.name} (#{self.pk})"

    @property
    def is_organization(self) -> bool:
        return self.person_type == PersonType.ORGANIZATION

    @property
    def document(self) -> str:
        """Authoritative identifier for the person type."""
        if self.is_organization:
            return self.organization_id
        return self.individual_id
