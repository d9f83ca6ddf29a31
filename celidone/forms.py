"""Data-entry validation for customer payloads.

Structural checks only: required name, lengths, CEP pattern, UF length, email
syntax and CPF/CNPJ check digits. Uniqueness is checked by celidone.gates.
"""

from django import forms
from django.utils.translation import gettext_lazy as _

from celidone.exceptions import CustomerValidationError
from celidone.identifiers import (
    only_digits,
    validate_individual_id,
    validate_organization_id,
)
from celidone.models import PersonType
from celidone.models.customer import postal_code_validator


class CustomerForm(forms.Form):
    name = forms.CharField(max_length=100)
    person_type = forms.ChoiceField(choices=PersonType.choices, required=False)
    # Formatted input accepted ("529.982.247-25", "11.444.777/0001-61")
    individual_id = forms.CharField(max_length=14, required=False)
    organization_id = forms.CharField(max_length=18, required=False)
    birth_date = forms.DateField(required=False)
    postal_code = forms.CharField(
        max_length=9, required=False, validators=[postal_code_validator]
    )
    street = forms.CharField(max_length=200, required=False)
    number = forms.CharField(max_length=10, required=False)
    city = forms.CharField(max_length=100, required=False)
    district = forms.CharField(max_length=100, required=False)
    complement = forms.CharField(max_length=100, required=False)
    state_code = forms.CharField(min_length=2, max_length=2, required=False)
    landline = forms.CharField(max_length=15, required=False)
    mobile = forms.CharField(max_length=15, required=False)
    email = forms.EmailField(max_length=100, required=False)

    def clean_person_type(self):
        return self.cleaned_data.get("person_type") or PersonType.INDIVIDUAL

    def clean_individual_id(self):
        value = self.cleaned_data.get("individual_id", "")
        if value and not validate_individual_id(value):
            raise forms.ValidationError(_("CPF inválido."))
        return only_digits(value)

    def clean_organization_id(self):
        value = self.cleaned_data.get("organization_id", "")
        if value and not validate_organization_id(value):
            raise forms.ValidationError(_("CNPJ inválido."))
        return only_digits(value)

    def clean_state_code(self):
        return self.cleaned_data.get("state_code", "").upper()


def clean_customer_data(data: dict) -> dict:
    """
    Validate a raw payload and return cleaned fields.

    Raises:
        CustomerValidationError: INVALID_DATA with per-field messages
    """
    form = CustomerForm(data)
    if not form.is_valid():
        fields = {
            name: [str(message) for message in errors]
            for name, errors in form.errors.items()
        }
        raise CustomerValidationError("INVALID_DATA", fields=fields)
    return form.cleaned_data
