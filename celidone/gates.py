"""
Celidone Gates - business rules checked before a customer is persisted.

G1: EmailUniqueness - non-empty email cannot exist in another Customer
G2: OrganizationIdUniqueness - organization id of an ORGANIZATION cannot exist
    in another Customer

Rules run in order and the first failure wins. Structural field checks
(required name, lengths, CEP pattern, UF length, id check digits) happen at
the data-entry boundary (celidone.forms), not here.
"""

import logging
from dataclasses import dataclass

from celidone.exceptions import CustomerValidationError
from celidone.models import PersonType
from celidone.protocols import CustomerRepository

logger = logging.getLogger(__name__)


class GateError(CustomerValidationError):
    """Gate validation error."""

    def __init__(self, gate_name: str, code: str, message: str, **details):
        self.gate_name = gate_name
        self.details = details
        super().__init__(code, message, **details)

    def __str__(self):
        return f"[{self.gate_name}] {self.message}"


@dataclass
class GateResult:
    """Result of a gate check."""

    passed: bool
    gate_name: str
    message: str = ""


class CustomerValidationPolicy:
    """
    Uniqueness gates for create/update.

    Args:
        repository: CustomerRepository used for read-only existence queries

    Usage:
        policy = CustomerValidationPolicy(repository)
        policy.validate(candidate)                  # create
        policy.validate(candidate, existing_id=7)   # update of customer 7
    """

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def validate(self, candidate, existing_id: int | None = None) -> GateResult:
        """
        Run every gate against ``candidate``.

        Args:
            candidate: Object exposing email, person_type and organization_id
            existing_id: Id of the customer being updated (excluded from checks)

        Raises:
            GateError: On the first failing gate
        """
        self.email_uniqueness(candidate.email, exclude_id=existing_id)
        self.organization_id_uniqueness(
            candidate.person_type,
            candidate.organization_id,
            exclude_id=existing_id,
        )
        return GateResult(True, "CustomerValidationPolicy")

    # =========================================================================
    # G1: Email Uniqueness
    # =========================================================================

    def email_uniqueness(
        self,
        email: str | None,
        exclude_id: int | None = None,
    ) -> GateResult:
        """
        G1: a non-empty email cannot belong to another customer.

        Raises:
            GateError: DUPLICATE_EMAIL
        """
        if not email:
            return GateResult(True, "G1_EmailUniqueness", "No email (skipped)")

        if self.repository.exists_by_email(email, exclude_id=exclude_id):
            logger.warning("G1_EmailUniqueness failed for %s", email)
            raise GateError(
                "G1_EmailUniqueness",
                "DUPLICATE_EMAIL",
                f"Email already registered: {email}",
                email=email,
            )

        return GateResult(True, "G1_EmailUniqueness")

    def check_email_uniqueness(self, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            self.email_uniqueness(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G2: Organization Id Uniqueness
    # =========================================================================

    def organization_id_uniqueness(
        self,
        person_type: str,
        organization_id: str | None,
        exclude_id: int | None = None,
    ) -> GateResult:
        """
        G2: an ORGANIZATION's organization id cannot belong to another customer.

        Individuals are not checked, even if they carry a legacy organization id.

        Raises:
            GateError: DUPLICATE_ORGANIZATION_ID
        """
        if person_type != PersonType.ORGANIZATION or not organization_id:
            return GateResult(True, "G2_OrganizationIdUniqueness", "Not applicable")

        if self.repository.exists_by_organization_id(
            organization_id, exclude_id=exclude_id
        ):
            logger.warning("G2_OrganizationIdUniqueness failed for %s", organization_id)
            raise GateError(
                "G2_OrganizationIdUniqueness",
                "DUPLICATE_ORGANIZATION_ID",
                f"Organization id already registered: {organization_id}",
                organization_id=organization_id,
            )

        return GateResult(True, "G2_OrganizationIdUniqueness")

    def check_organization_id_uniqueness(self, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            self.organization_id_uniqueness(*args, **kwargs)
            return True
        except GateError:
            return False
