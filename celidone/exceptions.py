"""Celidone exceptions."""


class CelidoneError(Exception):
    """
    Structured exception for customer registry operations.

    Carries a stable ``code`` for callers and a human readable ``message``.
    Extra keyword arguments are kept in ``data``.

    Usage:
        try:
            customer = registry.get(42)
        except CelidoneError as e:
            if e.code == "CUSTOMER_NOT_FOUND":
                handle_not_found()
    """

    _default_messages: dict[str, str] = {
        "CUSTOMER_NOT_FOUND": "Customer not found",
        "DUPLICATE_EMAIL": "Email already registered",
        "DUPLICATE_ORGANIZATION_ID": "Organization id already registered",
        "INVALID_DATA": "Invalid customer data",
        "STORAGE_ERROR": "Storage operation failed",
        "NOTIFY_ERROR": "Notification broadcast failed",
    }

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        result = {"error": self.code, "message": self.message}
        if self.data:
            result.update(self.data)
        return result


class CustomerValidationError(CelidoneError):
    """Input rejected by a business rule or by boundary validation."""


class CustomerNotFound(CelidoneError):
    """Referenced customer does not exist."""

    def __init__(self, customer_id, message: str | None = None):
        super().__init__(
            "CUSTOMER_NOT_FOUND",
            message or f"Customer not found with id {customer_id}",
            customer_id=customer_id,
        )


class StorageError(CelidoneError):
    """Repository operation failed (connectivity, unchecked constraint, ...)."""

    def __init__(self, message: str | None = None, **data):
        super().__init__("STORAGE_ERROR", message, **data)


class NotifyError(CelidoneError):
    """Broadcast failed. Never propagated out of a write operation."""

    def __init__(self, topic: str, message: str | None = None):
        super().__init__("NOTIFY_ERROR", message, topic=topic)
