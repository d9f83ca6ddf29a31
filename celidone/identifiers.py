"""
National identifier validation (CPF / CNPJ).

Individual id (CPF): 11 digits, two mod-11 check digits.
Organization id (CNPJ): 14 digits, two mod-11 check digits.

All functions are pure. Input may carry any punctuation
("529.982.247-25", "11.444.777/0001-61"); non-digits are stripped first.
"""

INDIVIDUAL_ID_LENGTH = 11
ORGANIZATION_ID_LENGTH = 14

ORGANIZATION_WEIGHTS_FIRST = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
ORGANIZATION_WEIGHTS_SECOND = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def only_digits(raw: str | None) -> str:
    """Strip every non-digit character."""
    if not raw:
        return ""
    return "".join(ch for ch in str(raw) if ch in "0123456789")


def _is_degenerate(digits: str) -> bool:
    return len(set(digits)) == 1


# =============================================================================
# Individual id (CPF)
# =============================================================================


def _individual_digit(digits: str) -> int:
    # Weights run from len+1 down to 2 (10..2 for the first, 11..2 for the second)
    top = len(digits) + 1
    total = sum(int(d) * (top - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder >= 10 else remainder


def individual_check_digits(base: str) -> str:
    """Return the two check digits for a 9-digit individual id base."""
    base = only_digits(base)
    if len(base) != 9:
        raise ValueError("Individual id base must have 9 digits.")
    first = _individual_digit(base)
    second = _individual_digit(base + str(first))
    return f"{first}{second}"


def validate_individual_id(raw: str | None) -> bool:
    """True if ``raw`` is a well-formed individual id with valid check digits."""
    digits = only_digits(raw)
    if len(digits) != INDIVIDUAL_ID_LENGTH or _is_degenerate(digits):
        return False

    if _individual_digit(digits[:9]) != int(digits[9]):
        return False
    return _individual_digit(digits[:10]) == int(digits[10])


# =============================================================================
# Organization id (CNPJ)
# =============================================================================


def _organization_digit(digits: str, weights: tuple[int, ...]) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def organization_check_digits(base: str) -> str:
    """Return the two check digits for a 12-digit organization id base."""
    base = only_digits(base)
    if len(base) != 12:
        raise ValueError("Organization id base must have 12 digits.")
    first = _organization_digit(base, ORGANIZATION_WEIGHTS_FIRST)
    second = _organization_digit(base + str(first), ORGANIZATION_WEIGHTS_SECOND)
    return f"{first}{second}"


def validate_organization_id(raw: str | None) -> bool:
    """True if ``raw`` is a well-formed organization id with valid check digits."""
    digits = only_digits(raw)
    if len(digits) != ORGANIZATION_ID_LENGTH or _is_degenerate(digits):
        return False

    if _organization_digit(digits[:12], ORGANIZATION_WEIGHTS_FIRST) != int(digits[12]):
        return False
    return _organization_digit(digits[:13], ORGANIZATION_WEIGHTS_SECOND) == int(
        digits[13]
    )


# =============================================================================
# Display
# =============================================================================


def format_individual_id(raw: str | None) -> str:
    """Format as NNN.NNN.NNN-NN (input returned unchanged if not 11 digits)."""
    digits = only_digits(raw)
    if len(digits) != INDIVIDUAL_ID_LENGTH:
        return raw or ""
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def format_organization_id(raw: str | None) -> str:
    """Format as NN.NNN.NNN/NNNN-NN (input returned unchanged if not 14 digits)."""
    digits = only_digits(raw)
    if len(digits) != ORGANIZATION_ID_LENGTH:
        return raw or ""
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
