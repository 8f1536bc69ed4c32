"""Data validators for Dutch identifiers."""

import re


def validate_bsn(bsn: str) -> bool:
    """
    Validate a Dutch BSN (burgerservicenummer) with the eleven-check.

    The first eight digits are weighted 9 down to 2, the last digit is
    subtracted. The number is valid when the result is divisible by 11.

    Args:
        bsn: BSN string, exactly 9 characters

    Returns:
        True if valid, False otherwise
    """
    if not bsn or len(bsn) != 9:
        return False

    if not (bsn.isascii() and bsn.isdigit()):
        return False

    checksum = sum(int(bsn[i]) * (9 - i) for i in range(8)) - int(bsn[8])

    return checksum % 11 == 0


def validate_iban(iban: str) -> bool:
    """
    Validate a Dutch IBAN (NL + 2 check digits + 4 letter bank code + 10 digits).

    Args:
        iban: IBAN string (spaces are ignored, case-insensitive)

    Returns:
        True if the format matches and the MOD-97 check passes
    """
    iban = re.sub(r"\s", "", iban).upper()

    if not re.fullmatch(r"NL\d{2}[A-Z]{4}\d{10}", iban):
        return False

    # Move country code and check digits to the end, letters become 10..35
    rearranged = iban[4:] + iban[:4]
    numeric = "".join(str(int(c, 36)) for c in rearranged)

    return int(numeric) % 97 == 1


def validate_postal_code(postal_code: str) -> bool:
    """Validate a Dutch postal code (1234 AB, space optional)."""
    return re.fullmatch(r"\d{4}\s?[A-Za-z]{2}", postal_code) is not None


def validate_phone(phone: str) -> bool:
    """Validate a Dutch phone number (+31, 0031 or 0 prefix)."""
    phone = re.sub(r"[\s-]", "", phone)
    return re.fullmatch(r"(\+31|0031|0)[1-9]\d{8}", phone) is not None


def format_postal_code(postal_code: str) -> str:
    """Format postal code as 1234 AB."""
    cleaned = re.sub(r"\s", "", postal_code).upper()
    if len(cleaned) != 6:
        return postal_code
    return f"{cleaned[:4]} {cleaned[4:]}"


def mask_bsn(bsn: str) -> str:
    """Mask BSN for display, keeping the last four digits."""
    if not bsn or len(bsn) != 9:
        return "*********"
    return f"*****{bsn[5:]}"
