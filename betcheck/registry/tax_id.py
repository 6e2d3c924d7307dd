import re

# Values upstream serializers leave behind for a missing tax ID
PLACEHOLDERS = {"", "undefined", "null"}


def clean_tax_id(value) -> str:
    return str(value or "").strip()


def is_usable_tax_id(value) -> bool:
    return clean_tax_id(value) not in PLACEHOLDERS


def format_tax_id(value) -> str:
    """Apply the 00.000.000/0000-00 CNPJ mask when the value has 14 digits."""
    if not value:
        return ""
    digits = re.sub(r"\D", "", str(value))
    if len(digits) != 14:
        return digits
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
