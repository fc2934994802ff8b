"""Person Name Normalization: trimming and blank checks applied before any comparison.

Invariants:
    - Names are stored exactly as trimmed; case is preserved
    - A name that is empty after trimming is rejected with ValidationError
"""

from stargate.core.errors import ValidationError


def normalize_name(value: str, field: str = "name") -> str:
    """Trim surrounding whitespace. Raises ValidationError if nothing remains."""
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be empty or whitespace", field)
    return trimmed


def is_same_name(left: str, right: str) -> bool:
    """Ordinal comparison used for the rename no-op check."""
    return left == right
