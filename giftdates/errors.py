"""Exception hierarchy for contract violations.

An unrecognized occasion is *not* an error: the resolver returns ``None``
for it. These exceptions are reserved for callers passing the wrong types.
"""


class GiftDatesError(Exception):
    """Base class for all giftdates errors."""


class InvalidOccasionInputError(GiftDatesError, TypeError):
    """An argument had the wrong type (e.g. a non-string occasion label)."""


def require_str(value: object, name: str) -> str:
    """Return *value* unchanged if it is a ``str``, else raise.

    Raises:
        InvalidOccasionInputError: If *value* is not a string.
    """
    if not isinstance(value, str):
        raise InvalidOccasionInputError(
            f"{name} must be a str, got {type(value).__name__}"
        )
    return value
