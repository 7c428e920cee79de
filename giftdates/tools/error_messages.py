"""User-friendly error messages and safe tool wrapper."""

import logging
from zoneinfo import ZoneInfoNotFoundError

from pydantic import ValidationError

from giftdates.errors import GiftDatesError, InvalidOccasionInputError

logger = logging.getLogger(__name__)


def get_user_message(error: Exception, context: dict | None = None) -> str:
    """Map an exception to a user-friendly message.

    Args:
        error: The exception to translate.
        context: Optional dict with extra info (e.g. {"occasion": "Diwali"}).

    Returns:
        A human-readable error message.
    """
    occasion = (context or {}).get("occasion", "this occasion")

    if isinstance(error, InvalidOccasionInputError):
        return f"Could not read the details for {occasion}. {error}"
    if isinstance(error, ValidationError):
        return (
            f"Some of the occasion data for {occasion} is malformed. "
            "Dates must look like YYYY-MM-DD."
        )
    if isinstance(error, ZoneInfoNotFoundError):
        return (
            "The configured time zone is not recognised. "
            "Set TIMEZONE to an IANA name such as 'America/New_York'."
        )
    if isinstance(error, GiftDatesError):
        return f"Could not work out the date for {occasion}. {error}"
    return "Something went wrong. Please try again or enter the date manually."


async def safe_tool_wrapper(
    func,  # type: ignore[no-untyped-def]
    *args: object,
    context: dict | None = None,
    **kwargs: object,
) -> str:
    """Call an async function, catching errors and returning friendly messages.

    Args:
        func: Async callable to invoke.
        *args: Positional arguments for *func*.
        context: Optional context dict for error messages.
        **kwargs: Keyword arguments for *func*.

    Returns:
        The function's return value on success, or a user-friendly error string.
    """
    try:
        return await func(*args, **kwargs)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Tool error in %s", func.__name__)
        return get_user_message(exc, context)
