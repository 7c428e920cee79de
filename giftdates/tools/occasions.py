"""MCP tools for resolving occasion dates."""

import logging
from datetime import date

from fastmcp import FastMCP

from giftdates.config import get_settings
from giftdates.dates import next_occurrence as compute_next_occurrence
from giftdates.dates import resolve_occasion_date as compute_occasion_date
from giftdates.dates import primitives, supported_occasion_types
from giftdates.dates.resolver import normalize_occasion_type
from giftdates.models.occasion import Occasion
from giftdates.tools.error_messages import safe_tool_wrapper
from giftdates.tools.occasion_utils import (
    convert_holidays_to_occasions,
    format_occasion_display,
    format_occasion_type,
    get_next_occasion,
    parse_iso_date,
)

logger = logging.getLogger(__name__)

_ASK_USER = "Ask the user for the date (YYYY-MM-DD)."


def _today() -> date:
    """Today in the configured zone (``TIMEZONE``), or the host's local date."""
    return primitives.today(get_settings().timezone)


async def _resolve(occasion_type: str, year: int | None) -> str:
    resolved = compute_occasion_date(occasion_type, year, today=_today())
    label = format_occasion_type(normalize_occasion_type(occasion_type))
    if resolved is None:
        return f"No fixed date is known for '{occasion_type}'. {_ASK_USER}"
    return f"{label}: {resolved}"


async def _next(value: str) -> str:
    result = compute_next_occurrence(value, today=_today())
    if len(result) != 10 or parse_iso_date(result) is None:
        return f"Could not read '{value}' as a date. Use YYYY-MM-DD or MM-DD."
    return f"Next occurrence: {result}"


async def _holidays(holidays: list[str]) -> str:
    occasions = convert_holidays_to_occasions(holidays, today=_today())
    known = {occ.occasion_type for occ in occasions}
    unknown = [h for h in holidays if normalize_occasion_type(h) not in known]

    lines = [f"- {occ.occasion_type}: {occ.date}" for occ in occasions]
    if unknown:
        lines.append(f"Needs a date from the user: {', '.join(unknown)}")
    if not lines:
        return "No holidays given."
    return "\n".join(lines)


async def _upcoming(occasions: list[dict]) -> str:
    records = [Occasion.model_validate(o) for o in occasions]
    upcoming = get_next_occasion(records, today=_today())
    if upcoming is None:
        return "No dated occasions yet."
    return f"Next up: {format_occasion_display(upcoming)}"


def register_occasion_tools(mcp: FastMCP) -> None:
    """Register occasion date tools on the MCP server."""

    @mcp.tool
    async def resolve_occasion_date(occasion_type: str, year: int | None = None) -> str:
        """Find the date of a holiday or occasion.

        Works for fixed holidays (Christmas, Halloween), floating ones
        (Thanksgiving, Mother's Day), Easter, equinoxes/solstices and lunar
        festivals (Diwali, Holi, Hanukkah, Passover).

        Args:
            occasion_type: Occasion name, e.g. "Valentine's Day" or "diwali".
            year: Specific year. Omit to get the next upcoming date.

        Returns:
            The date as YYYY-MM-DD, or a note that the user must supply it.
        """
        return await safe_tool_wrapper(
            _resolve, occasion_type, year, context={"occasion": occasion_type}
        )

    @mcp.tool
    async def next_occurrence(date: str) -> str:
        """Get the next yearly occurrence of a birthday or anniversary.

        Args:
            date: "YYYY-MM-DD" (year ignored) or "MM-DD".

        Returns:
            The next occurrence on or after today.
        """
        return await safe_tool_wrapper(_next, date, context={"occasion": date})

    @mcp.tool
    async def holidays_to_occasions(holidays: list[str]) -> str:
        """Convert holiday names from a conversation into dated occasions.

        Args:
            holidays: Names such as ["Christmas", "Mother's Day"].

        Returns:
            One line per dated occasion, plus any names that need a user date.
        """
        return await safe_tool_wrapper(_holidays, holidays)

    @mcp.tool
    async def next_upcoming_occasion(occasions: list[dict]) -> str:
        """Pick the next upcoming occasion from a recipient's list.

        Args:
            occasions: Records like {"occasion_type": "birthday", "date": "2026-03-14"}.

        Returns:
            The next occasion, formatted for display.
        """
        return await safe_tool_wrapper(_upcoming, occasions)

    @mcp.tool
    async def list_supported_occasions() -> str:
        """List every occasion name that has a computable date.

        Returns:
            Comma-separated occasion keys.
        """
        return ", ".join(supported_occasion_types())
