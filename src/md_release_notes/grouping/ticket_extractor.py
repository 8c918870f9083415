"""
Issue-tracker ticket extraction.

Tickets are identifiers such as ``ABC-123``: one or more uppercase ASCII
letters, a hyphen, and one or more digits. They are looked for in commit
summaries and in the name of the branch a commit came from.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Pattern, Union

TICKET_PATTERN = re.compile(r"[A-Z]+-\d+")


def extract_tickets(
    text: Optional[str],
    pattern: Union[str, Pattern[str]] = TICKET_PATTERN,
) -> List[str]:
    """Return the distinct ticket identifiers found in ``text``.

    Parameters
    ----------
    text : Optional[str]
        Free text to scan. ``None`` and empty strings yield no tickets.
    pattern : str or Pattern
        The ticket pattern, :data:`TICKET_PATTERN` by default.

    Returns
    -------
    List[str]
        Matches in first-seen order with duplicates removed. The order
        carries no meaning; treat the result as a set.
    """
    if not text:
        return []
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return merge_tickets(match.group(0) for match in regex.finditer(text))


def merge_tickets(*sources: Iterable[str]) -> List[str]:
    """Union several ticket collections, dropping duplicates."""
    merged = {}
    for source in sources:
        for ticket in source:
            merged.setdefault(ticket, None)
    return list(merged)
