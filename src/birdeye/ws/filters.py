"""
Filter Expression Builder
=========================

Renders subscription filters into the feed's query grammar.

Grammar:
    atom   := field=value
    group  := "(" atom (" AND " atom)* ")"
    query  := group (" OR " group)*

Absent (None) values contribute no atom, and a group without atoms
renders as "" rather than "()". Values are emitted verbatim, without
quoting.

Example:
    >>> render_group([("address", "So111"), ("chartType", "1m")])
    '(address=So111 AND chartType=1m)'
    >>> join_or(["(address=a)", "", "(address=b)"])
    '(address=a) OR (address=b)'
"""

from typing import Any, Iterable

AND = " AND "
OR = " OR "

# (field, value) pair; value None means "field not set"
Atom = tuple[str, Any]


def format_value(value: Any) -> str:
    """
    Format one atom value.

    Booleans use the JSON spelling (true/false); everything else,
    StrEnum members included, uses str().
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_atom(field: str, value: Any) -> str:
    return f"{field}={format_value(value)}"


def render_group(atoms: Iterable[Atom]) -> str:
    """
    Render one request's atoms as a parenthesized AND group.

    Args:
        atoms: (field, value) pairs in emission order

    Returns:
        "(k1=v1 AND k2=v2 ...)", or "" when every value is None
    """
    parts = [render_atom(field, value) for field, value in atoms if value is not None]
    if not parts:
        return ""
    return f"({AND.join(parts)})"


def join_or(groups: Iterable[str]) -> str:
    """Join rendered groups with OR, skipping empty ones."""
    return OR.join(group for group in groups if group)
