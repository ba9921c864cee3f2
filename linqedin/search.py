"""Search criteria for finding users."""

from __future__ import annotations

from dataclasses import astuple, dataclass


@dataclass
class SearchQuery:
    """Search criteria; an empty field matches anything."""

    username: str = ""
    name: str = ""
    surname: str = ""
    birth_place: str = ""
    residence: str = ""
    diploma: str = ""
    degree: str = ""
    company: str = ""
    title: str = ""

    def is_empty(self) -> bool:
        """True when no criterion is set."""
        return not any(astuple(self))