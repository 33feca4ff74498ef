"""Shared enums used across features.

This module provides a single source of truth for enums used in both models and schemas.
"""

from enum import Enum


class Region(str, Enum):
    """User-facing regions accepted by the backend API."""

    NA = "NA"
    EUW = "EUW"
    KR = "KR"
    JP = "JP"
    BR = "BR"
    OCE = "OCE"

    @property
    def routing(self) -> str:
        """Regional routing value used by the account and match APIs."""
        return _ROUTING[self]

    @property
    def platform(self) -> str:
        """Platform routing value used by the summoner and league APIs."""
        return _PLATFORMS[self]

    @classmethod
    def parse(cls, value: str) -> "Region":
        """Parse a region code case-insensitively.

        :raises ValueError: If the code is not a supported region
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported region: {value}") from None


_ROUTING = {
    Region.NA: "americas",
    Region.BR: "americas",
    Region.EUW: "europe",
    Region.KR: "asia",
    Region.JP: "asia",
    Region.OCE: "americas",
}

_PLATFORMS = {
    Region.NA: "na1",
    Region.EUW: "euw1",
    Region.KR: "kr",
    Region.JP: "jp1",
    Region.BR: "br1",
    Region.OCE: "oc1",
}


class Tier(str, Enum):
    """League of Legends rank tiers."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def is_apex(self) -> bool:
        """Apex tiers have no divisions."""
        return self in (Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER)


class QueueId(int, Enum):
    """Queue IDs with a dedicated display name."""

    RANKED_SOLO_DUO = 420
    RANKED_FLEX = 440
    ARAM = 450
    ARENA = 1700


class LoadStatus(str, Enum):
    """Lifecycle of a page load."""

    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"
    ERROR = "error"
