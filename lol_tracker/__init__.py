"""LoL Tracker: match-history client for the League of Legends backend API."""

__version__ = "0.1.0"
