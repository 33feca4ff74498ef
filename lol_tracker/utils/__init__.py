"""Shared helpers."""

from .statistics import safe_divide, round_half_up, percentage, kda_ratio

__all__ = ["safe_divide", "round_half_up", "percentage", "kda_ratio"]
