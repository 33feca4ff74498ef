"""Statistical utility functions for safe calculations."""

import math


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide two numbers, returning default if denominator is zero.

    Args:
        numerator: The numerator
        denominator: The denominator
        default: Value to return if denominator is zero

    Returns:
        Result of division or default value
    """
    return numerator / denominator if denominator > 0 else default


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves upward (2.5 -> 3, 0.45 -> 0.5) instead of to even.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def percentage(part: float, whole: float) -> int:
    """Whole-number percentage of ``part`` in ``whole``; 0 when ``whole`` is 0."""
    return int(round_half_up(safe_divide(100 * part, whole)))


def kda_ratio(kills: int, deaths: int, assists: int) -> float:
    """
    Calculate KDA (Kill/Death/Assist) ratio.

    KDA = (Kills + Assists) / Deaths
    If deaths is 0, KDA = Kills + Assists

    :param kills: Kills
    :param deaths: Deaths
    :param assists: Assists
    :returns: KDA ratio as float
    """
    if deaths == 0:
        return float(kills + assists)
    return float(kills + assists) / deaths
