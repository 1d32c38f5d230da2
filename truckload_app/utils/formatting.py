"""
Display formatting for weights and dimensions.
"""

from __future__ import annotations


def format_weight(kg: float) -> str:
    """'2.35 t' from 1000 kg up, otherwise whole kg."""
    if kg >= 1000:
        return f"{kg / 1000:.2f} t"
    return f"{kg:.0f} kg"


def format_dimension(metres: float) -> str:
    """'580 mm' below one metre, otherwise metres to 2 dp."""
    if metres < 1:
        return f"{metres * 1000:.0f} mm"
    return f"{metres:.2f} m"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"
