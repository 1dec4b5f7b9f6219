"""
Easing functions for frame animations.

All functions take t (time) in range [0.0, 1.0] and return a value in range
[0.0, 1.0]. Window moves default to quadratic ease-out: fast start, slow
settle into the target frame.

Based on standard easing equations:
- Robert Penner's Easing Functions
- https://easings.net/
"""
import math
from typing import Callable

from core.animation.types import EasingCurve


def linear(t: float) -> float:
    """Linear interpolation - no easing."""
    return t


# Quadratic easing
def quad_in(t: float) -> float:
    """Quadratic ease-in - accelerating from zero velocity."""
    return t * t


def quad_out(t: float) -> float:
    """Quadratic ease-out - decelerating to zero velocity."""
    remaining = 1 - t
    return 1 - remaining * remaining


def quad_in_out(t: float) -> float:
    """Quadratic ease-in-out - accelerating until halfway, then decelerating."""
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


# Cubic easing
def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    t -= 1
    return t * t * t + 1


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    t -= 1
    return 1 + 4 * t * t * t


def sine_in_out(t: float) -> float:
    """Sine ease-in-out - accelerating until halfway, then decelerating."""
    return -(math.cos(math.pi * t) - 1) / 2


# Easing function lookup table
EASING_FUNCTIONS: dict[EasingCurve, Callable[[float], float]] = {
    EasingCurve.LINEAR: linear,

    EasingCurve.QUAD_IN: quad_in,
    EasingCurve.QUAD_OUT: quad_out,
    EasingCurve.QUAD_IN_OUT: quad_in_out,

    EasingCurve.CUBIC_IN: cubic_in,
    EasingCurve.CUBIC_OUT: cubic_out,
    EasingCurve.CUBIC_IN_OUT: cubic_in_out,

    EasingCurve.SINE_IN_OUT: sine_in_out,
}


def get_easing_function(curve: EasingCurve) -> Callable[[float], float]:
    """
    Get the easing function for a given curve.

    Raises:
        ValueError: If curve is not found
    """
    if curve not in EASING_FUNCTIONS:
        raise ValueError(f"Unknown easing curve: {curve}")

    return EASING_FUNCTIONS[curve]


def easing_from_name(name, default: EasingCurve = EasingCurve.QUAD_OUT) -> EasingCurve:
    """Resolve a settings string such as ``"quad_out"`` to an EasingCurve."""
    if isinstance(name, EasingCurve):
        return name
    try:
        return EasingCurve(str(name).strip().lower())
    except ValueError:
        return default


def ease(t: float, curve: EasingCurve) -> float:
    """
    Apply easing function to a time value.

    Args:
        t: Time value, clamped to [0.0, 1.0]
        curve: Easing curve to apply
    """
    t = max(0.0, min(1.0, t))

    easing_fn = get_easing_function(curve)
    return easing_fn(t)
