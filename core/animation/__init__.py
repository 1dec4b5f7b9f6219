"""Window frame animation."""

from .types import EasingCurve, FrameAnimation, SchedulerState
from .easing import ease, easing_from_name, get_easing_function, EASING_FUNCTIONS
from .frame_scheduler import FrameAnimationScheduler, coerce_duration

__all__ = [
    # Types
    'EasingCurve',
    'FrameAnimation',
    'SchedulerState',

    # Easing
    'ease',
    'easing_from_name',
    'get_easing_function',
    'EASING_FUNCTIONS',

    # Scheduler
    'FrameAnimationScheduler',
    'coerce_duration',
]
