"""Lifecycle — жизненный цикл линейных записей survey.

- Issue: NON_EXISTENT → ISSUED
- Trade: ISSUED/TRADED → TRADED (новая ревизия)
"""

from .state_machine import (
    LifecycleTransitionResult,
    SurveyLifecycle,
    SurveyLifecycleState,
)

__all__ = [
    "SurveyLifecycle",
    "SurveyLifecycleState",
    "LifecycleTransitionResult",
]
