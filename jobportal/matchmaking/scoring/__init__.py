"""Rule-based weighted scoring engine."""

from .scorer import DEFAULT_WEIGHTS, Scorer, score

__all__ = [
    'DEFAULT_WEIGHTS',
    'Scorer',
    'score',
]
