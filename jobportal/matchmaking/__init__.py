"""
Job recommendation matchmaking.
Scores user profiles against job postings with a deterministic rule-based scorer.
"""

from .scoring.scorer import DEFAULT_WEIGHTS, Scorer, score
from .types import JobPosting, MatchExplanation, ScoredRecommendation, UserProfile

__all__ = [
    'DEFAULT_WEIGHTS',
    'Scorer',
    'score',
    'UserProfile',
    'JobPosting',
    'MatchExplanation',
    'ScoredRecommendation',
]
