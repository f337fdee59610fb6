"""
Rule-based weighted scoring engine.
Scores one user profile against one job posting, with an explanation.
"""

from typing import Dict, Optional, Tuple

from ..types import (
    JobPosting,
    MatchExplanation,
    ScoredRecommendation,
    UserProfile,
    normalize_text,
)

# Location values meaning "no preference"
ANY_LOCATION = frozenset({'', 'any', 'anywhere'})

DEFAULT_WEIGHTS = {
    'skills': 0.50,
    'location': 0.20,
    'job_type': 0.15,
    'experience': 0.15,
}


def clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


class Scorer:
    """Weighted sum of four signals, each in [0, 1]."""

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        w = dict(DEFAULT_WEIGHTS)
        if weights:
            w.update(weights)
        total = sum(w.values())
        if set(w) != set(DEFAULT_WEIGHTS) or any(v < 0 for v in w.values()) or abs(total - 1.0) > 1e-9:
            raise ValueError(f"Scorer weights must be non-negative and sum to 1, got {w}")
        self.weights = w

    def score(self, user: UserProfile, job: JobPosting) -> ScoredRecommendation:
        """
        Score a job posting for a user.

        Missing profile fields count as a non-match for job type and
        experience; an unset location on either side counts as a match.
        """
        skill_score, matched_skills = self._calculate_skill_score(user, job)
        location_match = self._location_matches(user.preferred_location, job.location)
        job_type_match = self._exact_match(user.preferred_job_type, job.job_type)
        experience_match = self._exact_match(user.experience_level, job.experience_level)

        w = self.weights
        total = (
            skill_score * w['skills'] +
            float(location_match) * w['location'] +
            float(job_type_match) * w['job_type'] +
            float(experience_match) * w['experience']
        )

        return ScoredRecommendation(
            job=job,
            score=clamp01(total),
            explanation=MatchExplanation(
                matched_skills=matched_skills,
                location_match=location_match,
                job_type_match=job_type_match,
                experience_match=experience_match,
            ),
        )

    @staticmethod
    def _calculate_skill_score(user: UserProfile, job: JobPosting) -> Tuple[float, Tuple[str, ...]]:
        """
        Fraction of the posting's required skills the user has.

        A posting with no required skills scores 0, not 1.
        """
        if not job.required_skills:
            return 0.0, ()
        matched = tuple(s for s in job.required_skills if normalize_text(s) in user.skills)
        return len(matched) / max(1, len(job.required_skills)), matched

    @staticmethod
    def _location_matches(preferred: Optional[str], location: Optional[str]) -> bool:
        preferred, location = normalize_text(preferred), normalize_text(location)
        if preferred in ANY_LOCATION or location in ANY_LOCATION:
            return True
        return preferred == location

    @staticmethod
    def _exact_match(wanted: Optional[str], offered: Optional[str]) -> bool:
        wanted, offered = normalize_text(wanted), normalize_text(offered)
        return bool(wanted) and wanted == offered


_default_scorer = Scorer()


def score(user: UserProfile, job: JobPosting) -> ScoredRecommendation:
    """Score with the default weights"""
    return _default_scorer.score(user, job)
