"""
Immutable scoring records.

Rows from the store are mapped into these records before scoring so the
scorer only ever works on flat, read-only values.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple


def normalize_text(value: Optional[str]) -> str:
    """Lower-case and trim a free-text field; None becomes an empty string."""
    return (value or '').strip().lower()


def _unique_skills(skills) -> Tuple[str, ...]:
    ordered = []
    seen = set()
    for skill in skills or ():
        cleaned = str(skill).strip()
        key = cleaned.lower()
        if cleaned and key not in seen:
            ordered.append(cleaned)
            seen.add(key)
    return tuple(ordered)


@dataclass(frozen=True)
class UserProfile:
    id: Any
    skills: FrozenSet[str] = field(default_factory=frozenset)
    preferred_location: Optional[str] = None
    preferred_job_type: Optional[str] = None
    experience_level: Optional[str] = None

    def __post_init__(self) -> None:
        # Skills are compared case-insensitively
        object.__setattr__(
            self, 'skills', frozenset(normalize_text(s) for s in (self.skills or ()) if normalize_text(s))
        )

    @classmethod
    def from_user(cls, user) -> 'UserProfile':
        return cls(
            id=user.id,
            skills=frozenset(user.skills_list),
            preferred_location=user.preferred_location,
            preferred_job_type=user.preferred_job_type,
            experience_level=user.experience_level,
        )


@dataclass(frozen=True)
class JobPosting:
    id: Any
    title: str = ''
    company: str = ''
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    # Ordered as listed on the posting, de-duplicated case-insensitively
    required_skills: Tuple[str, ...] = ()
    is_active: bool = True
    description: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'required_skills', _unique_skills(self.required_skills))

    @classmethod
    def from_job(cls, job) -> 'JobPosting':
        return cls(
            id=job.id,
            title=job.title,
            company=job.company,
            location=job.location,
            job_type=job.job_type,
            experience_level=job.experience_level,
            required_skills=tuple(job.required_skills_list),
            is_active=bool(job.is_active),
            description=job.description,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            '_id': self.id,
            'title': self.title,
            'company': self.company,
            'location': self.location,
            'jobType': self.job_type,
            'experienceLevel': self.experience_level,
            'requiredSkills': list(self.required_skills),
            'description': self.description,
            'isActive': self.is_active,
        }


@dataclass(frozen=True)
class MatchExplanation:
    matched_skills: Tuple[str, ...]
    location_match: bool
    job_type_match: bool
    experience_match: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'matchedSkills': list(self.matched_skills),
            'locationMatch': self.location_match,
            'jobTypeMatch': self.job_type_match,
            'experienceMatch': self.experience_match,
        }


@dataclass(frozen=True)
class ScoredRecommendation:
    job: JobPosting
    score: float
    explanation: MatchExplanation

    def to_dict(self) -> Dict[str, Any]:
        return {
            'job': self.job.to_dict(),
            'score': self.score,
            'explanation': self.explanation.to_dict(),
        }
