"""
Request schemas for the job portal API.

Incoming JSON bodies are validated here before they reach a service, so the
services only ever see explicit, well-typed values. Field aliases follow the
camelCase names the frontend sends.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .models import MAX_ID


def split_skills(value: Any) -> List[str]:
    """Accept "js, sql" or ["js", "sql"] and return trimmed, de-duplicated skills"""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(',')
    elif isinstance(value, (list, tuple, set)):
        items = list(value)
    else:
        raise ValueError('skills must be a list or a comma separated string')

    skills = []
    seen = set()
    for item in items:
        skill = str(item).strip()
        if skill and skill.lower() not in seen:
            skills.append(skill)
            seen.add(skill.lower())
    return skills


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class BaseRequest(BaseModel):
    """Base model shared by all request bodies"""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra='ignore',
    )


class ProfileFields(BaseRequest):
    preferred_location: Optional[str] = Field(None, alias='preferredLocation', max_length=100)
    preferred_job_type: Optional[str] = Field(None, alias='preferredJobType', max_length=50)
    experience_level: Optional[str] = Field(None, alias='experienceLevel', max_length=50)

    @field_validator('preferred_location', 'preferred_job_type', 'experience_level', mode='before')
    @classmethod
    def _optional_text(cls, value):
        return _blank_to_none(value)


class RegisterRequest(ProfileFields):
    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    skills: List[str] = Field(default_factory=list)

    @field_validator('skills', mode='before')
    @classmethod
    def _parse_skills(cls, value):
        return split_skills(value)


class LoginRequest(BaseRequest):
    email: EmailStr
    password: str = Field(..., min_length=1)


class ProfileUpdateRequest(ProfileFields):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    skills: Optional[List[str]] = None

    @field_validator('skills', mode='before')
    @classmethod
    def _parse_skills(cls, value):
        return None if value is None else split_skills(value)


class JobFields(BaseRequest):
    location: Optional[str] = Field(None, max_length=100)
    job_type: Optional[str] = Field(None, alias='jobType', max_length=50)
    experience_level: Optional[str] = Field(None, alias='experienceLevel', max_length=50)
    description: Optional[str] = Field(None, max_length=20000)

    @field_validator('location', 'job_type', 'experience_level', 'description', mode='before')
    @classmethod
    def _optional_text(cls, value):
        return _blank_to_none(value)


class JobCreateRequest(JobFields):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=100)
    required_skills: List[str] = Field(default_factory=list, alias='requiredSkills')
    is_active: bool = Field(True, alias='isActive')

    @field_validator('required_skills', mode='before')
    @classmethod
    def _parse_skills(cls, value):
        return split_skills(value)


class JobUpdateRequest(JobFields):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    company: Optional[str] = Field(None, min_length=1, max_length=100)
    required_skills: Optional[List[str]] = Field(None, alias='requiredSkills')
    is_active: Optional[bool] = Field(None, alias='isActive')

    @field_validator('required_skills', mode='before')
    @classmethod
    def _parse_skills(cls, value):
        return None if value is None else split_skills(value)


class ApplicationRequest(BaseRequest):
    job_id: int = Field(..., alias='jobId', ge=1, le=MAX_ID)


def parse_body(schema, data):
    """Validate a decoded JSON body against a schema, raising ValidationError on bad input"""
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = '.'.join(str(part) for part in first.get('loc', ())) or 'body'
        raise ValidationError(f"{field}: {first.get('msg', 'invalid value')}") from e
