from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Optional

from jobmatch.models.skill import SkillSet, skill_values
from jobmatch.models.personality import TargetVector


class OpportunityProfile(BaseModel):
    """Requisiti di un'offerta di lavoro usati dal matcher."""
    model_config = ConfigDict(frozen=True)

    required_skills: SkillSet = frozenset()
    target: TargetVector = TargetVector()
    job_id: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None
    persona: Optional[str] = None
    industry: Optional[str] = None

    @field_validator("required_skills", mode="before")
    @classmethod
    def _collect_skills(cls, value: Any) -> SkillSet:
        return skill_values(value)
