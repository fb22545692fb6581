from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Optional

from jobmatch.models.skill import SkillSet, skill_values
from jobmatch.models.personality import PersonalityVector


class CandidateProfile(BaseModel):
    """Vista di un jobseeker usata dal matcher."""
    model_config = ConfigDict(frozen=True)

    skills: SkillSet = frozenset()
    personality: PersonalityVector = PersonalityVector()
    candidate_id: Optional[str] = None
    username: Optional[str] = None
    persona: Optional[str] = None      # Segmento utente (es. "intern")
    industry: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _collect_skills(cls, value: Any) -> SkillSet:
        return skill_values(value)
