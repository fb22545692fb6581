from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union

from jobmatch.models.candidate import CandidateProfile
from jobmatch.models.job import OpportunityProfile


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills_match_percent: float        # 0-80
    personality_match_percent: float   # 100 - RMSE
    total_score: float                 # 0-100, una cifra decimale

    @property
    def ranking(self) -> str:
        """Score formattato come nel campo "ranking" delle risposte."""
        return f"{self.total_score:.1f}"


class SkillGap(BaseModel):
    """Skill richiesta dall'offerta e non posseduta dal candidato."""
    skill: str
    trainings: List[str] = []


class RankedEntry(BaseModel):
    # Profilo valutato (candidato o offerta, a seconda della direzione); None se malformato
    profile: Optional[Union[CandidateProfile, OpportunityProfile]] = None
    result: Optional[MatchResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None
