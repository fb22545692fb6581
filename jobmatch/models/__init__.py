# models package
"""Data models for the job matching engine."""

from jobmatch.models.skill import Skill, SkillSet, skill_values
from jobmatch.models.personality import PERSONALITY_DIMENSIONS, PersonalityVector, TargetVector
from jobmatch.models.candidate import CandidateProfile
from jobmatch.models.job import OpportunityProfile
from jobmatch.models.match_result import MatchResult, SkillGap, RankedEntry

__all__ = [
    "Skill",
    "SkillSet",
    "skill_values",
    "PERSONALITY_DIMENSIONS",
    "PersonalityVector",
    "TargetVector",
    "CandidateProfile",
    "OpportunityProfile",
    "MatchResult",
    "SkillGap",
    "RankedEntry",
]
