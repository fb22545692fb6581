# services package
"""Services for the job matching engine (scoring, record projection, insights)."""

from jobmatch.services.matcher import (
    InvalidInputError,
    DegenerateDivisorError,
    SKILLS_MAX_POINTS,
    SKILLS_WEIGHT,
    PERSONALITY_WEIGHT,
    PERSONALITY_DIVISOR,
    compute_skills_match,
    compute_personality_match,
    compute_total_score,
    compute_skill_gaps,
    rank_candidates_for_opportunity,
    rank_opportunities_for_candidate,
)
from jobmatch.services.record_mapper import candidate_from_record, opportunity_from_record, with_ranking
from jobmatch.services.personality_insights import personality_from_insights

__all__ = [
    "InvalidInputError",
    "DegenerateDivisorError",
    "SKILLS_MAX_POINTS",
    "SKILLS_WEIGHT",
    "PERSONALITY_WEIGHT",
    "PERSONALITY_DIVISOR",
    "compute_skills_match",
    "compute_personality_match",
    "compute_total_score",
    "compute_skill_gaps",
    "rank_candidates_for_opportunity",
    "rank_opportunities_for_candidate",
    "candidate_from_record",
    "opportunity_from_record",
    "with_ranking",
    "personality_from_insights",
]
