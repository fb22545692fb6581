"""
Record Mapper
Converte i documenti salvati (jobseeker / job post) nei profili usati dal matcher
e riattacca il ranking ai record originali per la risposta.

Campi sorgente:
- jobseeker: skills[].value, emotional, extrovert, structure, challenge, stimulation, help
- job post:  skills[].value, emotionalSlider, extrovertSlider, unplannedSlider,
             challengeSlider, noveltySlider, helpSlider
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from jobmatch.models.candidate import CandidateProfile
from jobmatch.models.job import OpportunityProfile
from jobmatch.models.match_result import MatchResult
from jobmatch.models.personality import PersonalityVector, TargetVector
from jobmatch.services.matcher import InvalidInputError


# dimensione -> campo slider del job post
SLIDER_FIELDS: Dict[str, str] = {
    "emotional": "emotionalSlider",
    "extrovert": "extrovertSlider",
    "structure": "unplannedSlider",
    "challenge": "challengeSlider",
    "stimulation": "noveltySlider",
    "help": "helpSlider",
}

RANKING_FIELD = "ranking"


def _require_mapping(record: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise InvalidInputError(f"{kind} record must be a mapping, got {type(record).__name__}")
    return record


def _record_id(record: Mapping[str, Any]) -> Optional[str]:
    value = record.get("_id", record.get("id"))
    return None if value is None else str(value)


def candidate_from_record(record: Mapping[str, Any]) -> CandidateProfile:
    """Proietta un documento jobseeker in CandidateProfile."""
    record = _require_mapping(record, "Jobseeker")
    try:
        personality = PersonalityVector(
            **{name: record.get(name) for name in PersonalityVector.model_fields}
        )
        return CandidateProfile(
            skills=record.get("skills") or [],
            personality=personality,
            candidate_id=_record_id(record),
            username=record.get("username"),
            persona=record.get("persona"),
            industry=record.get("industry"),
        )
    except ValidationError as e:
        raise InvalidInputError(f"Malformed jobseeker record: {e}") from e


def opportunity_from_record(record: Mapping[str, Any]) -> OpportunityProfile:
    """Proietta un documento job post in OpportunityProfile."""
    record = _require_mapping(record, "Job")
    try:
        target = TargetVector(**{name: record.get(field) for name, field in SLIDER_FIELDS.items()})
        return OpportunityProfile(
            required_skills=record.get("skills") or [],
            target=target,
            job_id=_record_id(record),
            title=record.get("title"),
            company=record.get("company"),
            persona=record.get("persona"),
            industry=record.get("industry"),
        )
    except ValidationError as e:
        raise InvalidInputError(f"Malformed job record: {e}") from e


def with_ranking(record: Mapping[str, Any], result: Optional[MatchResult]) -> Dict[str, Any]:
    """Copia del record con il campo "ranking" (stringa a una cifra decimale, None se non calcolato)."""
    out = dict(record)
    out[RANKING_FIELD] = result.ranking if result is not None else None
    return out
