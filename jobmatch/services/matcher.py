"""
Matcher
Motore di ranking deterministico tra candidati e offerte di lavoro.

Responsabilità:
- Percentuale skill: quante skill RICHIESTE dall'offerta possiede il candidato
- Distanza di personalità (RMSE) tra tratti del candidato e target dell'offerta
- Score finale 0-100 (skill 80%, personalità 20%), una cifra decimale
- Ranking in batch in entrambe le direzioni, ordine di input preservato

Non-responsabilità:
- Nessun I/O, nessun log, nessuno stato condiviso.
- Nessun ordinamento o filtro dei risultati (compito del chiamante).

Invariante:
A parità di input, il risultato è sempre identico.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, List, Mapping, Sequence

import numpy as np
from pydantic import ValidationError

from jobmatch.models.skill import SkillSet, skill_values
from jobmatch.models.personality import PersonalityVector, TargetVector
from jobmatch.models.candidate import CandidateProfile
from jobmatch.models.job import OpportunityProfile
from jobmatch.models.match_result import MatchResult, RankedEntry, SkillGap


SKILLS_MAX_POINTS = 80.0
SKILLS_WEIGHT = 0.8
PERSONALITY_WEIGHT = 0.2
# Divisore fisso dell'RMSE, anche quando si confrontano meno di 6 dimensioni
PERSONALITY_DIVISOR = 6


class InvalidInputError(ValueError):
    """Profilo malformato (skill o vettore di personalità non validi)."""
    pass


class DegenerateDivisorError(ZeroDivisionError):
    """L'offerta non ha skill richieste: la percentuale non è definita."""
    pass


def round_half_up(value: float, digits: int = 1) -> float:
    """Arrotonda half-away-from-zero sulla rappresentazione decimale più corta del float."""
    if not math.isfinite(value):
        raise InvalidInputError(f"Score is not a finite number: {value!r}")
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def to_skill_set(items: Any) -> SkillSet:
    """Normalizza una lista di skill in SkillSet, sollevando InvalidInputError."""
    if isinstance(items, frozenset) and all(isinstance(s, str) for s in items):
        return items
    try:
        return skill_values(items)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


def _as_model(model_cls, value: Any):
    """Accetta un'istanza del modello o un dict equivalente."""
    if isinstance(value, model_cls):
        return value
    if not isinstance(value, Mapping):
        raise InvalidInputError(f"Expected {model_cls.__name__}, got {type(value).__name__}")
    try:
        return model_cls.model_validate(value)
    except ValidationError as e:
        raise InvalidInputError(f"Malformed {model_cls.__name__}: {e}") from e


def _skill_ratio(candidate_skills: SkillSet, required_skills: SkillSet) -> float:
    if not required_skills:
        raise DegenerateDivisorError("Opportunity has no required skills")
    num_matched = sum(1 for skill in required_skills if skill in candidate_skills)
    return num_matched / len(required_skills)


def compute_skills_match(candidate_skills: Iterable[str], required_skills: Iterable[str]) -> float:
    """
    Percentuale skill (0-80): frazione delle skill richieste possedute dal candidato.

    Senza skill richieste lo score skill è 0.
    """
    candidate_set = to_skill_set(candidate_skills)
    required_set = to_skill_set(required_skills)
    try:
        ratio = _skill_ratio(candidate_set, required_set)
    except DegenerateDivisorError:
        return 0.0
    return ratio * SKILLS_MAX_POINTS


def compute_personality_match(candidate_personality: PersonalityVector, target: TargetVector) -> float:
    """
    Match di personalità: 100 - RMSE sulle dimensioni valorizzate da entrambi i lati.

    La somma degli scarti quadratici è sempre divisa per 6, anche se le
    coppie confrontate sono meno. Nessuna coppia confrontabile -> 100.
    """
    candidate_personality = _as_model(PersonalityVector, candidate_personality)
    target = _as_model(TargetVector, target)

    pairs = [
        (goal, score)
        for goal, score in zip(target.as_tuple(), candidate_personality.as_tuple())
        if goal is not None and score is not None
    ]
    if not pairs:
        return 100.0

    goals, scores = np.array(pairs, dtype=float).T
    with np.errstate(over="ignore", invalid="ignore"):
        squared_error = float(np.sum((goals - scores) ** 2))
        rmse = float(np.sqrt(squared_error / PERSONALITY_DIVISOR))
    if not np.isfinite(rmse):
        raise InvalidInputError("Personality distance overflows: scores out of numeric range")
    return 100.0 - rmse


def compute_total_score(candidate: CandidateProfile, opportunity: OpportunityProfile) -> MatchResult:
    """Combina skill (peso 0.8) e personalità (peso 0.2) in uno score 0-100."""
    candidate = _as_model(CandidateProfile, candidate)
    opportunity = _as_model(OpportunityProfile, opportunity)

    skills_match = round_half_up(compute_skills_match(candidate.skills, opportunity.required_skills))
    personality_match = round_half_up(
        compute_personality_match(candidate.personality, opportunity.target)
    )
    total = skills_match * SKILLS_WEIGHT + personality_match * PERSONALITY_WEIGHT

    return MatchResult(
        skills_match_percent=skills_match,
        personality_match_percent=personality_match,
        total_score=round_half_up(total),
    )


def compute_skill_gaps(candidate_skills: Iterable[str], required_skills: Sequence[Any]) -> List[SkillGap]:
    """Skill richieste (in ordine di offerta) che il candidato non possiede."""
    candidate_set = to_skill_set(candidate_skills)
    if isinstance(required_skills, (str, bytes)):
        raise InvalidInputError("Required skills must be a sequence of identifiers")
    try:
        ordered = [skill_values([item]) for item in required_skills]
    except (TypeError, ValueError) as e:
        raise InvalidInputError(str(e)) from e

    gaps: List[SkillGap] = []
    seen = set()
    for values in ordered:
        (skill,) = values
        if skill in candidate_set or skill in seen:
            continue
        seen.add(skill)
        gaps.append(SkillGap(skill=skill))
    return gaps


def _score_pairs(pairs: Iterable[tuple], candidate_side: bool) -> List[RankedEntry]:
    """
    Nucleo comune alle due direzioni di ranking.

    Ogni coppia è (candidato, offerta); l'entry riporta il profilo sul lato
    che varia. Un errore su una coppia non interrompe le altre.
    """
    entries: List[RankedEntry] = []
    for raw_candidate, raw_opportunity in pairs:
        ranked = raw_candidate if candidate_side else raw_opportunity
        try:
            candidate = _as_model(CandidateProfile, raw_candidate)
            opportunity = _as_model(OpportunityProfile, raw_opportunity)
            result = compute_total_score(candidate, opportunity)
        except InvalidInputError as e:
            profile = ranked if isinstance(ranked, (CandidateProfile, OpportunityProfile)) else None
            entries.append(RankedEntry(profile=profile, error=str(e)))
            continue
        entries.append(RankedEntry(profile=candidate if candidate_side else opportunity, result=result))
    return entries


def rank_candidates_for_opportunity(
    opportunity: OpportunityProfile,
    candidates: Sequence[CandidateProfile],
) -> List[RankedEntry]:
    """Uno score per candidato, nello stesso ordine di input."""
    return _score_pairs(((candidate, opportunity) for candidate in candidates), candidate_side=True)


def rank_opportunities_for_candidate(
    candidate: CandidateProfile,
    opportunities: Sequence[OpportunityProfile],
) -> List[RankedEntry]:
    """Uno score per offerta, nello stesso ordine di input."""
    return _score_pairs(((candidate, opportunity) for opportunity in opportunities), candidate_side=False)
