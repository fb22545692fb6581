"""
Matching Agent
Vista di dettaglio di una singola coppia jobseeker-offerta.

Responsabilità:
- Calcola lo score della coppia con il matcher
- Elenca skill in comune e skill mancanti (gap)
- Genera una spiegazione sintetica del match
"""

from typing import List, Optional

from pydantic import BaseModel

from jobmatch.services.logging_utils import log_section, prefixed_logger
from jobmatch.services.matcher import (
    SKILLS_MAX_POINTS,
    compute_skill_gaps,
    compute_total_score,
)
from jobmatch.models.candidate import CandidateProfile
from jobmatch.models.job import OpportunityProfile
from jobmatch.models.match_result import MatchResult, SkillGap


class JobMatchView(BaseModel):
    """Risultato della vista di dettaglio di un'offerta per un candidato."""
    match_result: MatchResult
    matched_skills: List[str]
    skill_gaps: List[SkillGap]
    strengths: List[str]
    explanation: str


class MatchingAgent:
    """
    Agente che valuta una coppia candidato-offerta.

    LOGICA:
    1. Score totale (skill + personalità)
    2. Skill in comune e gap, nell'ordine dell'offerta
    3. Punti di forza e spiegazione testuale
    """

    def __init__(self, strong_match_threshold: float = 60.0, verbose: bool = False):
        self.strong_match_threshold = strong_match_threshold
        self.verbose = verbose
        self._log = prefixed_logger("[MatchingAgent]", enabled=verbose)

    def match(
        self,
        candidate: CandidateProfile,
        opportunity: OpportunityProfile,
        required_order: Optional[List[str]] = None,
    ) -> JobMatchView:
        """
        Valuta la coppia.

        Args:
            candidate: Profilo del jobseeker
            opportunity: Profilo dell'offerta
            required_order: Ordine originale delle skill richieste (default: ordine alfabetico)
        """
        self._log(f"Matching: {candidate.username or 'Candidate'} vs {opportunity.title or 'Job'}")

        log_section(self._log, "Step 1: Score", width=60, char="-")
        result = compute_total_score(candidate, opportunity)
        self._log(f"   -> Skills: {result.skills_match_percent:.1f}/{SKILLS_MAX_POINTS:.0f}")
        self._log(f"   -> Personality: {result.personality_match_percent:.1f}")
        self._log(f"   -> Total: {result.ranking}/100")

        log_section(self._log, "Step 2: Skill gaps", width=60, char="-")
        ordered = required_order if required_order is not None else sorted(opportunity.required_skills)
        # Deduplica mantenendo ordine
        matched = list(dict.fromkeys(skill for skill in ordered if skill in candidate.skills))
        gaps = compute_skill_gaps(candidate.skills, ordered)
        for skill in matched:
            self._log(f"   MATCH {skill}")
        for gap in gaps:
            self._log(f"   GAP {gap.skill}")

        strengths = self._identify_strengths(candidate, opportunity, matched, result)
        explanation = self._generate_explanation(result, matched, gaps, strengths)

        return JobMatchView(
            match_result=result,
            matched_skills=matched,
            skill_gaps=gaps,
            strengths=strengths,
            explanation=explanation,
        )

    def _identify_strengths(
        self,
        candidate: CandidateProfile,
        opportunity: OpportunityProfile,
        matched: List[str],
        result: MatchResult,
    ) -> List[str]:
        strengths = []

        if opportunity.required_skills and len(set(matched)) == len(opportunity.required_skills):
            strengths.append("All required skills present")

        if result.personality_match_percent >= 90:
            strengths.append("Close personality fit")

        if candidate.persona and candidate.persona == opportunity.persona:
            strengths.append(f"Same persona ({candidate.persona})")

        return strengths

    def _generate_explanation(
        self,
        result: MatchResult,
        matched: List[str],
        gaps: List[SkillGap],
        strengths: List[str],
    ) -> str:
        """Spiegazione locale del match."""
        parts = []

        if result.total_score >= self.strong_match_threshold:
            parts.append(f"Strong match ({result.ranking}/100).")
        else:
            parts.append(f"Partial match ({result.ranking}/100).")

        if matched:
            parts.append(f"Shared skills: {', '.join(matched[:5])}.")

        if gaps:
            parts.append(f"Missing skills: {', '.join(g.skill for g in gaps[:3])}.")

        if strengths:
            parts.append(f"Strengths: {strengths[0]}.")

        return " ".join(parts)
