"""
Ranking Orchestrator
Coordina proiezione dei record, matcher e serializzazione del ranking.

Responsabilità:
- Filtra il pool per persona e industry (stesso segmento del soggetto)
- Proietta i record in profili e invoca il matcher in batch
- Isola gli errori per singolo record: un record malformato non blocca gli altri
- Riattacca il campo "ranking" ai record, opzionalmente ordinati per score
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from jobmatch.agents.matching_agent import JobMatchView, MatchingAgent
from jobmatch.models.match_result import MatchResult, RankedEntry
from jobmatch.services.logging_utils import log_section, prefixed_logger
from jobmatch.services.matcher import (
    InvalidInputError,
    rank_candidates_for_opportunity,
    rank_opportunities_for_candidate,
)
from jobmatch.services.record_mapper import (
    candidate_from_record,
    opportunity_from_record,
    with_ranking,
)
from jobmatch.models.skill import skill_values


@dataclass
class RankingFailure:
    """Record del pool che non è stato possibile valutare."""
    index: int
    record_id: Optional[str]
    error: str


@dataclass
class RankingOutcome:
    """Risultato del ranking di un pool."""
    records: List[Dict[str, Any]]
    failures: List[RankingFailure] = field(default_factory=list)
    pool_size: int = 0
    scored: int = 0


def filter_pool(
    records: Sequence[Any],
    persona: Optional[str],
    industry: Optional[str],
) -> List[Any]:
    """
    Tiene i record dello stesso segmento (persona + industry), in ordine.

    I record non-dict restano nel pool per essere segnalati come errori.
    """
    return [
        record for record in records
        if not isinstance(record, Mapping)
        or (record.get("persona") == persona and record.get("industry") == industry)
    ]


class RankingOrchestrator:
    """
    Orchestratore del ranking bidirezionale.

    FLUSSO:
    1. Proietta il record soggetto (jobseeker o job)
    2. (opzionale) Filtra il pool per segmento
    3. Proietta ogni record del pool, annotando i malformati
    4. Matcher in batch sui profili validi
    5. Riattacca "ranking" e (opzionale) ordina per score
    """

    def __init__(
        self,
        same_segment: bool = False,
        sort_by_score: bool = False,
        drop_failures: bool = False,
        matching_agent: Optional[MatchingAgent] = None,
        verbose: bool = False,
    ):
        self.same_segment = same_segment
        self.sort_by_score = sort_by_score
        self.drop_failures = drop_failures
        self.verbose = verbose
        self._matching_agent = matching_agent
        self._log = prefixed_logger("[RankingOrchestrator]", enabled=verbose)

    @property
    def matching_agent(self) -> MatchingAgent:
        if self._matching_agent is None:
            self._matching_agent = MatchingAgent(verbose=self.verbose)
        return self._matching_agent

    def rank_jobs_for_jobseeker(
        self,
        jobseeker: Mapping[str, Any],
        jobs: Sequence[Any],
    ) -> RankingOutcome:
        """Ranking delle offerte per un jobseeker."""
        log_section(self._log, "RANKING: jobs for jobseeker", width=70, char="=")
        candidate = candidate_from_record(jobseeker)
        self._log(f"Jobseeker: {candidate.username or candidate.candidate_id} "
                  f"({candidate.industry} / {candidate.persona})")

        return self._rank_pool(
            pool=jobs,
            persona=candidate.persona,
            industry=candidate.industry,
            project=opportunity_from_record,
            score=lambda profiles: rank_opportunities_for_candidate(candidate, profiles),
        )

    def rank_candidates_for_job(
        self,
        job: Mapping[str, Any],
        jobseekers: Sequence[Any],
    ) -> RankingOutcome:
        """Ranking dei jobseeker per un'offerta."""
        log_section(self._log, "RANKING: candidates for job", width=70, char="=")
        opportunity = opportunity_from_record(job)
        self._log(f"Job: {opportunity.title or opportunity.job_id} "
                  f"({opportunity.industry} / {opportunity.persona})")

        return self._rank_pool(
            pool=jobseekers,
            persona=opportunity.persona,
            industry=opportunity.industry,
            project=candidate_from_record,
            score=lambda profiles: rank_candidates_for_opportunity(opportunity, profiles),
        )

    def view_job(self, jobseeker: Mapping[str, Any], job: Mapping[str, Any]) -> JobMatchView:
        """Dettaglio di un'offerta per un jobseeker: score, skill in comune e gap."""
        candidate = candidate_from_record(jobseeker)
        opportunity = opportunity_from_record(job)
        required_order = [value for item in job.get("skills") or [] for value in skill_values([item])]
        return self.matching_agent.match(candidate, opportunity, required_order=required_order)

    def _rank_pool(
        self,
        pool: Sequence[Any],
        persona: Optional[str],
        industry: Optional[str],
        project: Callable[[Any], Any],
        score: Callable[[List[Any]], List[RankedEntry]],
    ) -> RankingOutcome:
        records = list(pool)
        total = len(records)
        if self.same_segment:
            records = filter_pool(records, persona, industry)
            self._log(f"Pool filtered by segment: {len(records)}/{total} records")

        failures: List[RankingFailure] = []
        profiles: List[Any] = []
        positions: List[int] = []
        for index, record in enumerate(records):
            try:
                profiles.append(project(record))
                positions.append(index)
            except InvalidInputError as e:
                failures.append(RankingFailure(index, self._record_id(record), str(e)))
                self._log(f"   SKIP record {index}: {e}")

        results: Dict[int, MatchResult] = {}
        for index, entry in zip(positions, score(profiles)):
            if entry.ok:
                results[index] = entry.result
            else:
                failures.append(RankingFailure(index, self._record_id(records[index]), entry.error or ""))

        ranked: List[Tuple[Optional[MatchResult], Dict[str, Any]]] = []
        for index, record in enumerate(records):
            result = results.get(index)
            if result is None and self.drop_failures:
                continue
            base = record if isinstance(record, Mapping) else {"record": record}
            ranked.append((result, with_ranking(base, result)))
            if result is not None:
                self._log(f"   {self._record_id(record) or index}: {result.ranking}")

        if self.sort_by_score:
            # Ordinamento stabile: a parità di score resta l'ordine di input, errori in coda
            ranked.sort(key=lambda item: (item[0] is None, -item[0].total_score if item[0] is not None else 0.0))

        failures.sort(key=lambda f: f.index)
        self._log(f"Scored {len(results)}/{len(records)} records, {len(failures)} failures")

        return RankingOutcome(
            records=[record for _, record in ranked],
            failures=failures,
            pool_size=len(records),
            scored=len(results),
        )

    @staticmethod
    def _record_id(record: Any) -> Optional[str]:
        if not isinstance(record, Mapping):
            return None
        value = record.get("_id", record.get("id", record.get("username")))
        return None if value is None else str(value)


# ═══════════════════════════════════════════════════════════════════════════
# SIMPLE API
# ═══════════════════════════════════════════════════════════════════════════

def rank_jobs_for_jobseeker(
    jobseeker: Mapping[str, Any],
    jobs: Sequence[Any],
    same_segment: bool = False,
    sort_by_score: bool = False,
    verbose: bool = False,
) -> RankingOutcome:
    """
    API semplice: ranking delle offerte per un jobseeker.

    Args:
        jobseeker: Documento jobseeker
        jobs: Documenti job post
        same_segment: Se True, considera solo offerte con stessa persona e industry
        sort_by_score: Se True, ordina per ranking decrescente
        verbose: Se True, stampa log
    """
    orchestrator = RankingOrchestrator(
        same_segment=same_segment,
        sort_by_score=sort_by_score,
        verbose=verbose,
    )
    return orchestrator.rank_jobs_for_jobseeker(jobseeker, jobs)


def rank_candidates_for_job(
    job: Mapping[str, Any],
    jobseekers: Sequence[Any],
    same_segment: bool = False,
    sort_by_score: bool = False,
    verbose: bool = False,
) -> RankingOutcome:
    """API semplice: ranking dei jobseeker per un'offerta."""
    orchestrator = RankingOrchestrator(
        same_segment=same_segment,
        sort_by_score=sort_by_score,
        verbose=verbose,
    )
    return orchestrator.rank_candidates_for_job(job, jobseekers)
