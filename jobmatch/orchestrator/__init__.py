# orchestrator package
"""Orchestrator for ranking pools of jobseekers and job postings."""

from jobmatch.orchestrator.ranking_orchestrator import (
    RankingOrchestrator,
    RankingOutcome,
    RankingFailure,
    filter_pool,
    rank_jobs_for_jobseeker,
    rank_candidates_for_job,
)

__all__ = [
    "RankingOrchestrator",
    "RankingOutcome",
    "RankingFailure",
    "filter_pool",
    "rank_jobs_for_jobseeker",
    "rank_candidates_for_job",
]
