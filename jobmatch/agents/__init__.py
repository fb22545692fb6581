# agents package
"""Agents working on a single jobseeker/job pair."""

from jobmatch.agents.matching_agent import MatchingAgent, JobMatchView

__all__ = [
    "MatchingAgent",
    "JobMatchView",
]
