"""
Test Orchestrator
"""

import pytest

from jobmatch.orchestrator import (
    RankingOrchestrator,
    filter_pool,
    rank_candidates_for_job,
    rank_jobs_for_jobseeker,
)
from jobmatch.services.matcher import InvalidInputError


def _ids(records):
    return [r.get("_id") for r in records]


def test_rank_jobs_keeps_order_and_isolates_failures(jobseeker_record, job_pool):
    outcome = rank_jobs_for_jobseeker(jobseeker_record, job_pool)

    assert _ids(outcome.records) == ["job1", "bad", "job2", "job3"]
    assert [r["ranking"] for r in outcome.records] == ["62.6", None, "84.0", "20.0"]
    assert outcome.pool_size == 4
    assert outcome.scored == 3
    assert len(outcome.failures) == 1
    assert outcome.failures[0].index == 1
    assert outcome.failures[0].record_id == "bad"


def test_rank_jobs_does_not_mutate_input(jobseeker_record, job_pool):
    rank_jobs_for_jobseeker(jobseeker_record, job_pool)
    assert all("ranking" not in job for job in job_pool)


def test_rank_jobs_sorted(jobseeker_record, job_pool):
    outcome = rank_jobs_for_jobseeker(jobseeker_record, job_pool, sort_by_score=True)

    assert _ids(outcome.records) == ["job2", "job1", "job3", "bad"]


def test_rank_jobs_same_segment(jobseeker_record, job_pool):
    outcome = rank_jobs_for_jobseeker(jobseeker_record, job_pool, same_segment=True)

    assert _ids(outcome.records) == ["job1", "job2"]
    assert outcome.pool_size == 2
    assert outcome.failures == []


def test_drop_failures(jobseeker_record, job_pool):
    orchestrator = RankingOrchestrator(drop_failures=True)
    outcome = orchestrator.rank_jobs_for_jobseeker(jobseeker_record, job_pool)

    assert _ids(outcome.records) == ["job1", "job2", "job3"]
    assert [f.record_id for f in outcome.failures] == ["bad"]


def test_non_mapping_pool_items_are_reported(jobseeker_record, job_record):
    outcome = rank_jobs_for_jobseeker(jobseeker_record, [job_record, "oops"])

    assert outcome.records[1] == {"record": "oops", "ranking": None}
    assert outcome.failures[0].index == 1
    assert outcome.failures[0].record_id is None


def test_rank_candidates_for_job(job_record, jobseeker_record):
    other = {
        "_id": "js2",
        "username": "giulia",
        "persona": "intern",
        "industry": "tech",
        "skills": [{"value": "python"}, {"value": "sql"}, {"value": "aws"}],
    }

    outcome = rank_candidates_for_job(job_record, [jobseeker_record, other], sort_by_score=True)

    assert _ids(outcome.records) == ["js2", "js1"]
    assert [r["ranking"] for r in outcome.records] == ["84.0", "62.6"]


def test_malformed_subject_raises(job_pool):
    with pytest.raises(InvalidInputError):
        rank_jobs_for_jobseeker({"skills": "python"}, job_pool)
    with pytest.raises(InvalidInputError):
        rank_candidates_for_job(None, [])


def test_filter_pool():
    pool = [
        {"_id": 1, "persona": "intern", "industry": "tech"},
        {"_id": 2, "persona": "senior", "industry": "tech"},
        "broken",
        {"_id": 3, "persona": "intern", "industry": "tech"},
    ]
    assert filter_pool(pool, "intern", "tech") == [pool[0], "broken", pool[3]]


def test_view_job(jobseeker_record, job_record):
    view = RankingOrchestrator().view_job(jobseeker_record, job_record)

    assert view.match_result.ranking == "62.6"
    assert view.matched_skills == ["python", "sql"]
    assert [g.skill for g in view.skill_gaps] == ["aws"]


def test_verbose_logging(capsys, jobseeker_record, job_pool):
    RankingOrchestrator(verbose=True).rank_jobs_for_jobseeker(jobseeker_record, job_pool)
    out = capsys.readouterr().out

    assert "[RankingOrchestrator] RANKING: jobs for jobseeker" in out
    assert "SKIP record 1" in out
    assert "Scored 3/4 records, 1 failures" in out


def test_overflowing_slider_does_not_abort_pool(jobseeker_record, job_record):
    overflowing = {**job_record, "_id": "huge", "emotionalSlider": 1e200}

    outcome = rank_jobs_for_jobseeker(jobseeker_record, [job_record, overflowing, job_record])

    assert [r["ranking"] for r in outcome.records] == ["62.6", None, "62.6"]
    assert [f.record_id for f in outcome.failures] == ["huge"]
