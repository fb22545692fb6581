import argparse
import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from dotenv import load_dotenv

from jobmatch.orchestrator import RankingOrchestrator, RankingOutcome
from jobmatch.services.matcher import InvalidInputError


CSV_FIELDS = [
    "run_id",
    "timestamp_utc",
    "mode",
    "subject_id",
    "position",
    "record_id",
    "title",
    "username",
    "persona",
    "industry",
    "ranking",
]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _json_dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8", errors="replace"))


def _subject_id(record: Dict[str, Any]) -> str:
    for key in ("_id", "id", "username"):
        if record.get(key) is not None:
            return str(record[key])
    return ""


def _outcome_rows(outcome: RankingOutcome, mode: str, subject_id: str, run_id: str) -> List[Dict[str, Any]]:
    timestamp = _utc_now_iso()
    rows = []
    for position, record in enumerate(outcome.records):
        rows.append({
            "run_id": run_id,
            "timestamp_utc": timestamp,
            "mode": mode,
            "subject_id": subject_id,
            "position": position,
            "record_id": str(record.get("_id", record.get("id", "")) or ""),
            "title": record.get("title", ""),
            "username": record.get("username", ""),
            "persona": record.get("persona", ""),
            "industry": record.get("industry", ""),
            "ranking": record.get("ranking"),
        })
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description=(
            "Calcola il ranking di un pool di offerte per un jobseeker (mode=jobs) "
            "o di un pool di jobseeker per un'offerta (mode=candidates) e salva un CSV."
        )
    )
    parser.add_argument("--mode", choices=["jobs", "candidates"], required=True, help="Direzione del ranking.")
    parser.add_argument("--subject", required=True, help="File JSON con il record soggetto (jobseeker o job).")
    parser.add_argument("--pool", required=True, help="File JSON con la lista di record da valutare.")
    parser.add_argument("--out", default=os.getenv("JOBMATCH_OUTPUT", "data/ranking/ranking.csv"), help="Percorso output CSV.")
    parser.add_argument("--sort", action=argparse.BooleanOptionalAction, default=_env_flag("JOBMATCH_SORT"), help="Ordina per ranking decrescente.")
    parser.add_argument("--same-segment", action=argparse.BooleanOptionalAction, default=_env_flag("JOBMATCH_SAME_SEGMENT"), help="Valuta solo record con stessa persona e industry.")
    parser.add_argument("--drop-failures", action="store_true", help="Esclude dall'output i record non valutabili.")
    parser.add_argument("--json", action="store_true", help="Stampa anche i record con ranking in JSON su stdout.")
    parser.add_argument("--verbose", action="store_true", help="Abilita log verbose dell'orchestrator.")

    args = parser.parse_args(argv)

    try:
        subject = _read_json(Path(args.subject))
        pool = _read_json(Path(args.pool))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read input: {e}", file=sys.stderr)
        return 2
    if not isinstance(subject, dict) or not isinstance(pool, list):
        print("Subject must be a JSON object and pool a JSON array", file=sys.stderr)
        return 2

    orchestrator = RankingOrchestrator(
        same_segment=args.same_segment,
        sort_by_score=args.sort,
        drop_failures=args.drop_failures,
        verbose=args.verbose,
    )

    try:
        if args.mode == "jobs":
            outcome = orchestrator.rank_jobs_for_jobseeker(subject, pool)
        else:
            outcome = orchestrator.rank_candidates_for_job(subject, pool)
    except InvalidInputError as e:
        print(f"Invalid subject record: {e}", file=sys.stderr)
        return 2

    run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
    rows = _outcome_rows(outcome, args.mode, _subject_id(subject), run_id)

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows, columns=CSV_FIELDS).to_csv(out_path, index=False)

    for failure in outcome.failures:
        print(f"[WARN] record {failure.index} ({failure.record_id or '-'}): {failure.error}", file=sys.stderr)

    if args.json:
        print(_json_dumps(outcome.records))

    print(f"Ranked {outcome.scored}/{outcome.pool_size} records -> {out_path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
