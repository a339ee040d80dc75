from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pendulum
from airflow import DAG
from airflow.operators.bash import BashOperator

PROJECT_ROOT = Path(__file__).resolve().parents[2]
TLB_BIN = PROJECT_ROOT / ".venv" / "bin" / "tlb"
SNAPSHOT_PATH = PROJECT_ROOT / "live.json"

with DAG(
    dag_id="tlb_live_check",
    description="Refresh the Twitch live snapshot every five minutes",
    schedule="*/5 * * * *",
    start_date=pendulum.datetime(2026, 1, 1, tz="UTC"),
    catchup=False,
    max_active_runs=1,
    default_args={
        "owner": "data-eng",
        "depends_on_past": False,
        "retries": 0,
    },
    tags=["twitch", "live", "snapshot"],
) as dag:
    check_live = BashOperator(
        task_id="run_tlb_once",
        bash_command=(
            f"set -euo pipefail; "
            f"cd '{PROJECT_ROOT}'; "
            f"TLB_SNAPSHOT_PATH='{SNAPSHOT_PATH}' "
            f"'{TLB_BIN}' run-once"
        ),
        execution_timeout=timedelta(minutes=4),
    )
