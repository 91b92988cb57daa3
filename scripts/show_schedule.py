"""Print the computed class schedule as JSON or a human-readable table.

Loads the weekly template, projects it onto the configured course period,
folds in ad-hoc classes, applies filters and splits the result into
upcoming and past classes.

Run with: python scripts/show_schedule.py
Table:    python scripts/show_schedule.py --table
By day:   python scripts/show_schedule.py --by-day --start-date 2025-11-04 --end-date 2025-11-08
Filter:   python scripts/show_schedule.py --teacher Helicleiton --name "Teclado A"
Extras:   python scripts/show_schedule.py --ad-hoc data/extra_classes.json
Pinned:   python scripts/show_schedule.py --now 2026-01-15T12:00:00Z

Course period, offset and template path come from the environment / .env
(COURSE_START, COURSE_END, UTC_OFFSET_HOURS, TEMPLATES_PATH).

Exit codes:
  0 = success (JSON or table on stdout)
  1 = configuration error (message on stderr)
"""

import argparse
import json
import os
import sys
from datetime import datetime, timezone

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.coursebook.config import get_config  # noqa: E402
from src.coursebook.engine import group_by_day  # noqa: E402
from src.coursebook.errors import ConfigurationError  # noqa: E402
from src.coursebook.logging import get_logger, setup_logging  # noqa: E402
from src.coursebook.models import AdHocClass, ClassOccurrence, FilterCriteria  # noqa: E402
from src.coursebook.pipeline import build_schedule  # noqa: E402
from src.coursebook.templates import load_templates_file  # noqa: E402
from src.coursebook.timeutils import format_civil_date  # noqa: E402

log = get_logger(__name__)

DAY_NAMES = ["Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado"]


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the class schedule as JSON or table.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--templates", type=str, default=None,
                        help="Weekly template JSON (default: TEMPLATES_PATH).")
    parser.add_argument("--ad-hoc", type=str, default=None,
                        help="JSON array of ad-hoc classes to merge.")
    parser.add_argument("--teacher", type=str, default=None)
    parser.add_argument("--name", type=str, default=None, help="Class name.")
    parser.add_argument("--start-date", type=str, default=None, help="YYYY-MM-DD, inclusive.")
    parser.add_argument("--end-date", type=str, default=None, help="YYYY-MM-DD, inclusive.")
    parser.add_argument("--now", type=str, default=None,
                        help="Evaluation instant, ISO-8601 (default: current time).")

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument("--table", action="store_true",
                              help="Upcoming and past classes as a table.")
    output_group.add_argument("--by-day", action="store_true",
                              help="All matching classes grouped by civil day.")
    return parser.parse_args()


def _load_ad_hoc(path: str | None) -> list[AdHocClass]:
    if not path:
        return []
    with open(path, encoding="utf-8") as f:
        return [AdHocClass.model_validate(item) for item in json.load(f)]


def _row(occ: ClassOccurrence, offset: int) -> str:
    label = occ.sequence_label or "Extra"
    return (
        f"  {format_civil_date(occ.timestamp_utc, offset)} {occ.display_time}  "
        f"{occ.name:<20} {label:<8} Prof. {occ.teacher}"
    )


def main() -> int:
    args = _parse_args()
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    try:
        templates = load_templates_file(args.templates or config.templates_path)
    except ConfigurationError as e:
        log.error("schedule_unavailable", error=str(e))
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.now:
        now = datetime.fromisoformat(args.now.replace("Z", "+00:00"))
    else:
        now = datetime.now(timezone.utc)

    offset = config.utc_offset_hours
    criteria = FilterCriteria(
        teacher=args.teacher,
        name=args.name,
        start_date=args.start_date,
        end_date=args.end_date,
    )
    schedule = build_schedule(
        templates,
        config.course_start,
        config.course_end,
        offset,
        now=now,
        ad_hoc_classes=_load_ad_hoc(args.ad_hoc),
        criteria=criteria,
    )

    if args.by_day:
        for group in group_by_day(schedule.upcoming + schedule.past, offset):
            weekday = DAY_NAMES[group.day.isoweekday() % 7]
            print(f"{weekday}, {group.day.strftime('%d/%m/%Y')}")
            for occ in group.occurrences:
                print(_row(occ, offset))
        return 0

    if args.table:
        print(f"Aulas Futuras ({len(schedule.upcoming)})")
        for occ in schedule.upcoming:
            print(_row(occ, offset))
        print(f"\nAulas Passadas ({len(schedule.past)})")
        for occ in schedule.past:
            print(_row(occ, offset))
        return 0

    print(json.dumps(schedule.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
