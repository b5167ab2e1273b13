from __future__ import annotations

import argparse
import json
import sys
from typing import Optional

from shiftboard.board import ShiftBoard
from shiftboard.exceptions import ConfirmationRequired, InvalidCellError, NavigationLimitError
from shiftboard.models.config import BoardConfig, load_config
from shiftboard.models.month import MonthKey
from shiftboard.models.rules import RULES
from shiftboard.models.staff import StaffMember
from shiftboard.utils.logging_setup import setup_logging


def _resolve_staff(board: ShiftBoard, ref: str) -> Optional[StaffMember]:
    """Find a roster member by id, falling back to an exact name match."""
    member = board.roster.get(ref)
    if member is not None:
        return member
    for m in board.staff():
        if m.name == ref:
            return m
    return None


def _print_grid(board: ShiftBoard) -> None:
    month = board.current_month
    schedule = board.month_schedule()
    stats = board.stats()
    days = month.days_in_month
    width = max([len(m.name) for m in board.staff()] + [6])

    print(month.title)
    print(" " * width + " " + "".join(f"{d:>3}" for d in range(1, days + 1)) + "  合計")
    for m in board.staff():
        cells = "".join(f" {s.code}" for s in schedule[m.id])
        print(f"{m.name:<{width}} {cells}  {stats.staff_total[m.id]:>3}")
    counts = "".join(
        f"{c:>2}!" if stats.is_understaffed(d) else f"{c:>3}"
        for d, c in enumerate(stats.daily_count)
    )
    print(f"{'日計(人)':<{width}} {counts}")
    print(f"要注意日（不足）: {len(stats.understaffed_days)} 日 / 最低必要人数 {stats.min_staff_per_day} 名")


def _stats_payload(board: ShiftBoard) -> dict:
    stats = board.stats()
    return {
        "month": str(board.current_month),
        "days_in_month": stats.days_in_month,
        "min_staff_per_day": stats.min_staff_per_day,
        "daily_count": stats.daily_count,
        "understaffed_days": [d + 1 for d in stats.understaffed_days],
        "staff": [
            {
                "id": m.id,
                "name": m.name,
                "total": stats.staff_total[m.id],
                "percentage": round(stats.percentage(m.id), 1),
            }
            for m in board.staff()
        ],
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shiftboard", description="Shift board CLI")
    p.add_argument("--config", help="JSON config file")
    p.add_argument("--data-dir", dest="data_dir", help="Directory holding the stored records")
    p.add_argument("--storage", choices=["json", "sqlite", "memory"], help="Storage backend")
    p.add_argument("--min-staff", dest="min_staff_per_day", type=int, help="Coverage threshold")
    p.add_argument("--month", help="Month to work on (YYYY-MM, default: current month)")
    p.add_argument("-v", "--verbose", action="count", default=0)

    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="Print the month grid")

    sp = sub.add_parser("stats", help="Coverage and fairness statistics")
    sp.add_argument("--json", dest="json_out", action="store_true", help="JSON output")

    sp = sub.add_parser("toggle", help="Cycle one cell WORK → OFF → REQUEST → WORK")
    sp.add_argument("staff", help="Staff id or name")
    sp.add_argument("day", type=int, help="Day of month (1-based)")

    sp = sub.add_parser("add", help="Add a staff member")
    sp.add_argument("name", nargs="?", default=None)

    sp = sub.add_parser("rename", help="Rename a staff member")
    sp.add_argument("staff", help="Staff id or name")
    sp.add_argument("name")

    sp = sub.add_parser("remove", help="Remove a staff member (history is kept)")
    sp.add_argument("staff", help="Staff id or name")
    sp.add_argument("--yes", action="store_true", help="Confirm removal")

    sp = sub.add_parser("export", help="Export the month")
    sp.add_argument("--format", choices=["csv", "xlsx"], default="csv")
    sp.add_argument("-o", "--output", help="Output path (default: shift_schedule.csv/.xlsx)")

    return p


def _build_config(args: argparse.Namespace) -> BoardConfig:
    return load_config(
        args.config,
        data_dir=args.data_dir,
        storage=args.storage,
        min_staff_per_day=args.min_staff_per_day,
    )


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    cfg = _build_config(args)
    level = "DEBUG" if args.verbose >= 2 else ("INFO" if args.verbose == 1 else cfg.log_level)
    setup_logging(level=level, log_file=cfg.log_file, console_level="DEBUG" if args.verbose else "WARNING")

    board = ShiftBoard(cfg).load()

    try:
        if args.month:
            board.go_to(MonthKey.parse(args.month))

        if args.command == "show":
            _print_grid(board)
            board.save()

        elif args.command == "stats":
            payload = _stats_payload(board)
            board.save()
            if args.json_out:
                print(json.dumps(payload, ensure_ascii=False, indent=2))
            else:
                print(f"{board.current_month.title}  ({payload['days_in_month']} 日)")
                for s in payload["staff"]:
                    print(f" - {s['name']}: {s['total']} 日 / {payload['days_in_month']} 日 ({s['percentage']}%)")
                days = ", ".join(str(d) for d in payload["understaffed_days"]) or "なし"
                print(f"要注意日（不足）: {days}")

        elif args.command == "toggle":
            member = _resolve_staff(board, args.staff)
            if member is None:
                print(f"Unknown staff: {args.staff}", file=sys.stderr)
                return 2
            status = board.toggle(member.id, args.day - 1)
            board.save()
            print(f"{member.name} {args.day}日: {status.label}")

        elif args.command == "add":
            member = board.add_staff(args.name)
            board.save()
            print(f"{member.id}\t{member.name}")

        elif args.command == "rename":
            member = _resolve_staff(board, args.staff)
            if member is None:
                print(f"Unknown staff: {args.staff}", file=sys.stderr)
                return 2
            board.rename_staff(member.id, args.name)
            board.save()
            print(f"{member.id}\t{args.name}")

        elif args.command == "remove":
            member = _resolve_staff(board, args.staff)
            if member is None:
                print(f"Unknown staff: {args.staff}", file=sys.stderr)
                return 2
            board.remove_staff(member.id, confirmed=args.yes)
            board.save()
            print(f"Removed {member.name} ({member.id})")

        elif args.command == "export":
            if args.format == "csv":
                out = args.output or RULES.csv_filename
                board.export_csv(output=out)
            else:
                out = args.output or RULES.excel_filename
                board.export_excel(output=out)
            board.save()
            print(out)

    except NavigationLimitError as e:
        print(str(e), file=sys.stderr)
        return 1
    except ConfirmationRequired as e:
        print(f"{e} (--yes to confirm)", file=sys.stderr)
        return 1
    except (InvalidCellError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
