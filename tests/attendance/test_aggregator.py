from __future__ import annotations

from datetime import date, time

from src.hr_payroll.hr_payroll.attendance.aggregator import AttendanceAggregator, aggregate
from src.hr_payroll.hr_payroll.attendance.model import AttendanceRecord, AttendanceStats
from src.hr_payroll.hr_payroll.common.datetime_utils import YearMonth

JAN = YearMonth(2025, 1)


def rec(**kwargs) -> AttendanceRecord:
    kwargs.setdefault("employee_id", 1)
    kwargs.setdefault("work_date", date(2025, 1, 10))
    return AttendanceRecord(**kwargs)


def test_absent_without_notes_counts_one_absent_day_only():
    stats = aggregate([rec(status="absent", overtime_hours=0, notes=None)], JAN)

    assert stats == AttendanceStats(absent_days=1, total_records=1)


def test_malformed_notes_fall_back_to_status_tally():
    stats = aggregate([rec(status="present", overtime_hours=0, notes="not valid json")], JAN)

    assert stats.present_days == 1
    assert stats.absent_days == 0
    assert stats.ot_hours == 0


def test_fields_resolve_independently_between_columns_and_notes():
    stats = aggregate([rec(status="present", overtime_hours=0, notes='{"ot_hours": 5}')], JAN)

    assert stats.present_days == 1
    assert stats.ot_hours == 5


def test_direct_overtime_column_wins_over_notes():
    stats = aggregate([rec(status="present", overtime_hours=2, notes='{"ot_hours": 5}')], JAN)

    assert stats.ot_hours == 2


def test_notes_day_counts_replace_status_tally_for_manual_monthly_entry():
    notes = '{"present_days": 22, "absent_days": 3, "late_days": 1, "ot_hours": 10, "food": 300, "uniform": 150, "advance": 1000, "rent": 800}'
    stats = aggregate([rec(status="present", notes=notes)], JAN)

    assert stats.present_days == 22
    assert stats.absent_days == 3
    assert stats.late_days == 1
    assert stats.ot_hours == 10
    assert stats.food == 300
    assert stats.uniform == 150
    assert stats.advance == 1000
    # legacy "rent" key
    assert stats.rent_deduction == 800


def test_rent_deduction_key_preferred_over_legacy_rent():
    stats = aggregate([rec(status="present", notes='{"rent_deduction": 500, "rent": 900}')], JAN)

    assert stats.rent_deduction == 500


def test_direct_monthly_columns_used_for_summary_row():
    row = rec(work_date=None, status="present", present_days=24, absent_days=2, overtime_hours="6.5", rent_deduction=700, advance=0)
    stats = aggregate([row], JAN)

    assert stats.present_days == 24
    assert stats.absent_days == 2
    assert stats.ot_hours == 6.5
    assert stats.rent_deduction == 700
    assert stats.advance == 0


def test_json_that_is_not_an_object_is_treated_as_malformed():
    stats = aggregate([rec(status="late", notes="[1, 2, 3]")], JAN)

    assert stats.late_days == 1


def test_unknown_status_counts_record_but_no_day_bucket():
    stats = aggregate([rec(status="holiday")], JAN)

    assert stats.total_records == 1
    assert stats.present_days == stats.absent_days == stats.late_days == 0


def test_month_boundaries_use_local_calendar_dates():
    rows = [
        rec(work_date=date(2024, 12, 31), status="present"),
        rec(work_date=date(2025, 1, 1), status="present"),
        rec(work_date=date(2025, 1, 31), status="present"),
        rec(work_date=date(2025, 2, 1), status="present"),
    ]

    stats = aggregate(rows, JAN)

    assert stats.present_days == 2
    assert stats.total_records == 2


def test_mixed_tiers_are_summed_across_records():
    rows = [
        rec(work_date=date(2025, 1, 2), status="present", overtime_hours=1.5),
        rec(work_date=date(2025, 1, 3), status="late"),
        rec(work_date=date(2025, 1, 4), status="present", notes='{"ot_hours": 2, "food": 50}'),
        rec(work_date=date(2025, 1, 5), status="absent", notes="{broken"),
    ]

    stats = aggregate(rows, JAN)

    assert stats.present_days == 2
    assert stats.late_days == 1
    assert stats.absent_days == 1
    assert stats.ot_hours == 3.5
    assert stats.food == 50
    assert stats.total_records == 4


def test_aggregate_is_idempotent():
    rows = [
        rec(status="present", overtime_hours=1.25),
        rec(status="present", notes='{"ot_hours": 2.5, "uniform": 75}'),
        rec(status="absent", notes="nope"),
    ]

    assert aggregate(rows, JAN) == aggregate(rows, JAN)


def test_aggregate_by_employee_groups_rows():
    rows = [
        rec(employee_id=1, status="present"),
        rec(employee_id=2, status="absent"),
        rec(employee_id=1, status="present"),
    ]

    stats = AttendanceAggregator().aggregate_by_employee(rows, JAN)

    assert stats[1].present_days == 2
    assert stats[2].absent_days == 1


def test_shift_overrun_overtime_only_when_enabled():
    row = rec(status="present", check_in_time=time(8, 0), check_out_time=time(18, 30))

    assert aggregate([row], JAN).ot_hours == 0
    assert AttendanceAggregator(shift_hours=8).aggregate([row], JAN).ot_hours == 2.5


def test_shift_overrun_does_not_override_recorded_overtime():
    row = rec(status="present", overtime_hours=1, check_in_time=time(8, 0), check_out_time=time(20, 0))

    assert AttendanceAggregator(shift_hours=8).aggregate([row], JAN).ot_hours == 1


def test_notes_day_counts_ignored_on_absent_record():
    stats = aggregate([rec(status="absent", notes='{"present_days": 20, "ot_hours": 2}')], JAN)

    assert stats.absent_days == 1
    assert stats.present_days == 0
    assert stats.ot_hours == 2


def test_non_finite_notes_fall_back_to_status_tally():
    rows = [rec(status="present", notes='{"ot_hours": NaN}'), rec(status="present", notes='{"ot_hours": Infinity}')]

    stats = aggregate(rows, JAN)

    assert stats.present_days == 2
    assert stats.ot_hours == 0
    assert stats == aggregate(rows, JAN)


def test_non_finite_string_in_notes_is_ignored():
    stats = aggregate([rec(status="present", notes='{"ot_hours": "inf", "food": "nan"}')], JAN)

    assert stats.present_days == 1
    assert stats.ot_hours == 0
    assert stats.food == 0
