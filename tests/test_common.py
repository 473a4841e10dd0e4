from datetime import date, datetime, time
from types import SimpleNamespace

import pytest

from src.hr_payroll.hr_payroll.common.datetime_utils import YearMonth, hours_between
from src.hr_payroll.hr_payroll.common.money import round_half_away, round_money, to_number
from src.hr_payroll.hr_payroll.core.exceptions import ValidationError
from src.hr_payroll.hr_payroll.database.mysql_base import normalize_mysql_time
from src.hr_payroll.hr_payroll.payroll.model import PayrollPolicy


@pytest.mark.parametrize(
    "value, expected",
    [(97.5, 98), (2.5, 3), (-2.5, -3), (13000 * 0.0075, 98), (1560.0000000000002, 1560), (0, 0)],
)
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


@pytest.mark.parametrize("value, expected", [(2.675, 2.68), (0.125, 0.13), (-0.125, -0.13), (384.615, 384.62), (10, 10.0)])
def test_round_money_halves_away_from_zero(value, expected):
    assert round_money(value) == expected


def test_to_number():
    assert to_number("4.5") == 4.5
    assert to_number(3) == 3.0
    assert to_number("") is None
    assert to_number("abc") is None
    assert to_number(True) is None
    assert to_number("nan") is None
    assert to_number(" inf ") is None
    assert to_number(float("-inf")) is None


def test_year_month_boundaries():
    assert YearMonth.parse("2024-02").last_day == date(2024, 2, 29)
    assert YearMonth.parse("2025-2").first_day == date(2025, 2, 1)
    assert YearMonth(2025, 12).last_day == date(2025, 12, 31)
    assert str(YearMonth(2025, 3)) == "2025-03"


def test_year_month_contains_accepts_datetimes():
    jan = YearMonth(2025, 1)

    assert jan.contains(datetime(2025, 1, 31, 23, 59))
    assert not jan.contains(date(2025, 2, 1))


@pytest.mark.parametrize("value", ["2025-00", "2025-13", "25-01", "", None])
def test_year_month_rejects_bad_input(value):
    with pytest.raises(ValidationError):
        YearMonth.parse(value)


def test_hours_between():
    assert hours_between(time(8, 0), time(17, 30)) == 9.5
    assert hours_between(time(22, 0), time(6, 0)) == 0


def test_policy_from_settings():
    settings = SimpleNamespace(
        PAYROLL_GROSS_CAP_ENABLED=True,
        PAYROLL_GROSS_CAP_AMOUNT=12000,
        PAYROLL_DERIVE_OT_FROM_SHIFT=True,
        PAYROLL_STANDARD_SHIFT_HOURS=9,
    )

    policy = PayrollPolicy.from_settings(settings)

    assert policy.gross_cap_enabled
    assert policy.gross_cap_amount == 12000
    assert policy.shift_hours == 9
    assert PayrollPolicy.from_settings(SimpleNamespace()).shift_hours is None


def test_normalize_mysql_time():
    assert normalize_mysql_time("08:30") == time(8, 30)
    assert normalize_mysql_time("17:05:09") == time(17, 5, 9)
    assert normalize_mysql_time(None) is None


@pytest.mark.parametrize("value", ["0830", "aa:bb", "25:00:00"])
def test_normalize_mysql_time_rejects_bad_strings(value):
    with pytest.raises(ValidationError):
        normalize_mysql_time(value)
