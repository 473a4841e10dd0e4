import pytest

from src.hr_payroll.hr_payroll.attendance.model import AttendanceStats
from src.hr_payroll.hr_payroll.branches.model import DEFAULT_BRANCH, Branch
from src.hr_payroll.hr_payroll.employees.model import Employee
from src.hr_payroll.hr_payroll.payroll.calculator.assembler import assemble
from src.hr_payroll.hr_payroll.payroll.calculator.deductions import compute_deductions, esi_amount, pf_amount
from src.hr_payroll.hr_payroll.payroll.calculator.earnings import compute_earnings
from src.hr_payroll.hr_payroll.payroll.model import PayrollPolicy

ELIGIBLE = Employee(employee_id=1, name="A", pf_eligible=True, esi_eligible=True)


def test_full_month_scenario_take_home():
    earnings = compute_earnings(500, 26, 0, DEFAULT_BRANCH, ELIGIBLE)
    d = compute_deductions(earnings, ELIGIBLE, DEFAULT_BRANCH)
    result = assemble(earnings, d)

    assert d.pf_base == 13000
    assert d.pf == 1560
    assert d.esi_base == 13000
    assert d.esi == 98
    assert d.total_deduction == 1658
    assert result.take_home == 11342
    assert result.net_pay == 11342


def test_high_earner_pf_capped_and_esi_waived():
    earnings = compute_earnings(1000, 25, 0, DEFAULT_BRANCH, ELIGIBLE)
    d = compute_deductions(earnings, ELIGIBLE, DEFAULT_BRANCH)

    assert d.pf_base == 25000
    assert d.pf == 1800
    assert d.esi == 0


@pytest.mark.parametrize("base", [0, 1000, 14999, 15000, 15001, 50000, 1e7])
def test_pf_never_exceeds_cap(base):
    pf = pf_amount(base, eligible=True)

    assert 0 <= pf <= 1800
    if base * 0.12 >= 1800:
        assert pf == 1800


@pytest.mark.parametrize("base", [21000.01, 30000, 1e9])
def test_esi_zero_above_threshold(base):
    assert esi_amount(base, eligible=True) == 0


def test_esi_at_threshold_still_applies():
    assert esi_amount(21000, eligible=True) == 158


def test_ineligible_employee_pays_no_pf_or_esi():
    assert pf_amount(13000, eligible=False) == 0
    assert esi_amount(13000, eligible=False) == 0


def test_special_branch_excludes_ot_from_esi_base():
    special = Branch(branch_id=1, name="UP-TN")
    default = Branch(branch_id=2, name="Default")

    for branch, expected in ((special, 10000), (default, 10300)):
        earnings = compute_earnings(500, 20, 5, branch, ELIGIBLE)
        assert earnings.ot_pay == 300
        assert compute_deductions(earnings, ELIGIBLE, branch).esi_base == expected


def test_recoveries_and_shoe_uniform_offset():
    employee = Employee(
        employee_id=1,
        name="A",
        rent_deduction=1000.4,
        advance=500.5,
        shoe_uniform_allowance=250,
    )
    stats = AttendanceStats(food=200, uniform=99.6, rent_deduction=9999, advance=9999)
    earnings = compute_earnings(500, 26, 0, DEFAULT_BRANCH, employee)

    d = compute_deductions(earnings, employee, DEFAULT_BRANCH, stats)

    assert (d.rent, d.advance, d.food, d.uniform, d.shoe_uniform_offset) == (1000, 501, 200, 100, 250)
    assert d.total_deduction == 1000 + 501 + 200 + 100 - 250


def test_rent_and_advance_fall_back_to_attendance_amounts():
    employee = Employee(employee_id=1, name="A")
    stats = AttendanceStats(rent_deduction=700, advance=300)
    earnings = compute_earnings(500, 26, 0, DEFAULT_BRANCH, employee)

    d = compute_deductions(earnings, employee, DEFAULT_BRANCH, stats)

    assert d.rent == 700
    assert d.advance == 300


def test_gross_cap_applies_before_take_home_subtraction():
    employee = Employee(employee_id=1, name="A", pf_eligible=True, esi_eligible=True)
    earnings = compute_earnings(1000, 20, 0, DEFAULT_BRANCH, employee, policy=PayrollPolicy(gross_cap_enabled=True))
    d = compute_deductions(earnings, employee, DEFAULT_BRANCH)

    assert d.pf == 1800
    assert d.esi == 150
    assert assemble(earnings, d).take_home == 15000 - 1800 - 150


def test_assemble_is_deterministic():
    earnings = compute_earnings(487.5, 23, 4.5, DEFAULT_BRANCH, ELIGIBLE)
    d = compute_deductions(earnings, ELIGIBLE, DEFAULT_BRANCH)

    assert assemble(earnings, d) == assemble(earnings, d)
