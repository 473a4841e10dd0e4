"""Example: run a month's payroll through the service layer (no Flask).

Usage: python -m examples.example_usage 2025-01 [branch_id]
"""

import importlib
import logging
import sys

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_payroll.hr_payroll.common.datetime_utils import YearMonth
from src.hr_payroll.hr_payroll.container import build_container
from src.hr_payroll.hr_payroll.payroll.export import build_register_workbook
from src.hr_payroll.hr_payroll.payroll.model import PayrollPolicy


def main():
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, policy=PayrollPolicy.from_settings(settings))

    month = YearMonth.parse(sys.argv[1])
    branch_id = int(sys.argv[2]) if len(sys.argv) > 2 else None
    payslips = container.payroll_service.run_month(month, branch_id=branch_id)

    for p in payslips:
        print(f"{p.employee.code:>8} {p.employee.name:<30} days={p.worked_days:<5} net={p.result.take_home:,.2f}")

    path = f"payroll_{month}.xlsx"
    with open(path, "wb") as fh:
        fh.write(build_register_workbook(payslips))
    print(f"wrote {path}")


if __name__ == "__main__":
    main()
