from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, Response, jsonify, request, send_file

from ..common.datetime_utils import YearMonth
from ..core.exceptions import NotFoundError, ValidationError
from .export import build_register_workbook, payslip_lines, register_row, rows_to_csv
from .model import Payslip
from .statutory import esi_contribution, esi_report_rows, pf_contribution, pf_report_rows

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def payslip_to_dict(payslip: Payslip) -> dict:
    return {
        "employee_id": payslip.employee.employee_id,
        "employee_name": payslip.employee.name,
        "branch": payslip.branch.name,
        "month": str(payslip.month),
        "salary_configured": payslip.salary_configured,
        "per_day_salary": payslip.per_day_salary,
        "worked_days": payslip.worked_days,
        "stats": asdict(payslip.stats),
        "earnings": asdict(payslip.earnings),
        "deductions": asdict(payslip.deductions),
        "result": asdict(payslip.result),
        "pf_contribution": asdict(pf_contribution(payslip)),
        "esi_contribution": asdict(esi_contribution(payslip)),
        "lines": [{"label": label, "amount": amount} for label, amount in payslip_lines(payslip)],
    }


def register(app: Flask, container) -> None:
    service = container.payroll_service

    def _branch_filter():
        value = request.args.get("branch_id")
        if value in (None, "", "all"):
            return None
        try:
            return int(value)
        except ValueError:
            raise ValidationError(f"Invalid branch_id: {value!r}")

    @app.errorhandler(ValidationError)
    def _validation_error(e):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/payroll/<month>/employees/<int:employee_id>", endpoint="api_payslip")
    def api_payslip(month, employee_id):
        payslip = service.compute_for_employee(employee_id, YearMonth.parse(month))
        return jsonify({"success": True, "payslip": payslip_to_dict(payslip)})

    @app.route("/api/payroll/<month>", endpoint="api_payroll_register")
    def api_payroll_register(month):
        payslips = service.run_month(YearMonth.parse(month), branch_id=_branch_filter())
        return jsonify({"success": True, "rows": [register_row(p) for p in payslips]})

    @app.route("/payroll/<month>/export.xlsx", endpoint="export_payroll_register")
    def export_payroll_register(month):
        ym = YearMonth.parse(month)
        payslips = service.run_month(ym, branch_id=_branch_filter())
        output = io.BytesIO(build_register_workbook(payslips))
        return send_file(output, download_name=f"payroll_{ym}.xlsx", as_attachment=True, mimetype=XLSX_MIMETYPE)

    @app.route("/payroll/<month>/pf.csv", endpoint="export_pf_report")
    def export_pf_report(month):
        ym = YearMonth.parse(month)
        rows = pf_report_rows(service.run_month(ym, branch_id=_branch_filter()))
        return _csv_download(rows, f"pf_report_{ym}.csv")

    @app.route("/payroll/<month>/esi.csv", endpoint="export_esi_report")
    def export_esi_report(month):
        ym = YearMonth.parse(month)
        rows = esi_report_rows(service.run_month(ym, branch_id=_branch_filter()))
        return _csv_download(rows, f"esi_report_{ym}.csv")

    def _csv_download(rows, filename: str):
        if not rows:
            return jsonify({"success": False, "message": "No employee data found for this month"}), 404
        return Response(
            rows_to_csv(rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
