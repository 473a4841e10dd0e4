"""HR payroll package.

Organized by feature modules (employees, branches, attendance, payroll) with
a thin Flask controller layer over pure calculation code and repository
interfaces.
"""
