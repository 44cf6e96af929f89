"""Wage Calculator package.

Turns timesheet shift records into monthly salaries. The calculation core lives
in feature modules (shifts, rates, payroll); timesheets, the Flask controller
layer and the CLI are thin collaborators around it.
"""
