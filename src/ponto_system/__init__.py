"""Ponto System package.

Time-bank and payroll closing engine for the employee time-clock app.
Organized by feature modules (schedules, attendance, justifications,
timebank, payroll) with a thin Flask controller layer on top.
"""
