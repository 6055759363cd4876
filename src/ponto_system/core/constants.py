"""Constants and defaults.

Note: Keep payroll rates and brackets here to avoid magic numbers spread across code.
"""

# Mês comercial usado para salário-dia
COMMERCIAL_MONTH_DAYS = 30

# INSS progressivo: (teto da faixa, alíquota, parcela a deduzir)
INSS_BRACKETS = (
    (1412.00, 0.075, 0.0),
    (2666.68, 0.09, 21.18),
    (4000.03, 0.12, 101.18),
    (7786.02, 0.14, 181.18),
)

FGTS_RATE = 0.08
VA_EMPLOYEE_SHARE = 0.11
VT_SALARY_CAP_RATE = 0.06

DEFAULT_TIMEZONE = "America/Sao_Paulo"

DEFAULT_WORK_HOURS = {
    "workStartTime": "08:00",
    "lunchStartTime": "12:00",
    "lunchEndTime": "13:00",
    "workEndTime": "17:00",
}

ALL_EMPLOYEES = "all"
