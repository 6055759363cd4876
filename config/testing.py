SECRET_KEY = "test-secret"

TIMEZONE = "America/Sao_Paulo"

DEFAULT_WORK_HOURS = {
    "workStartTime": "08:00",
    "lunchStartTime": "12:00",
    "lunchEndTime": "13:00",
    "workEndTime": "17:00",
}

SECTOR_WORK_HOURS = {
    "Operacional": {
        "workStartTime": "07:00",
        "lunchStartTime": "11:00",
        "lunchEndTime": "12:00",
        "workEndTime": "15:00",
    },
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
