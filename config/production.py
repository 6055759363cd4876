import json
import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")

DEFAULT_WORK_HOURS = {
    "workStartTime": os.getenv("WORK_START_TIME", "08:00"),
    "lunchStartTime": os.getenv("LUNCH_START_TIME", "12:00"),
    "lunchEndTime": os.getenv("LUNCH_END_TIME", "13:00"),
    "workEndTime": os.getenv("WORK_END_TIME", "17:00"),
}

SECTOR_WORK_HOURS = json.loads(os.getenv("SECTOR_WORK_HOURS_JSON", "{}"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
