import json
import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Fuso usado para derivar a data local das batidas
TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")

# Jornada padrão da empresa (HH:MM)
DEFAULT_WORK_HOURS = {
    "workStartTime": os.getenv("WORK_START_TIME", "08:00"),
    "lunchStartTime": os.getenv("LUNCH_START_TIME", "12:00"),
    "lunchEndTime": os.getenv("LUNCH_END_TIME", "13:00"),
    "workEndTime": os.getenv("WORK_END_TIME", "17:00"),
}

# {"Operacional": {"workStartTime": "07:00", ...}}
SECTOR_WORK_HOURS = json.loads(os.getenv("SECTOR_WORK_HOURS_JSON", "{}"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
