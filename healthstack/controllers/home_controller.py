from datetime import datetime

from healthstack.utils.dates import isoformat_utc
from healthstack.utils.http import ok


def home_index():
    return ok({"message": "HealthStack API"})


def health_check():
    return ok({"status": "ok", "timestamp": isoformat_utc(datetime.utcnow())})
