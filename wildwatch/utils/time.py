from datetime import datetime

import pytz

from wildwatch import config


def now_display(tz_name: str | None = None) -> str:
    """
    Returns the current local time as a display string, e.g. '10/19/2026, 3:04:05 PM'.
    Used as the marker timestamp; never parsed back.
    """
    tz = pytz.timezone(tz_name or config.TIMEZONE)
    now = datetime.now(tz)
    hour = now.strftime("%I").lstrip("0") or "12"
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now.strftime('%M:%S %p')}"
