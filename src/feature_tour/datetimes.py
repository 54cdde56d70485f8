"""Date, time and time zone handling."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

UTC = timezone.utc


def _local_now() -> datetime:
    return datetime.now(timezone.utc).astimezone()


def describe_moment(moment: datetime) -> list[str]:
    """Render the local date, local time and UTC timestamp of ``moment``.

    Naive datetimes are treated as local time.
    """

    local = moment.astimezone() if moment.tzinfo is None else moment
    return [
        f"Current Date: {local.date().isoformat()}",
        f"Current Time: {local.time().isoformat()}",
        f"Current UTC Time: {local.astimezone(UTC).isoformat()}",
    ]


def demonstrate_date_time_api(clock: Callable[[], datetime] | None = None) -> None:
    now = (clock or _local_now)()
    for line in describe_moment(now):
        print(line)


def run_all() -> None:
    demonstrate_date_time_api()


if __name__ == "__main__":
    run_all()
