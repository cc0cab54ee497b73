# SPDX-License-Identifier: MIT

from typing import Callable, TypeAlias, cast

import pendulum

from recheck.model.window import Window

Clock: TypeAlias = Callable[[], pendulum.DateTime]

DEFAULT_UTC_OFFSET_HOURS = 9.0
DAYS_PER_WEEK = 7


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def normalize_year_month(year: int, month: int) -> tuple[int, int]:
    """
    Carry an out-of-range 1-based month into the year.

    (2024, 13) -> (2025, 1), (2024, 0) -> (2023, 12), (2024, -11) -> (2023, 1)
    """
    carried_year = year + (month - 1) // 12
    carried_month = (month - 1) % 12 + 1
    return carried_year, carried_month


def days_since_monday(date: pendulum.Date) -> int:
    # date.weekday() is already Monday=0 ... Sunday=6
    return date.weekday()


class CivilTime:
    """
    Conversions between UTC instants and the wall clock of a fixed UTC offset.

    Every boundary returned here is a UTC instant, so windows can be compared
    directly against stored event timestamps.
    """

    def __init__(self, utc_offset_hours: float = DEFAULT_UTC_OFFSET_HOURS) -> None:
        self.utc_offset_hours = utc_offset_hours
        self.timezone = pendulum.fixed_timezone(round(utc_offset_hours * 3600))

    def __repr__(self) -> str:
        return f"CivilTime(utc_offset_hours={self.utc_offset_hours})"

    def to_civil(self, instant: pendulum.DateTime) -> pendulum.DateTime:
        return instant.in_tz(self.timezone)

    def to_civil_date(self, instant: pendulum.DateTime) -> pendulum.Date:
        return self.to_civil(instant).date()

    def civil_midnight(self, date: pendulum.Date) -> pendulum.DateTime:
        """First instant of a civil date, expressed in UTC."""
        return pendulum.datetime(
            date.year, date.month, date.day, tz=self.timezone
        ).in_tz("UTC")

    def today(self, now: pendulum.DateTime) -> pendulum.Date:
        return self.to_civil_date(now)

    def current_month(self, now: pendulum.DateTime) -> tuple[int, int]:
        today = self.today(now)
        return today.year, today.month

    def day_bounds(self, date: pendulum.Date) -> Window:
        return Window(
            self.civil_midnight(date),
            self.civil_midnight(date.add(days=1)),
        )

    def month_bounds(self, year: int, month: int) -> Window:
        start_year, start_month = normalize_year_month(year, month)
        end_year, end_month = normalize_year_month(year, month + 1)
        return Window(
            self.civil_midnight(pendulum.date(start_year, start_month, 1)),
            self.civil_midnight(pendulum.date(end_year, end_month, 1)),
        )

    def week_start(self, date: pendulum.Date) -> pendulum.Date:
        return date.subtract(days=days_since_monday(date))

    def week_bounds(self, week_offset: int, now: pendulum.DateTime) -> Window:
        """
        Monday-start civil week relative to the week containing now.

        week_offset=0 is the current week, -1 the previous one and so on.
        """
        monday = self.week_start(self.today(now)).add(
            days=week_offset * DAYS_PER_WEEK
        )
        start = self.civil_midnight(monday)
        return Window(start, start.add(days=DAYS_PER_WEEK))


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime)).in_tz("UTC")


def datetime_to_display_civil_time_str(
    datetime: pendulum.DateTime, civil: CivilTime
) -> str:
    return civil.to_civil(datetime).format("HH:mm")


def datetime_to_display_civil_datetime_str(
    datetime: pendulum.DateTime, civil: CivilTime
) -> str:
    return civil.to_civil(datetime).format("YYYY-MM-DD ddd HH:mm")


def month_str(year: int, month: int) -> str:
    year, month = normalize_year_month(year, month)
    return f"{year:04d}-{month:02d}"
