# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum
import typer

from recheck.time import CivilTime

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}")
TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
DAY_OFFSET_PATTERN = re.compile(r"^(?:0|-\d+)$")
ID_RANGE_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)$")


def parse_datetime(
    datetime_param: Optional[str],
    now: pendulum.DateTime,
    civil: CivilTime,
) -> Optional[pendulum.DateTime]:
    """
    Parse a user supplied moment in civil time and return it in UTC.

    Accepts "YYYY-MM-DD[ HH:mm]", "(H)H:mm" for today, "now"/"n",
    "yesterday"/"y" (civil midnight) and whole-day offsets "0", "-1", ...
    Moments after now are rejected.
    """
    if datetime_param is None:
        return None

    moment = __parse_moment(datetime_param.strip(), now, civil)
    if moment > now:
        raise typer.BadParameter(
            f"{datetime_param!r} is in the future; check-ins can only be backdated"
        )
    return moment


def __parse_moment(
    value: str,
    now: pendulum.DateTime,
    civil: CivilTime,
) -> pendulum.DateTime:
    today = civil.today(now)

    if DATE_PATTERN.match(value):
        try:
            parsed = pendulum.parse(value, tz=civil.timezone, strict=False)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime: {e}")
        return cast(pendulum.DateTime, parsed).in_tz("UTC")

    time_match = TIME_PATTERN.match(value)
    if time_match:
        hour, minute = int(time_match.group(1)), int(time_match.group(2))
        if hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")
        return civil.civil_midnight(today).add(hours=hour, minutes=minute)

    if DAY_OFFSET_PATTERN.match(value):
        return civil.civil_midnight(today.add(days=int(value)))

    if value in ("now", "n"):
        return now.in_tz("UTC")
    if value in ("yesterday", "y"):
        return civil.civil_midnight(today.subtract(days=1))
    raise typer.BadParameter(f"Unrecognised datetime {value!r}")


def parse_id_list(id_param: str) -> list[int]:
    """
    "1", "1,2,3", "1-5" or mixes like "1,3-5,8" to sorted unique ids.

    Raises:
        typer.BadParameter: on anything that is not an id or an ascending range
    """
    ids: set[int] = set()
    for part in (part.strip() for part in id_param.split(",")):
        if not part:
            continue
        if part.isdigit():
            ids.add(int(part))
            continue

        range_match = ID_RANGE_PATTERN.match(part)
        if range_match is None:
            raise typer.BadParameter(f"Invalid id or range: {part!r}")
        start, end = int(range_match.group(1)), int(range_match.group(2))
        if start > end:
            raise typer.BadParameter(f"Invalid range: {part!r} (start must be <= end)")
        ids.update(range(start, end + 1))

    if not ids:
        raise typer.BadParameter("No valid ids provided")
    return sorted(ids)
