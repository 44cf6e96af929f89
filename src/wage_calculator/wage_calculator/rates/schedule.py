from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import time
from typing import Iterable, Mapping, Optional, Sequence

import pytz

from ..common.datetime_utils import minute_of_day, parse_clock
from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_CSV_FIELDS, DEFAULT_TIME_ZONE, MINUTES_PER_DAY
from ..core.exceptions import ConfigurationError
from .model import OvertimeTier, RegularRate, RegularRatePeriod

logger = logging.getLogger(__name__)

MIDNIGHT = time(0, 0)


class RateSchedule:
    """Validated regular rate periods and overtime tiers.

    Periods partition the day: the first begins at midnight, each ends where
    the next begins and the last ends at midnight. Tiers never regress in
    threshold or percent. Both rules are checked here once, so the pipeline
    stages can rely on them.
    """

    def __init__(self, periods: Sequence[RegularRatePeriod], tiers: Sequence[OvertimeTier] = ()):
        self.periods: tuple[RegularRatePeriod, ...] = tuple(periods)
        self.tiers: tuple[OvertimeTier, ...] = tuple(tiers)
        _check_partition(self.periods)
        _check_tiers(self.tiers)

    @classmethod
    def from_entries(cls, rates: Sequence[RegularRate], tiers: Sequence[OvertimeTier] = ()) -> "RateSchedule":
        """Build the periods from start-of-rate entries.

        If the first entry does not start at midnight, the rate of the last
        entry is carried over midnight by a synthetic entry at 00:00.
        """
        if not rates:
            raise ConfigurationError("No regular rates specified")

        entries = list(rates)
        for entry in entries:
            if not 0 <= entry.from_minute < MINUTES_PER_DAY:
                raise ConfigurationError(f"Regular rate start out of range: {entry.from_minute} minutes")
            require_non_negative(entry.rate_by_100, "Regular rate")

        for previous, current in zip(entries, entries[1:]):
            if current.from_minute <= previous.from_minute:
                raise ConfigurationError(
                    f"Regular rates out of order: {current.begin:%H:%M} does not follow {previous.begin:%H:%M}"
                )

        if entries[0].from_minute > 0:
            carried = RegularRate(from_minute=0, rate_by_100=entries[-1].rate_by_100)
            entries = [carried] if len(entries) == 1 else [carried] + entries

        periods = [
            RegularRatePeriod.of(current.rate_by_100, current.begin, following.begin)
            for current, following in zip(entries, entries[1:] + entries[:1])
        ]
        return cls(periods, tiers)

    @classmethod
    def from_periods(cls, periods: Sequence[RegularRatePeriod], tiers: Sequence[OvertimeTier] = ()) -> "RateSchedule":
        """Accept a cycle of periods starting anywhere in the day.

        The cycle is rotated and the period spanning midnight is split so that
        the result is midnight-anchored.
        """
        if not periods:
            raise ConfigurationError("No regular rates specified")

        total = 0
        for i, period in enumerate(periods):
            following = periods[(i + 1) % len(periods)]
            if period.interval.end != following.interval.begin:
                raise ConfigurationError(
                    f"Regular rate periods leave a gap or overlap at {period.interval.end:%H:%M}"
                )
            total += _length(period)
        if total != MINUTES_PER_DAY:
            raise ConfigurationError(f"Regular rate periods cover {total} minutes instead of a whole day")

        # start from the period that begins after the midnight-spanning one
        first = min(range(len(periods)), key=lambda i: minute_of_day(periods[i].interval.begin))
        cycle = list(periods[first:]) + list(periods[:first])
        entries = [RegularRate(minute_of_day(p.interval.begin), p.rate_by_100) for p in cycle]
        return cls.from_entries(entries, tiers)

    @property
    def period_count(self) -> int:
        return len(self.periods)


@dataclass(frozen=True)
class WageSettings:
    """Plain, fully validated configuration consumed by the calculator."""

    time_zone: pytz.BaseTzInfo
    base_rate_by_100: int
    schedule: RateSchedule

    @classmethod
    def build(
        cls,
        *,
        time_zone: str,
        base_rate_by_100: int,
        regular_rates: Sequence[RegularRate],
        overtime_tiers: Sequence[OvertimeTier] = (),
    ) -> "WageSettings":
        return cls(
            time_zone=load_time_zone(time_zone),
            base_rate_by_100=require_non_negative(base_rate_by_100, "Base rate"),
            schedule=RateSchedule.from_entries(regular_rates, overtime_tiers),
        )

    @classmethod
    def from_settings(cls, settings) -> "WageSettings":
        """Read TIME_ZONE, BASE_RATE, REGULAR_RATES and OVERTIME_LEVELS from a settings module."""
        wage_settings = cls.build(
            time_zone=getattr(settings, "TIME_ZONE", DEFAULT_TIME_ZONE),
            base_rate_by_100=getattr(settings, "BASE_RATE", 0),
            regular_rates=regular_rates_from_config(getattr(settings, "REGULAR_RATES", None) or []),
            overtime_tiers=overtime_tiers_from_config(getattr(settings, "OVERTIME_LEVELS", None) or []),
        )
        logger.info(
            "Wage settings loaded",
            extra={
                "time_zone": wage_settings.time_zone.zone,
                "periods": wage_settings.schedule.period_count,
                "tiers": len(wage_settings.schedule.tiers),
                "action": "settings_loaded",
            },
        )
        return wage_settings


def load_time_zone(name: str) -> pytz.BaseTzInfo:
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise ConfigurationError(f"Unknown time zone: {name}") from None


def regular_rates_from_config(items: Iterable[Mapping]) -> list[RegularRate]:
    """Convert [{"from": "HH:MM", "rate": int}, ...] into RegularRate entries."""
    return [RegularRate(from_minute=_clock(item, "from"), rate_by_100=_number(item, "rate")) for item in items]


def overtime_tiers_from_config(items: Iterable[Mapping]) -> list[OvertimeTier]:
    """Convert [{"after": "HH:MM", "percent": int}, ...] into OvertimeTier entries."""
    return [OvertimeTier(threshold_minutes=_clock(item, "after"), percent=_number(item, "percent")) for item in items]


def csv_fields_from_config(fields: Optional[Mapping[str, str]]) -> dict[str, str]:
    merged = dict(DEFAULT_CSV_FIELDS)
    merged.update(fields or {})
    return merged


def _check_partition(periods: Sequence[RegularRatePeriod]) -> None:
    if not periods:
        raise ConfigurationError("No regular rates specified")
    if periods[0].interval.begin != MIDNIGHT:
        raise ConfigurationError(f"First regular rate period starts at {periods[0].interval.begin:%H:%M}, not midnight")
    if periods[-1].interval.end != MIDNIGHT:
        raise ConfigurationError(f"Last regular rate period ends at {periods[-1].interval.end:%H:%M}, not midnight")

    for previous, current in zip(periods, periods[1:]):
        if previous.interval.end != current.interval.begin:
            raise ConfigurationError(
                f"Regular rate periods leave a gap or overlap between {previous.interval.end:%H:%M} "
                f"and {current.interval.begin:%H:%M}"
            )
        if current.interval.begin <= previous.interval.begin:
            raise ConfigurationError(f"Regular rate periods out of order at {current.interval.begin:%H:%M}")

    for period in periods:
        require_non_negative(period.rate_by_100, "Regular rate")


def _check_tiers(tiers: Sequence[OvertimeTier]) -> None:
    for tier in tiers:
        require_non_negative(tier.threshold_minutes, "Overtime threshold")
        require_non_negative(tier.percent, "Overtime percent")

    for previous, current in zip(tiers, tiers[1:]):
        if current.threshold_minutes < previous.threshold_minutes:
            raise ConfigurationError(
                f"Overtime threshold regresses: {current.threshold_minutes} after {previous.threshold_minutes} minutes"
            )
        if current.percent < previous.percent:
            raise ConfigurationError(f"Overtime percent regresses: {current.percent}% after {previous.percent}%")


def _length(period: RegularRatePeriod) -> int:
    length = (minute_of_day(period.interval.end) - minute_of_day(period.interval.begin)) % MINUTES_PER_DAY
    return length or MINUTES_PER_DAY


def _clock(item: Mapping, key: str) -> int:
    try:
        return parse_clock(str(item[key]))
    except KeyError:
        raise ConfigurationError(f"Missing '{key}' in {dict(item)!r}") from None
    except ValueError:
        raise ConfigurationError(f"Invalid time of day for '{key}': {item[key]!r}") from None


def _number(item: Mapping, key: str) -> int:
    if key not in item:
        raise ConfigurationError(f"Missing '{key}' in {dict(item)!r}")
    return require_non_negative(item[key], key.capitalize())
