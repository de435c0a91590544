"""
Relabel instants between IANA time zones using the timeapi.io conversion service.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Union

import requests

import config

logger = logging.getLogger(__name__)

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Converted:
    instant: datetime
    converted: bool = True


@dataclass(frozen=True)
class ConversionFailed:
    """The service could not convert; ``instant`` is the untouched input."""
    instant: datetime
    reason: str
    converted: bool = False


ConversionResult = Union[Converted, ConversionFailed]


def convert_time(instant: datetime, from_timezone: str, to_timezone: str) -> ConversionResult:
    """
    Convert a wall-clock time from one time zone to another.

    Args:
        instant (datetime): The time to convert, as wall clock in ``from_timezone``.
        from_timezone (str): IANA name of the source zone.
        to_timezone (str): IANA name of the target zone.

    Returns:
        Converted | ConversionFailed: the converted time, or the original time
        together with the reason the conversion failed.
    """
    payload = {
        "fromTimeZone": from_timezone,
        "dateTime": instant.strftime(DATETIME_FORMAT),
        "toTimeZone": to_timezone,
        "dstAmbiguity": ""
    }

    try:
        response = requests.post(config.TIME_API_URL, json=payload, timeout=config.TIME_API_TIMEOUT)
        response.raise_for_status()
        result = response.json()["conversionResult"]["dateTime"]
        return Converted(instant=datetime.fromisoformat(result).replace(tzinfo=None))
    except (requests.RequestException, KeyError, TypeError, ValueError) as e:
        logger.warning("Time zone conversion %s -> %s failed for %s: %s", from_timezone, to_timezone, instant, e)
        return ConversionFailed(instant=instant, reason=str(e))
