"""Locale first-day-of-week resolution, without touching the environment."""

from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class WeekStart(Enum):
    SATURDAY = "sat"
    SUNDAY = "sun"
    MONDAY = "mon"


# language[-extlang][-script][-region], each subtag followed by end or "-"
_TAG_RE = re.compile(
    r"^([a-z]{2,3})"
    r"(?:-([a-z]{3})(?=$|-))?"
    r"(?:-([a-z]{4})(?=$|-))?"
    r"(?:-([a-z]{2}|\d{3})(?=$|-))?",
    re.IGNORECASE,
)


def _pairs(codes: str) -> frozenset[str]:
    return frozenset(codes[i:i + 2] for i in range(0, len(codes), 2))


SATURDAY_REGIONS = _pairs("AEAFBHDJDZEGIQIRJOKWLYOMQASDSY")
SUNDAY_REGIONS = _pairs(
    "AGARASAUBDBRBSBTBWBZCACNCODMDOETGTGUHKHNIDILINJMJPKEKHKRLAMHMMMOMTMXMZ"
    "NINPPAPEPHPKPRPTPYSASGSVTHTTTWUMUSVEVIWSYEZAZW"
)
SATURDAY_LANGUAGES = frozenset({"ar", "arq", "arz", "fa"})
SUNDAY_LANGUAGES = _pairs(
    "amasbndzengnguhehiidjajvkmknkolomhmlmrmtmyneomorpapssdsmsnsutatethtnurzhzu"
)


@dataclass(frozen=True)
class LocaleTag:
    language: str
    extlang: str | None = None
    script: str | None = None
    region: str | None = None


def parse_locale(tag: str) -> LocaleTag | None:
    """Split a BCP-47-like tag into its subtags.

    Returns None when the tag does not start with a 2-3 letter language
    subtag. Anything after the recognised subtags (variants, extensions,
    private use) is ignored.
    """
    match = _TAG_RE.match(tag or "")
    if match is None:
        return None
    language, extlang, script, region = match.groups()
    return LocaleTag(
        language=language.lower(),
        extlang=extlang.lower() if extlang else None,
        script=script.title() if script else None,
        region=region.upper() if region else None,
    )


def resolve(locale: str) -> WeekStart:
    """Return the first day of the week for *locale*.

    A region subtag decides on its own; the language only matters when no
    region is given. Unknown or malformed tags fall back to Monday.
    """
    parsed = parse_locale(locale)
    if parsed is None:
        logger.debug("Unrecognised locale tag %r, weeks start on Monday", locale)
        return WeekStart.MONDAY

    if parsed.region:
        if parsed.region in SATURDAY_REGIONS:
            return WeekStart.SATURDAY
        if parsed.region in SUNDAY_REGIONS:
            return WeekStart.SUNDAY
    else:
        if parsed.language in SUNDAY_LANGUAGES:
            return WeekStart.SUNDAY
        if parsed.language in SATURDAY_LANGUAGES:
            return WeekStart.SATURDAY

    return WeekStart.MONDAY


def weekday_labels(week_start: WeekStart,
                   labels: list[str] | None = None) -> list[str]:
    """Reorder seven Monday-first weekday names into grid column order.

    *labels* defaults to the short names of the current C locale
    (``calendar.day_abbr``). Each name lands on the column that
    ``calendar_logic.column_of`` gives its weekday, so header and dates
    line up under every week start.
    """
    # imported here: calendar_logic depends on WeekStart
    from calendar_logic import column_for_weekday

    names = list(labels) if labels is not None else list(calendar.day_abbr)
    if len(names) != 7:
        raise ValueError(f"expected 7 weekday labels, got {len(names)}")

    ordered = [""] * 7
    for iso_weekday, name in enumerate(names, start=1):
        ordered[column_for_weekday(iso_weekday, week_start) - 1] = name
    return ordered
