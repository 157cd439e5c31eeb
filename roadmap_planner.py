"""
Roadmap Planning Tool
Lays out roadmap items against sprint or calendar timelines, splits each item
into Requirements & UX / Development / QA subtasks, and prints the resulting
plan alongside the sprint calendar.

Features:
  - Working-day calendar with a configurable weekend
  - Sprint number <-> calendar window mapping (before and after the anchor sprint)
  - Fixed 20/60/20 subtask allocation with small-span handling
  - Manual subtask overrides, revalidated whenever an item is retimed
  - Code freeze and release markers resolved against the sprint calendar
"""

import argparse
import math
import sys
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple

import numpy as np
import pandas as pd


# ── Constants ────────────────────────────────────────────────────────────────

# Python weekday indices: Monday=0 ... Sunday=6
WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
DEFAULT_WEEKEND_DAYS = frozenset({5, 6})

DEFAULT_FIRST_SPRINT_NUMBER = 71
DEFAULT_FIRST_SPRINT_START = date(2026, 1, 1)
DEFAULT_WORKING_DAYS_PER_SPRINT = 10
# 26 sprints covers a full year of two-week sprints
DEFAULT_SPRINT_COUNT = 26

# Upper bound for the forward scan in sprint_for_date
SPRINT_SCAN_LIMIT = 1000

SUBTASK_ORDER = ["REQ_UX", "DEV", "QA"]

SUBTASK_DISTRIBUTION = {
    "REQ_UX": Decimal("0.20"),
    "DEV": Decimal("0.60"),
    "QA": Decimal("0.20"),
}

SUBTASK_INFO = {
    "REQ_UX": {"label": "Requirements & UX", "color": "#c4b5fd", "percentage": 20},
    "DEV": {"label": "Development", "color": "#60a5fa", "percentage": 60},
    "QA": {"label": "QA", "color": "#fcd34d", "percentage": 20},
}

# Override validation reasons, in the order they are checked
END_BEFORE_START = "END_BEFORE_START"
START_BEFORE_ITEM_START = "START_BEFORE_ITEM_START"
END_AFTER_ITEM_END = "END_AFTER_ITEM_END"

OVERRIDE_MESSAGES = {
    END_BEFORE_START: "End date must be on or after start date",
    START_BEFORE_ITEM_START: "Start date cannot be before item start date",
    END_AFTER_ITEM_END: "End date cannot be after item end date",
}


# ── Errors ───────────────────────────────────────────────────────────────────

class InvalidRangeError(ValueError):
    """An ordered range was given with its end before its start."""


class SprintConfigError(ValueError):
    """The sprint configuration cannot describe a usable calendar."""


# ── Date Helpers ─────────────────────────────────────────────────────────────

def norm_date(d):
    """Normalise to a plain calendar date (drops any time-of-day)."""
    if isinstance(d, pd.Timestamp):
        d = d.to_pydatetime()
    if isinstance(d, datetime):
        return d.date()
    if isinstance(d, date):
        return d
    raise TypeError(f"norm_date expected date or datetime, got {type(d).__name__}: {d!r}")


def clean_str(val):
    """Return stripped string or empty string for NaN/None."""
    if val is None or (isinstance(val, float) and math.isnan(val)):
        return ""
    return str(val).strip()


def parse_date(val, context=""):
    """Parse a date from user input: date, datetime, Timestamp, or string."""
    ctx = f" ({context})" if context else ""
    if val is None or (not isinstance(val, str) and pd.isna(val)):
        raise ValueError(f"Date is blank{ctx}")
    if isinstance(val, (date, pd.Timestamp)):
        return norm_date(val)
    if isinstance(val, str):
        val = val.strip()
        if not val:
            raise ValueError(f"Date is blank{ctx}")
        for fmt in ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y"):
            try:
                return datetime.strptime(val, fmt).date()
            except ValueError:
                pass
        raise ValueError(f"Cannot parse date{ctx}: {val!r}. Expected YYYY-MM-DD or DD/MM/YYYY")
    raise ValueError(f"Cannot parse date{ctx}: {val!r}")


def format_date(d):
    """Display form, e.g. '01 Jan 2026'."""
    return norm_date(d).strftime("%d %b %Y")


def date_range(start, end):
    """Every calendar day from start to end (inclusive), weekends included."""
    d, end_d = norm_date(start), norm_date(end)
    days = []
    while d <= end_d:
        days.append(d)
        d += timedelta(days=1)
    return days


# ── Working-Day Calendar ─────────────────────────────────────────────────────

def _check_weekend_days(weekend_days):
    bad = [d for d in weekend_days if not isinstance(d, int) or not 0 <= d <= 6]
    if bad:
        raise SprintConfigError(
            f"Weekend days must be weekday indices 0-6 (Mon=0), got {bad!r}")
    if len(set(weekend_days)) >= 7:
        raise SprintConfigError("Every day of the week is a weekend day; no working days remain.")


def _weekmask(weekend_days):
    _check_weekend_days(weekend_days)
    return [day not in weekend_days for day in range(7)]


def is_working_day(d, weekend_days=DEFAULT_WEEKEND_DAYS):
    """Check if a date is a working day (its weekday is not a weekend day)."""
    return norm_date(d).weekday() not in weekend_days


def next_working_day(d, weekend_days=DEFAULT_WEEKEND_DAYS):
    """Return d itself if it is a working day, otherwise the first working day after it."""
    _check_weekend_days(weekend_days)
    current = norm_date(d)
    while not is_working_day(current, weekend_days):
        current += timedelta(days=1)
    return current


def add_working_days(d, n, weekend_days=DEFAULT_WEEKEND_DAYS):
    """Snap d to the next working day, then advance exactly n more working days.

    add_working_days(d, 0) is the snapped date, not d itself.
    """
    if n < 0:
        raise ValueError(
            f"add_working_days expects n >= 0, got {n}. Use subtract_working_days to walk backward.")
    current = next_working_day(d, weekend_days)
    added = 0
    while added < n:
        current += timedelta(days=1)
        if is_working_day(current, weekend_days):
            added += 1
    return current


def subtract_working_days(d, n, weekend_days=DEFAULT_WEEKEND_DAYS):
    """Snap d to the next working day, then step back exactly n working days.

    Mirrors add_working_days: add_working_days(subtract_working_days(d, n), n)
    is next_working_day(d).
    """
    if n < 0:
        raise ValueError(
            f"subtract_working_days expects n >= 0, got {n}. Use add_working_days to walk forward.")
    current = next_working_day(d, weekend_days)
    removed = 0
    while removed < n:
        current -= timedelta(days=1)
        if is_working_day(current, weekend_days):
            removed += 1
    return current


def count_working_days(start, end, weekend_days=DEFAULT_WEEKEND_DAYS):
    """Count working days between start and end (inclusive). 0 if end < start."""
    start_d, end_d = norm_date(start), norm_date(end)
    if end_d < start_d:
        return 0
    # busday_count excludes its end date
    return int(np.busday_count(start_d, end_d + timedelta(days=1),
                               weekmask=_weekmask(weekend_days)))


# ── Sprint Mapping ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SprintConfig:
    """Anchor and length of the sprint scheme. Immutable per calculation."""

    first_sprint_number: int = DEFAULT_FIRST_SPRINT_NUMBER
    first_sprint_start_date: date = DEFAULT_FIRST_SPRINT_START
    working_days_per_sprint: int = DEFAULT_WORKING_DAYS_PER_SPRINT
    weekend_days: frozenset = DEFAULT_WEEKEND_DAYS

    def __post_init__(self):
        object.__setattr__(self, "first_sprint_start_date",
                           parse_date(self.first_sprint_start_date, "first sprint start date"))
        object.__setattr__(self, "weekend_days", frozenset(self.weekend_days))


@dataclass(frozen=True)
class SprintWindow:
    number: int
    start_date: date
    end_date: date


def _check_sprint_length(config):
    if config.working_days_per_sprint < 1:
        raise SprintConfigError(
            f"Working days per sprint must be at least 1 (got {config.working_days_per_sprint}).")


def sprint_start_date(sprint_number, config):
    """First working day of the given sprint."""
    _check_sprint_length(config)
    anchor = config.first_sprint_start_date
    offset = sprint_number - config.first_sprint_number
    if offset == 0:
        return next_working_day(anchor, config.weekend_days)
    if offset > 0:
        return add_working_days(anchor, offset * config.working_days_per_sprint, config.weekend_days)
    return subtract_working_days(anchor, -offset * config.working_days_per_sprint, config.weekend_days)


def sprint_end_date(sprint_number, config):
    """Last working day of the given sprint."""
    start = sprint_start_date(sprint_number, config)
    return add_working_days(start, config.working_days_per_sprint - 1, config.weekend_days)


def sprint_for_date(d, config):
    """Sprint number whose window contains d.

    Dates before the first sprint's start give first_sprint_number - 1.
    Returns None when the config is malformed or d lies more than
    SPRINT_SCAN_LIMIT sprints past the anchor.
    """
    d = norm_date(d)
    if d < config.first_sprint_start_date:
        return config.first_sprint_number - 1
    errors, _ = validate_sprint_config(config)
    if errors:
        return None

    end = sprint_end_date(config.first_sprint_number, config)
    for sprint_number in range(config.first_sprint_number,
                               config.first_sprint_number + SPRINT_SCAN_LIMIT):
        if d <= end:
            return sprint_number
        # The next sprint ends working_days_per_sprint working days later
        end = add_working_days(end, config.working_days_per_sprint, config.weekend_days)
    return None


def generate_sprint_windows(start_sprint, count, config):
    """Sprint windows for start_sprint .. start_sprint + count - 1."""
    if count < 0:
        raise ValueError(f"Sprint count must be zero or more (got {count}).")
    windows = []
    for number in range(start_sprint, start_sprint + count):
        windows.append(SprintWindow(
            number=number,
            start_date=sprint_start_date(number, config),
            end_date=sprint_end_date(number, config),
        ))
    return windows


# ── Subtask Allocation ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class Subtask:
    """One work phase of a roadmap item. Override dates replace auto dates per boundary."""

    id: str
    type: str
    auto_start_date: date
    auto_end_date: date
    override_start_date: Optional[date] = None
    override_end_date: Optional[date] = None

    @property
    def has_override(self):
        return self.override_start_date is not None or self.override_end_date is not None

    @property
    def effective_start_date(self):
        if self.override_start_date is not None:
            return self.override_start_date
        return self.auto_start_date

    @property
    def effective_end_date(self):
        if self.override_end_date is not None:
            return self.override_end_date
        return self.auto_end_date


def _new_id():
    return str(uuid.uuid4())


def _round_half_up(value):
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _rebalance(req_days, qa_days, total):
    """Force Development to 1 day, shrinking the larger of REQ_UX/QA (REQ_UX on ties)
    one day at a time until the phases sum to total. Neither drops below 1.
    Returns (req_days, dev_days, qa_days)."""
    dev_days = 1
    while req_days + dev_days + qa_days > total:
        if req_days >= qa_days and req_days > 1:
            req_days -= 1
        elif qa_days > 1:
            qa_days -= 1
        else:
            break
    return req_days, total - req_days - qa_days, qa_days


def allocate_working_days(total_working_days):
    """Split a working-day span into REQ_UX / DEV / QA day counts.

    The three counts always sum to total_working_days. Spans of 1 or 2 days
    are too short to split and go mostly to Development; from 3 days up each
    phase gets at least one day.
    """
    total = total_working_days
    if total < 0:
        raise ValueError(f"Total working days must be zero or more (got {total}).")
    if total == 0:
        return {"REQ_UX": 0, "DEV": 0, "QA": 0}
    if total == 1:
        return {"REQ_UX": 0, "DEV": 1, "QA": 0}
    if total == 2:
        return {"REQ_UX": 0, "DEV": 1, "QA": 1}

    req_days = max(1, _round_half_up(total * SUBTASK_DISTRIBUTION["REQ_UX"]))
    qa_days = max(1, _round_half_up(total * SUBTASK_DISTRIBUTION["QA"]))
    dev_days = total - req_days - qa_days
    if dev_days < 1:
        req_days, dev_days, qa_days = _rebalance(req_days, qa_days, total)

    return {"REQ_UX": req_days, "DEV": dev_days, "QA": qa_days}


def generate_subtasks(item_start, item_end, weekend_days=DEFAULT_WEEKEND_DAYS):
    """Build the three contiguous subtasks covering [item_start, item_end]."""
    item_start, item_end = norm_date(item_start), norm_date(item_end)
    if item_end < item_start:
        raise InvalidRangeError(
            f"Item end {item_end.isoformat()} is before item start {item_start.isoformat()}")

    allocation = allocate_working_days(count_working_days(item_start, item_end, weekend_days))

    subtasks = []
    cursor = item_start
    for subtask_type in SUBTASK_ORDER:
        days = allocation[subtask_type]
        if days > 0:
            start = next_working_day(cursor, weekend_days)
            end = add_working_days(start, days - 1, weekend_days)
            cursor = end + timedelta(days=1)
        else:
            # Placeholder pinned to the item start; the cursor stays put
            start = end = item_start
        subtasks.append(Subtask(
            id=_new_id(),
            type=subtask_type,
            auto_start_date=start,
            auto_end_date=end,
        ))
    return subtasks


def generate_sprint_subtasks(start_sprint, end_sprint, config):
    """generate_subtasks for an item timed by sprint numbers."""
    item_start, item_end = resolve_timing(SprintRange(start_sprint, end_sprint), config)
    return generate_subtasks(item_start, item_end, config.weekend_days)


def effective_dates(subtask):
    """(start, end) with overrides applied."""
    return subtask.effective_start_date, subtask.effective_end_date


def recalculate_subtasks(existing_subtasks, new_item_start, new_item_end,
                         weekend_days=DEFAULT_WEEKEND_DAYS):
    """Regenerate auto dates for new item bounds, keeping overrides that still fit.

    Subtasks keep the id of the existing subtask of the same type.
    """
    new_item_start, new_item_end = norm_date(new_item_start), norm_date(new_item_end)
    existing_by_type = {s.type: s for s in existing_subtasks}

    subtasks = []
    for subtask in generate_subtasks(new_item_start, new_item_end, weekend_days):
        existing = existing_by_type.get(subtask.type)
        if existing is not None:
            subtask = replace(subtask, id=existing.id)
            if existing.has_override:
                candidate = replace(subtask,
                                    override_start_date=existing.override_start_date,
                                    override_end_date=existing.override_end_date)
                if validate_subtask_override(candidate, new_item_start, new_item_end) is None:
                    subtask = candidate
        subtasks.append(subtask)
    return subtasks


# ── Override Validation ──────────────────────────────────────────────────────

def validate_override(effective_start, effective_end, item_start, item_end):
    """Return None if the range fits inside the item, else the first failing reason."""
    effective_start, effective_end = norm_date(effective_start), norm_date(effective_end)
    item_start, item_end = norm_date(item_start), norm_date(item_end)
    if effective_end < effective_start:
        return END_BEFORE_START
    if effective_start < item_start:
        return START_BEFORE_ITEM_START
    if effective_end > item_end:
        return END_AFTER_ITEM_END
    return None


def validate_subtask_override(subtask, item_start, item_end):
    start, end = effective_dates(subtask)
    return validate_override(start, end, item_start, item_end)


# ── Item Timing ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SprintRange:
    """Item runs from the start of start_sprint to the end of end_sprint."""

    start_sprint: int
    end_sprint: int

    def __post_init__(self):
        if self.end_sprint < self.start_sprint:
            raise InvalidRangeError(
                f"End sprint {self.end_sprint} is before start sprint {self.start_sprint}")


@dataclass(frozen=True)
class DateRange:
    """Item runs between two explicit calendar dates (inclusive)."""

    start_date: date
    end_date: date

    def __post_init__(self):
        object.__setattr__(self, "start_date", parse_date(self.start_date, "item start date"))
        object.__setattr__(self, "end_date", parse_date(self.end_date, "item end date"))
        if self.end_date < self.start_date:
            raise InvalidRangeError(
                f"End date {self.end_date.isoformat()} is before start date {self.start_date.isoformat()}")


@dataclass(frozen=True)
class RoadmapItem:
    id: str
    name: str
    timing: object  # SprintRange | DateRange
    subtasks: Tuple[Subtask, ...]
    created_at: datetime
    updated_at: datetime


def resolve_timing(timing, config):
    """Calendar (start, end) of a SprintRange or DateRange."""
    if isinstance(timing, SprintRange):
        return (sprint_start_date(timing.start_sprint, config),
                sprint_end_date(timing.end_sprint, config))
    if isinstance(timing, DateRange):
        return timing.start_date, timing.end_date
    raise TypeError(f"Item timing must be SprintRange or DateRange, got {type(timing).__name__}")


def describe_timing(timing):
    if isinstance(timing, SprintRange):
        if timing.start_sprint == timing.end_sprint:
            return f"Sprint {timing.start_sprint}"
        return f"Sprint {timing.start_sprint} - {timing.end_sprint}"
    return f"{format_date(timing.start_date)} - {format_date(timing.end_date)}"


def create_item(name, timing, config, now, item_id=None):
    """New roadmap item with freshly generated subtasks (no overrides)."""
    name = clean_str(name)
    if not name:
        raise ValueError("Item name is empty.")
    item_start, item_end = resolve_timing(timing, config)
    return RoadmapItem(
        id=item_id or _new_id(),
        name=name,
        timing=timing,
        subtasks=tuple(generate_subtasks(item_start, item_end, config.weekend_days)),
        created_at=now,
        updated_at=now,
    )


def create_item_from_duration(name, start_sprint, duration_sprints, config, now):
    """Sprint-timed item lasting duration_sprints sprints from start_sprint."""
    if duration_sprints < 1:
        raise InvalidRangeError(f"Duration must be at least 1 sprint (got {duration_sprints}).")
    timing = SprintRange(start_sprint, start_sprint + duration_sprints - 1)
    return create_item(name, timing, config, now)


def retime_item(item, timing, config, now):
    """Move/resize an item. Auto dates are recomputed; overrides survive only if still valid."""
    if timing == item.timing:
        return item
    item_start, item_end = resolve_timing(timing, config)
    subtasks = recalculate_subtasks(item.subtasks, item_start, item_end, config.weekend_days)
    return replace(item, timing=timing, subtasks=tuple(subtasks), updated_at=now)


def _subtask_index(item, subtask_type):
    for i, subtask in enumerate(item.subtasks):
        if subtask.type == subtask_type:
            return i
    raise ValueError(f"Item '{item.name}' has no subtask of type {subtask_type!r}. "
                     f"Valid: {', '.join(SUBTASK_ORDER)}")


def _replace_subtask(item, index, subtask, now):
    subtasks = list(item.subtasks)
    subtasks[index] = subtask
    return replace(item, subtasks=tuple(subtasks), updated_at=now)


def override_subtask(item, subtask_type, start, end, config, now):
    """Set override dates on one subtask (None leaves that boundary on auto).

    Returns (item, reason). The override is applied even when reason is not
    None; the caller decides whether to keep the returned item.
    """
    index = _subtask_index(item, subtask_type)
    override_start = parse_date(start, "override start") if start is not None else None
    override_end = parse_date(end, "override end") if end is not None else None
    subtask = replace(item.subtasks[index],
                      override_start_date=override_start,
                      override_end_date=override_end)
    item_start, item_end = resolve_timing(item.timing, config)
    reason = validate_subtask_override(subtask, item_start, item_end)
    return _replace_subtask(item, index, subtask, now), reason


def reset_subtask_override(item, subtask_type, now):
    """Drop both override dates so the subtask falls back to its auto dates."""
    index = _subtask_index(item, subtask_type)
    subtask = replace(item.subtasks[index], override_start_date=None, override_end_date=None)
    return _replace_subtask(item, index, subtask, now)


def item_start_date(item, config):
    return resolve_timing(item.timing, config)[0]


def sort_items_by_start(items, config):
    """Items ordered by start date, earliest first (stable for ties)."""
    return sorted(items, key=lambda item: item_start_date(item, config))


# ── Markers ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ReleaseMarker:
    name: str
    marker_date: date

    def __post_init__(self):
        object.__setattr__(self, "marker_date", parse_date(self.marker_date, f"release '{self.name}'"))


@dataclass(frozen=True)
class CodeFreezeMarker:
    """Code freeze at the end of after_sprint."""

    name: str
    after_sprint: int


def code_freeze_date(marker, config):
    return sprint_end_date(marker.after_sprint, config)


def release_sprint(marker, config):
    """Sprint the release date falls in (see sprint_for_date for sentinels)."""
    return sprint_for_date(marker.marker_date, config)


# ── Config Validation ────────────────────────────────────────────────────────

def validate_sprint_config(config):
    """Validate a sprint configuration. Returns (errors, warnings) lists."""
    errors = []
    warnings = []

    wdps = config.working_days_per_sprint
    if not isinstance(wdps, int) or wdps < 1:
        errors.append(f"Working days per sprint must be a whole number of at least 1 (got {wdps!r}).")

    bad = [d for d in config.weekend_days if not isinstance(d, int) or not 0 <= d <= 6]
    if bad:
        errors.append(f"Weekend days must be weekday indices 0-6 (Mon=0), got {bad!r}.")
    elif len(config.weekend_days) >= 7:
        errors.append("Every day of the week is a weekend day; no working days remain.")
    elif config.first_sprint_start_date.weekday() in config.weekend_days:
        snapped = next_working_day(config.first_sprint_start_date, config.weekend_days)
        warnings.append(
            f"First sprint start date {config.first_sprint_start_date.isoformat()} falls on a weekend; "
            f"sprint {config.first_sprint_number} starts {snapped.isoformat()}.")

    return errors, warnings


# ── Plan Tables ──────────────────────────────────────────────────────────────

def sprint_windows_frame(windows, weekend_days=DEFAULT_WEEKEND_DAYS):
    """One row per sprint window: sprint, start, end, working_days."""
    rows = [{
        "sprint": w.number,
        "start": w.start_date,
        "end": w.end_date,
        "working_days": count_working_days(w.start_date, w.end_date, weekend_days),
    } for w in windows]
    return pd.DataFrame(rows, columns=["sprint", "start", "end", "working_days"])


def subtasks_frame(subtasks, weekend_days=DEFAULT_WEEKEND_DAYS):
    """One row per subtask using its effective dates."""
    rows = []
    for s in subtasks:
        start, end = effective_dates(s)
        rows.append({
            "type": s.type,
            "label": SUBTASK_INFO[s.type]["label"],
            "start": start,
            "end": end,
            "working_days": count_working_days(start, end, weekend_days),
            "overridden": s.has_override,
        })
    return pd.DataFrame(rows, columns=["type", "label", "start", "end", "working_days", "overridden"])


# ── Summary ──────────────────────────────────────────────────────────────────

def print_sprint_calendar(windows, config):
    """Print the sprint windows as a table."""
    print()
    print("  Sprint calendar:")
    if not windows:
        print("    (no sprints)")
        return
    frame = sprint_windows_frame(windows, config.weekend_days)
    frame["start"] = frame["start"].map(format_date)
    frame["end"] = frame["end"].map(format_date)
    for line in frame.to_string(index=False).splitlines():
        print(f"    {line}")


def print_plan_summary(item, config):
    """Print an item's timing, subtask plan, and any override problems."""
    item_start, item_end = resolve_timing(item.timing, config)
    total = count_working_days(item_start, item_end, config.weekend_days)

    print()
    print("=" * 60)
    print(f"  ROADMAP ITEM: {item.name}")
    print("=" * 60)
    print(f"  Timing:        {describe_timing(item.timing)}")
    print(f"  Dates:         {format_date(item_start)} - {format_date(item_end)}")
    print(f"  Working days:  {total}")
    print()
    print("  Subtasks:")
    allocation = allocate_working_days(total)
    for s in item.subtasks:
        start, end = effective_dates(s)
        info = SUBTASK_INFO[s.type]
        days = count_working_days(start, end, config.weekend_days)
        if allocation[s.type] == 0 and not s.has_override:
            print(f"    {info['label']:<18} -- (span too short)")
            continue
        marker = " *" if s.has_override else ""
        print(f"    {info['label']:<18} {start.strftime('%d %b')} - {end.strftime('%d %b')} "
              f"({days} wd){marker}")

    for s in item.subtasks:
        reason = validate_subtask_override(s, item_start, item_end) if s.has_override else None
        if reason:
            print(f"  WARNING: {SUBTASK_INFO[s.type]['label']} override: {OVERRIDE_MESSAGES[reason]}")

    print("=" * 60)
    print()


# ── Main ─────────────────────────────────────────────────────────────────────

def _fail(message):
    print(f"  ERROR: {message}")
    sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Roadmap Planning Tool: sprint calendar and subtask plan for a roadmap item"
    )
    parser.add_argument(
        "--first-sprint", type=int, default=DEFAULT_FIRST_SPRINT_NUMBER,
        help=f"Anchor sprint number (default: {DEFAULT_FIRST_SPRINT_NUMBER})"
    )
    parser.add_argument(
        "--first-sprint-start", default=DEFAULT_FIRST_SPRINT_START.isoformat(),
        help=f"First day of the anchor sprint, YYYY-MM-DD (default: {DEFAULT_FIRST_SPRINT_START.isoformat()})"
    )
    parser.add_argument(
        "--sprint-days", type=int, default=DEFAULT_WORKING_DAYS_PER_SPRINT,
        help=f"Working days per sprint (default: {DEFAULT_WORKING_DAYS_PER_SPRINT})"
    )
    parser.add_argument(
        "--weekend", type=int, nargs="+", default=sorted(DEFAULT_WEEKEND_DAYS),
        help="Weekend weekday indices, Mon=0 ... Sun=6 (default: 5 6)"
    )
    parser.add_argument(
        "--windows", type=int, default=DEFAULT_SPRINT_COUNT,
        help=f"Number of sprints to list (default: {DEFAULT_SPRINT_COUNT})"
    )
    parser.add_argument(
        "--from-sprint", type=int, default=None,
        help="First sprint to list (default: the anchor sprint)"
    )
    parser.add_argument(
        "--name", default="Roadmap item",
        help="Item name shown in the plan summary"
    )
    timing = parser.add_mutually_exclusive_group()
    timing.add_argument(
        "--sprints", type=int, nargs=2, metavar=("START", "END"),
        help="Plan an item running from sprint START to sprint END"
    )
    timing.add_argument(
        "--dates", nargs=2, metavar=("START", "END"),
        help="Plan an item running between two dates (YYYY-MM-DD)"
    )
    args = parser.parse_args(argv)

    try:
        first_start = parse_date(args.first_sprint_start, "--first-sprint-start")
    except ValueError as e:
        _fail(str(e))

    config = SprintConfig(
        first_sprint_number=args.first_sprint,
        first_sprint_start_date=first_start,
        working_days_per_sprint=args.sprint_days,
        weekend_days=args.weekend,
    )
    errors, warnings = validate_sprint_config(config)
    for w in warnings:
        print(f"  WARNING: {w}")
    if errors:
        for e in errors:
            print(f"  ERROR: {e}")
        sys.exit(1)

    weekend_desc = ", ".join(WEEKDAY_NAMES[d] for d in sorted(config.weekend_days)) or "none"
    print(f"Sprint {config.first_sprint_number} starts {format_date(sprint_start_date(config.first_sprint_number, config))}")
    print(f"  Sprint length: {config.working_days_per_sprint} working days")
    print(f"  Weekend:       {weekend_desc}")

    if args.windows < 0:
        _fail(f"--windows must be zero or more (got {args.windows}).")
    from_sprint = args.from_sprint if args.from_sprint is not None else config.first_sprint_number
    print_sprint_calendar(generate_sprint_windows(from_sprint, args.windows, config), config)

    item_timing = None
    try:
        if args.sprints:
            item_timing = SprintRange(*args.sprints)
        elif args.dates:
            item_timing = DateRange(*args.dates)
    except ValueError as e:
        _fail(str(e))

    if item_timing is not None:
        try:
            item = create_item(args.name, item_timing, config, datetime.now())
        except ValueError as e:
            _fail(str(e))
        print_plan_summary(item, config)

    print("\nDone.")


if __name__ == "__main__":
    main()
