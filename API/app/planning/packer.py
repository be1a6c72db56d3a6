"""
Day-wise roadmap packer and representative weekly plan.

Both walk the curriculum with the same day-filling core: sessions of at most two hours,
chained from 09:00, until the daily hour budget runs out. The day-wise packer keeps one
cursor for the whole run so content skipped on non-study days moves to the next study
day; the weekly plan rotates through subjects instead.
"""
from __future__ import annotations

import datetime as dt
import math
from collections.abc import Callable
from dataclasses import dataclass, field

from app.core.errors import InvalidDurationError
from app.core.logging import DOMAIN_SCHEDULING, get_domain_logger
from app.planning.clock import DAY_START, end_time
from app.schemas.curriculum import Curriculum, Subject, Topic, Unit
from app.schemas.roadmap import (
    Assessment,
    DailyGoal,
    DayProgress,
    DayRoadmap,
    Exercise,
    Resource,
    Schedule,
    ScheduleSession,
    Session,
    WeeklyPlanDay,
)
from app.schemas.student import WeeklyPreferences

logger = get_domain_logger(__name__, DOMAIN_SCHEDULING)

EFFICIENCY_FACTOR = 0.70
SESSION_CAP_HOURS = 2
TOPICS_PER_SESSION = 2
BREAK_MINUTES = 15

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
WEEKEND_DAYS = ["Saturday", "Sunday"]


def daily_study_hours(curriculum: Curriculum, total_days: int) -> int:
    if total_days <= 0:
        raise InvalidDurationError(f"Plan duration must be at least one day, got {total_days}")
    return max(1, math.ceil(curriculum.total_hours / (total_days * EFFICIENCY_FACTOR)))


@dataclass
class Block:
    subject: Subject
    unit: Unit
    topics: list[Topic]


@dataclass
class Slot:
    block: Block
    hours: int
    start_time: str
    end_time: str

    @property
    def minutes(self) -> int:
        return int(round(self.hours * 60))


@dataclass
class CurriculumCursor:
    """Position in the subject -> unit -> topic tree, owned by a single packing run."""

    subjects: list[Subject]
    subject_index: int = 0
    unit_index: int = 0
    topic_index: int = 0
    _units: list[list[Unit]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._units = [subject.ordered_units() for subject in self.subjects]

    @property
    def exhausted(self) -> bool:
        return self.subject_index >= len(self.subjects)

    def next_block(self) -> Block | None:
        """Take up to two topics at the cursor and advance past them; None once exhausted."""
        while not self.exhausted:
            units = self._units[self.subject_index]
            if self.unit_index >= len(units):
                self.subject_index += 1
                self.unit_index = 0
                self.topic_index = 0
                continue
            unit = units[self.unit_index]
            if self.topic_index >= len(unit.topics):
                self.unit_index += 1
                self.topic_index = 0
                continue
            topics = unit.topics[self.topic_index:self.topic_index + TOPICS_PER_SESSION]
            self.topic_index += TOPICS_PER_SESSION
            return Block(self.subjects[self.subject_index], unit, topics)
        return None


def _fill_day(budget_hours: int, next_block: Callable[[], Block | None]) -> list[Slot]:
    slots: list[Slot] = []
    remaining = budget_hours
    start = DAY_START
    while remaining > 0:
        block = next_block()
        if block is None:
            break
        hours = min(SESSION_CAP_HOURS, remaining)
        finish = end_time(start, hours)
        slots.append(Slot(block, hours, start, finish))
        remaining -= hours
        start = finish
    return slots


def _resource_url(curriculum: Curriculum) -> str:
    return f"https://roadmap.sh/{curriculum.roadmap_type}" if curriculum.roadmap_type else "#"


def _learning_session(day_number: int, sequence: int, slot: Slot, resource_url: str) -> Session:
    lead = slot.block.topics[0].name
    unit_title = slot.block.unit.title
    return Session(
        session_id=f"day{day_number}_session{sequence}",
        subject=slot.block.subject.name,
        unit=unit_title,
        topics=[topic.name for topic in slot.block.topics],
        duration=slot.minutes,
        start_time=slot.start_time,
        end_time=slot.end_time,
        type="learning",
        learning_objectives=[f"Understand {lead}", f"Apply concepts from {unit_title}"],
        resources=[
            Resource(type="video", title=f"{lead} Tutorial", url=resource_url, duration=30),
            Resource(type="article", title=f"{lead} Guide", url=resource_url, duration=15),
        ],
        exercises=[Exercise(title=f"{lead} Practice")],
        assessment=Assessment(),
    )


def _break_session(day_number: int, start: str) -> Session:
    return Session(
        session_id=f"day{day_number}_break",
        subject="Break",
        unit="Rest",
        topics=["Short Break"],
        duration=BREAK_MINUTES,
        start_time=start,
        end_time=end_time(start, BREAK_MINUTES / 60),
        type="break",
    )


def is_study_day(day_of_week: str, preferences: WeeklyPreferences) -> bool:
    return preferences.study_on_weekends or day_of_week not in WEEKEND_DAYS


def pack(
    curriculum: Curriculum,
    total_days: int,
    preferences: WeeklyPreferences | None,
    start_date: dt.date,
) -> list[DayRoadmap]:
    """Spread the curriculum over ``total_days`` calendar days starting at ``start_date``.

    Returns exactly ``total_days`` entries. Weekend days are non-study days unless
    ``preferences.study_on_weekends`` is set; they get no sessions and do not move the
    cursor. Once the curriculum runs out, remaining study days stay empty.
    """
    preferences = preferences or WeeklyPreferences()
    hours = daily_study_hours(curriculum, total_days)
    cursor = CurriculumCursor(curriculum.subjects)
    resource_url = _resource_url(curriculum)

    days: list[DayRoadmap] = []
    exhausted_on = None
    for day_number in range(1, total_days + 1):
        date = start_date + dt.timedelta(days=day_number - 1)
        day_of_week = WEEKDAY_NAMES[date.weekday()]
        if not is_study_day(day_of_week, preferences):
            days.append(
                DayRoadmap(
                    day_number=day_number,
                    date=date,
                    day_of_week=day_of_week,
                    is_study_day=False,
                    total_study_hours=0,
                )
            )
            continue

        slots = _fill_day(hours, cursor.next_block)
        sessions = [
            _learning_session(day_number, sequence, slot, resource_url)
            for sequence, slot in enumerate(slots, start=1)
        ]
        goals = [
            DailyGoal(goal=f"Complete {slot.block.topics[0].name} in {slot.block.subject.name}")
            for slot in slots
        ]
        if sessions:
            sessions.append(_break_session(day_number, sessions[-1].end_time))
        elif exhausted_on is None:
            exhausted_on = day_number

        days.append(
            DayRoadmap(
                day_number=day_number,
                date=date,
                day_of_week=day_of_week,
                is_study_day=True,
                total_study_hours=hours,
                sessions=sessions,
                daily_goals=goals,
                progress=DayProgress(total_sessions=len(slots)),
            )
        )

    if exhausted_on is not None:
        logger.info("Curriculum exhausted before day %d of %d; later study days are empty", exhausted_on, total_days)
    logger.debug("Packed %d days at %dh/day from %s", total_days, hours, start_date.isoformat())
    return days


def _subject_rotation(subjects: list[Subject], start_index: int) -> Callable[[], Block | None]:
    # Each session takes the first unit of the next subject, wrapping around.
    first_units = [(subject, subject.ordered_units()[0]) for subject in subjects if subject.units]
    index = start_index

    def next_block() -> Block | None:
        nonlocal index
        if not first_units:
            return None
        subject, unit = first_units[index % len(first_units)]
        index += 1
        return Block(subject, unit, unit.topics[:TOPICS_PER_SESSION])

    return next_block


def build_weekly_plan(
    curriculum: Curriculum,
    total_days: int,
    preferences: WeeklyPreferences | None = None,
) -> Schedule:
    """Representative Monday..Friday week; day ``i`` starts at subject ``i % n``."""
    preferences = preferences or WeeklyPreferences()
    hours = daily_study_hours(curriculum, total_days)

    weekly_plan = []
    for index, day_name in enumerate(WEEKDAY_NAMES[:5]):
        slots = _fill_day(hours, _subject_rotation(curriculum.subjects, index))
        weekly_plan.append(
            WeeklyPlanDay(
                day=day_name,
                sessions=[
                    ScheduleSession(
                        subject=slot.block.subject.name,
                        unit=slot.block.unit.title,
                        topics=[topic.name for topic in slot.block.topics],
                        duration=slot.minutes,
                        start_time=slot.start_time,
                        end_time=slot.end_time,
                        type="learning",
                    )
                    for slot in slots
                ],
            )
        )

    return Schedule(
        weekly_plan=weekly_plan,
        daily_study_hours=hours,
        weekly_study_days=preferences.weekly_study_days or 5,
        break_days=[] if preferences.study_on_weekends else list(WEEKEND_DAYS),
        source="local",
    )
