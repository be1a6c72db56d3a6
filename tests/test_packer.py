from __future__ import annotations

from datetime import date

import pytest

from app.core.errors import InvalidDurationError
from app.planning.curriculum import normalize
from app.planning.packer import CurriculumCursor, build_weekly_plan, daily_study_hours, pack
from app.schemas.curriculum import Curriculum, Subject, Topic, Unit
from app.schemas.learning_plan import PlanRequest
from app.schemas.student import WeeklyPreferences

MONDAY = date(2024, 1, 1)
FRIDAY = date(2024, 1, 5)
SATURDAY = date(2024, 1, 6)


def _learning(day):
    return [session for session in day.sessions if session.type == "learning"]


def test_daily_study_hours_uses_efficiency_factor(single_unit_curriculum):
    assert daily_study_hours(single_unit_curriculum, 10) == 3


def test_daily_study_hours_is_at_least_one():
    empty = Curriculum(subjects=[], total_duration=5)
    assert daily_study_hours(empty, 5) == 1


@pytest.mark.parametrize("days", [0, -1])
def test_daily_study_hours_rejects_non_positive_days(single_unit_curriculum, days):
    with pytest.raises(InvalidDurationError):
        daily_study_hours(single_unit_curriculum, days)
    with pytest.raises(InvalidDurationError):
        pack(single_unit_curriculum, days, None, MONDAY)


def test_short_curriculum_fills_first_day_then_leaves_study_days_empty(single_unit_curriculum):
    days = pack(single_unit_curriculum, 10, WeeklyPreferences(), MONDAY)

    first = days[0]
    assert first.is_study_day is True
    assert first.total_study_hours == 3
    assert [s.session_id for s in first.sessions] == ["day1_session1", "day1_session2", "day1_break"]
    s1, s2, brk = first.sessions
    assert (s1.start_time, s1.end_time, s1.duration, s1.topics) == ("09:00", "11:00", 120, ["T1", "T2"])
    assert (s2.start_time, s2.end_time, s2.duration, s2.topics) == ("11:00", "12:00", 60, ["T3", "T4"])
    assert (brk.start_time, brk.end_time, brk.duration, brk.type) == ("12:00", "12:15", 15, "break")
    assert [goal.goal for goal in first.daily_goals] == ["Complete T1 in Math", "Complete T3 in Math"]
    assert first.progress.total_sessions == 2

    weekend = [d for d in days if not d.is_study_day]
    assert [d.day_of_week for d in weekend] == ["Saturday", "Sunday"]

    idle_study_days = [d for d in days[1:] if d.is_study_day]
    assert len(idle_study_days) == 7
    assert all(d.sessions == [] and d.total_study_hours == 3 for d in idle_study_days)


def test_week_starting_saturday_has_two_non_study_days(single_unit_curriculum):
    days = pack(single_unit_curriculum, 7, None, SATURDAY)
    assert [d.is_study_day for d in days] == [False, False, True, True, True, True, True]
    assert days[0].day_of_week == "Saturday"
    assert days[2].day_of_week == "Monday"


def test_weekend_study_when_requested(single_unit_curriculum):
    days = pack(single_unit_curriculum, 7, WeeklyPreferences(study_on_weekends=True), SATURDAY)
    assert all(d.is_study_day for d in days)
    assert days[0].sessions


def test_cursor_carries_across_days(two_subject_curriculum):
    days = pack(two_subject_curriculum, 30, None, MONDAY)
    assert daily_study_hours(two_subject_curriculum, 30) == 2
    assignments = [(s.subject, s.unit, s.topics) for d in days[:5] for s in _learning(d)]
    assert assignments == [
        ("Math", "Algebra", ["A1", "A2"]),
        ("Math", "Algebra", ["A3"]),
        ("Math", "Geometry", ["G1", "G2"]),
        ("Science", "Physics", ["P1", "P2"]),
        ("Science", "Physics", ["P3", "P4"]),
    ]
    assert days[7].is_study_day and days[7].sessions == []


def test_non_study_days_do_not_consume_curriculum(two_subject_curriculum):
    days = pack(two_subject_curriculum, 30, None, FRIDAY)
    assert _learning(days[0])[0].topics == ["A1", "A2"]
    assert days[1].sessions == [] and days[2].sessions == []
    assert _learning(days[3])[0].topics == ["A3"]


def test_units_are_packed_in_order_sequence():
    subject = Subject(
        name="Math",
        units=[
            Unit(title="Later", topics=[Topic(name="L1")], estimated_duration=10, order=2),
            Unit(title="Sooner", topics=[Topic(name="S1")], estimated_duration=10, order=1),
        ],
        total_hours=20,
    )
    curriculum = Curriculum(subjects=[subject], total_duration=30)
    days = pack(curriculum, 30, WeeklyPreferences(study_on_weekends=True), MONDAY)
    units = [s.unit for d in days for s in _learning(d)]
    assert units == ["Sooner", "Later"]


def test_cursor_skips_units_without_topics():
    subject = Subject(
        name="Math",
        units=[
            Unit(title="Empty", topics=[], order=1),
            Unit(title="Full", topics=[Topic(name="F1")], order=2),
        ],
    )
    cursor = CurriculumCursor([subject])
    block = cursor.next_block()
    assert block.unit.title == "Full"
    assert [t.name for t in block.topics] == ["F1"]
    assert cursor.next_block() is None
    assert cursor.exhausted


def test_session_placeholders(curriculum_factory):
    curriculum = curriculum_factory(("Web", [("HTML", ["Tags", "Forms"], 10)]), roadmap_type="frontend")
    day = pack(curriculum, 5, WeeklyPreferences(study_on_weekends=True), MONDAY)[0]
    session = day.sessions[0]
    assert session.learning_objectives == ["Understand Tags", "Apply concepts from HTML"]
    assert [(r.type, r.title, r.url, r.duration) for r in session.resources] == [
        ("video", "Tags Tutorial", "https://roadmap.sh/frontend", 30),
        ("article", "Tags Guide", "https://roadmap.sh/frontend", 15),
    ]
    assert session.exercises[0].title == "Tags Practice"
    assert session.exercises[0].estimated_time == 20
    assert (session.assessment.type, session.assessment.questions, session.assessment.time_limit) == ("quiz", 5, 15)
    assert session.is_completed is False and session.score is None

    brk = day.sessions[-1]
    assert brk.session_id == "day1_break"
    assert brk.resources == [] and brk.exercises == [] and brk.assessment is None


def test_resources_point_nowhere_without_roadmap_type(single_unit_curriculum):
    day = pack(single_unit_curriculum, 10, None, MONDAY)[0]
    assert {r.url for r in day.sessions[0].resources} == {"#"}


CASES = [
    ("single", 10),
    ("single", 1),
    ("two", 3),
    ("two", 30),
    ("neet", 30),
    ("neet", 365),
    ("frontend", 45),
]


def _curriculum(kind, single_unit_curriculum, two_subject_curriculum):
    if kind == "single":
        return single_unit_curriculum
    if kind == "two":
        return two_subject_curriculum
    return normalize(PlanRequest(duration=30, roadmap_type=kind))


@pytest.mark.parametrize(("kind", "total_days"), CASES)
@pytest.mark.parametrize("weekends", [False, True])
def test_packing_properties(kind, total_days, weekends, single_unit_curriculum, two_subject_curriculum):
    curriculum = _curriculum(kind, single_unit_curriculum, two_subject_curriculum)
    hours = daily_study_hours(curriculum, total_days)
    days = pack(curriculum, total_days, WeeklyPreferences(study_on_weekends=weekends), SATURDAY)

    # exactly one entry per requested day, numbered 1..D
    assert [d.day_number for d in days] == list(range(1, total_days + 1))

    learning_minutes = sum(s.duration for d in days for s in _learning(d))
    all_minutes = sum(s.duration for d in days for s in d.sessions)
    assert learning_minutes <= total_days * hours * 60
    assert all_minutes <= total_days * hours * 60 + total_days * 15

    for day in days:
        assert sum(s.duration for s in _learning(day)) <= hours * 60
        for left, right in zip(day.sessions, day.sessions[1:]):
            assert left.end_time == right.start_time
        assert all(s.duration <= 120 for s in _learning(day))
        assert all(1 <= len(s.topics) <= 2 for s in _learning(day))
        if not day.is_study_day:
            assert day.total_study_hours == 0
            assert day.sessions == []
        if day.sessions:
            assert day.sessions[0].start_time == "09:00"
            assert day.sessions[-1].type == "break"
            assert sum(1 for s in day.sessions if s.type == "break") == 1


def test_local_packing_is_deterministic(two_subject_curriculum):
    prefs = WeeklyPreferences()
    first = pack(two_subject_curriculum, 21, prefs, MONDAY)
    second = pack(two_subject_curriculum, 21, prefs, MONDAY)
    assert [d.model_dump() for d in first] == [d.model_dump() for d in second]

    # Shifting the start by a whole week keeps the same content per day.
    shifted = pack(two_subject_curriculum, 21, prefs, date(2024, 1, 8))
    assert [[(s.subject, s.unit, s.topics) for s in d.sessions] for d in first] == [
        [(s.subject, s.unit, s.topics) for s in d.sessions] for d in shifted
    ]


def test_weekly_plan_rotates_subjects(two_subject_curriculum):
    schedule = build_weekly_plan(two_subject_curriculum, 30)
    assert [day.day for day in schedule.weekly_plan] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    firsts = [(day.sessions[0].subject, day.sessions[0].unit, day.sessions[0].topics) for day in schedule.weekly_plan]
    assert firsts == [
        ("Math", "Algebra", ["A1", "A2"]),
        ("Science", "Physics", ["P1", "P2"]),
        ("Math", "Algebra", ["A1", "A2"]),
        ("Science", "Physics", ["P1", "P2"]),
        ("Math", "Algebra", ["A1", "A2"]),
    ]
    assert schedule.daily_study_hours == 2
    assert schedule.weekly_study_days == 5
    assert schedule.break_days == ["Saturday", "Sunday"]
    assert schedule.source == "local"


def test_weekly_plan_chains_sessions_within_the_daily_budget(curriculum_factory):
    curriculum = curriculum_factory(
        ("Math", [("Algebra", ["A1", "A2"], 20)]),
        ("Art", [("Drawing", ["D1"], 20)]),
    )
    # 40h over 10 days -> 6h/day -> three 2h sessions
    schedule = build_weekly_plan(curriculum, 10)
    monday = schedule.weekly_plan[0]
    assert [(s.subject, s.start_time, s.end_time, s.duration) for s in monday.sessions] == [
        ("Math", "09:00", "11:00", 120),
        ("Art", "11:00", "13:00", 120),
        ("Math", "13:00", "15:00", 120),
    ]
    assert all(s.type == "learning" for s in monday.sessions)
    assert schedule.weekly_plan[1].sessions[0].subject == "Art"


def test_weekly_plan_honours_preferences(single_unit_curriculum):
    schedule = build_weekly_plan(
        single_unit_curriculum, 10, WeeklyPreferences(weekly_study_days=3, study_on_weekends=True)
    )
    assert schedule.weekly_study_days == 3
    assert schedule.break_days == []
    assert [s.duration for s in schedule.weekly_plan[0].sessions] == [120, 60]
