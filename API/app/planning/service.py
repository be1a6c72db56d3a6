"""
Learning-plan assembly: curriculum -> day-wise roadmap -> milestones -> weekly schedule,
plus the small read/update operations the student-facing endpoints need afterwards.
"""
from __future__ import annotations

import datetime as dt
import re
import uuid

from app.agents.planner import RoadmapPlannerAgent
from app.core.errors import InvalidDurationError, SessionNotFoundError
from app.core.logging import DOMAIN_PLANNING, get_domain_logger
from app.data.curriculum_presets import SYLLABUS_PRESETS
from app.planning.clock import DAY_END, DAY_START
from app.planning.curriculum import normalize, resolve_preset_key
from app.planning.gamification import build_gamification
from app.planning.milestones import weekly_milestones
from app.planning.packer import pack
from app.planning.rounding import round_half_up
from app.schemas.curriculum import Curriculum
from app.schemas.learning_plan import (
    LearningPlan,
    LearningSchedule,
    PlanRequest,
    PlanStats,
    StudyTimeSlot,
    WeeklyGoals,
)
from app.schemas.roadmap import DayRoadmap, Schedule
from app.schemas.student import StudentProfile

logger = get_domain_logger(__name__, DOMAIN_PLANNING)

DEFAULT_PLAN_TYPE = "daily-roadmap"
_SESSION_DAY = re.compile(r"^day(\d+)_")


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def summarize_schedule(schedule: Schedule, curriculum: Curriculum) -> LearningSchedule:
    slots = []
    for day in schedule.weekly_plan:
        subjects = list(dict.fromkeys(session.subject for session in day.sessions))
        slots.append(
            StudyTimeSlot(
                day=day.day,
                start_time=day.sessions[0].start_time if day.sessions else DAY_START,
                end_time=day.sessions[-1].end_time if day.sessions else DAY_END,
                subjects=subjects,
            )
        )
    return LearningSchedule(
        preferred_study_times=slots,
        weekly_goals=WeeklyGoals(
            hours_per_week=schedule.daily_study_hours * schedule.weekly_study_days,
            subjects_per_week=len(curriculum.subjects),
        ),
    )


def _title_and_description(request: PlanRequest, student: StudentProfile, curriculum: Curriculum) -> tuple[str, str]:
    if curriculum.source == "preset":
        key = request.roadmap_type if request.roadmap_type in SYLLABUS_PRESETS else resolve_preset_key(student, request.plan_type)
        if key:
            preset = SYLLABUS_PRESETS[key]
            return preset["title"], preset["description"]
    return (
        f"Personalized {request.duration}-Day Learning Roadmap",
        f"Comprehensive day-wise learning plan with {len(curriculum.subjects)} subjects over {request.duration} days",
    )


async def build_curriculum(
    request: PlanRequest,
    student: StudentProfile,
    agent: RoadmapPlannerAgent,
) -> Curriculum:
    roadmap_type = request.roadmap_type
    if roadmap_type and not request.subjects and roadmap_type not in SYLLABUS_PRESETS:
        curriculum = await agent.generate_roadmap_curriculum(roadmap_type, request.duration)
        if curriculum is not None:
            return curriculum
    return normalize(request, student)


async def generate_learning_plan(
    student: StudentProfile,
    request: PlanRequest,
    *,
    agent: RoadmapPlannerAgent,
    start_date: dt.date | None = None,
    now: dt.datetime | None = None,
) -> LearningPlan:
    if request.duration <= 0:
        raise InvalidDurationError(f"Plan duration must be at least one day, got {request.duration}")
    start_date = start_date or dt.date.today()
    now = now or _utcnow()
    preferences = request.preferences

    curriculum = await build_curriculum(request, student, agent)
    daily_roadmap = pack(curriculum, request.duration, preferences, start_date)
    milestones = weekly_milestones(request.duration)
    schedule = await agent.generate_schedule(student, curriculum, request.duration, preferences)
    generated_by = "AI" if schedule.source == "ai" else "Fallback"

    title, description = _title_and_description(request, student, curriculum)
    stats = PlanStats(
        total_days=request.duration,
        total_subjects=len(curriculum.subjects),
        total_sessions=sum(day.progress.total_sessions for day in daily_roadmap),
        weekly_milestones=len(milestones),
        daily_study_hours=schedule.daily_study_hours,
        generated_by=generated_by,
    )
    plan = LearningPlan(
        plan_id=uuid.uuid4().hex,
        learner_id=student.learner_id,
        plan_type=request.plan_type or DEFAULT_PLAN_TYPE,
        title=title,
        description=description,
        start_date=start_date,
        end_date=start_date + dt.timedelta(days=request.duration),
        curriculum=curriculum,
        daily_roadmap=daily_roadmap,
        weekly_milestones=milestones,
        schedule=schedule,
        gamification=build_gamification(curriculum),
        learning_schedule=summarize_schedule(schedule, curriculum),
        generated_by=generated_by,
        stats=stats,
        created_at=now,
        updated_at=now,
    )
    logger.info(
        "Learning plan generated learner=%s plan_id=%s days=%d subjects=%d sessions=%d source=%s",
        student.learner_id,
        plan.plan_id,
        stats.total_days,
        stats.total_subjects,
        stats.total_sessions,
        curriculum.source,
    )
    return plan


def today_roadmap(plan: LearningPlan, today: dt.date) -> DayRoadmap | None:
    for day in plan.daily_roadmap:
        if day.date == today:
            return day
    return None


def _recount_progress(day: DayRoadmap) -> None:
    learning = [session for session in day.sessions if session.type == "learning"]
    completed = [session for session in learning if session.is_completed]
    scores = [session.score for session in completed if session.score is not None]
    day.progress.total_sessions = len(learning)
    day.progress.completed_sessions = len(completed)
    day.progress.study_time = sum(session.duration for session in completed)
    day.progress.score = round(sum(scores) / len(scores), 2) if scores else 0


def complete_session(
    plan: LearningPlan,
    session_id: str,
    *,
    score: float | None = None,
    notes: str = "",
    now: dt.datetime | None = None,
) -> DayRoadmap:
    """Mark one session complete and refresh its day's progress counters."""
    match = _SESSION_DAY.match(session_id)
    day_number = int(match.group(1)) if match else None
    day = next((d for d in plan.daily_roadmap if d.day_number == day_number), None)
    session = next((s for s in day.sessions if s.session_id == session_id), None) if day else None
    if session is None:
        raise SessionNotFoundError(session_id, plan.plan_id)

    now = now or _utcnow()
    session.is_completed = True
    session.completion_time = now
    session.score = score
    session.notes = notes
    _recount_progress(day)
    plan.updated_at = now
    if plan.status == "active" and completion_percentage(plan) == 100:
        plan.status = "completed"
    return day


def completion_percentage(plan: LearningPlan) -> int:
    learning = [
        session
        for day in plan.daily_roadmap
        for session in day.sessions
        if session.type == "learning"
    ]
    if not learning:
        return 0
    done = sum(1 for session in learning if session.is_completed)
    return round_half_up(done / len(learning) * 100)
