from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.curriculum import Curriculum, Topic
from app.schemas.roadmap import DayRoadmap, Schedule, WeeklyMilestone
from app.schemas.student import StudentProfile, WeeklyPreferences

PlanStatus = Literal["active", "paused", "completed", "archived"]


# ── Requests ────────────────────────────────────────────────────────────────

class UnitRequest(BaseModel):
    title: str = Field(min_length=1)
    description: str | None = None
    topics: list[str | Topic] = Field(default_factory=list)
    estimated_duration: float | None = Field(default=None, ge=0)
    order: int | None = None


class SubjectRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None
    weightage: int | None = Field(default=None, ge=0, le=100)
    units: list[UnitRequest] | None = None
    total_hours: float | None = Field(default=None, ge=0)


class PlanRequest(BaseModel):
    duration: int
    subjects: list[SubjectRequest] | None = None
    roadmap_type: str | None = None
    plan_type: str | None = None
    preferences: WeeklyPreferences = Field(default_factory=WeeklyPreferences)


class GeneratePlanRequest(PlanRequest):
    student: StudentProfile
    start_date: dt.date | None = None


class CompleteSessionRequest(BaseModel):
    score: float | None = Field(default=None, ge=0, le=100)
    notes: str = ""


# ── Gamification ────────────────────────────────────────────────────────────

class ProgressMilestone(BaseModel):
    title: str
    description: str
    target_progress: int
    reward: str
    achieved: bool = False
    achieved_at: dt.datetime | None = None


class Challenge(BaseModel):
    title: str
    description: str
    type: str
    target: int
    reward: str
    completed: bool = False
    completed_at: dt.datetime | None = None


class Gamification(BaseModel):
    milestones: list[ProgressMilestone] = Field(default_factory=list)
    challenges: list[Challenge] = Field(default_factory=list)
    daily_challenges: list[Challenge] = Field(default_factory=list)


# ── Plan record ─────────────────────────────────────────────────────────────

class StudyTimeSlot(BaseModel):
    day: str
    start_time: str
    end_time: str
    subjects: list[str]


class WeeklyGoals(BaseModel):
    hours_per_week: int
    subjects_per_week: int


class LearningSchedule(BaseModel):
    preferred_study_times: list[StudyTimeSlot]
    weekly_goals: WeeklyGoals


class PlanStats(BaseModel):
    total_days: int
    total_subjects: int
    total_sessions: int
    weekly_milestones: int
    daily_study_hours: int
    generated_by: Literal["AI", "Fallback"]


class LearningPlan(BaseModel):
    plan_id: str
    learner_id: str
    plan_type: str
    title: str
    description: str
    start_date: dt.date
    end_date: dt.date
    curriculum: Curriculum
    daily_roadmap: list[DayRoadmap]
    weekly_milestones: list[WeeklyMilestone]
    schedule: Schedule
    gamification: Gamification
    learning_schedule: LearningSchedule
    status: PlanStatus = "active"
    generated_by: Literal["AI", "Fallback"] = "Fallback"
    stats: PlanStats
    created_at: dt.datetime
    updated_at: dt.datetime


class GeneratePlanResponse(BaseModel):
    success: bool = True
    learning_plan: LearningPlan
    message: str
    stats: PlanStats
