from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SessionType = Literal["learning", "break"]


class Resource(BaseModel):
    type: str
    title: str
    url: str
    duration: int


class Exercise(BaseModel):
    title: str
    type: str = "quiz"
    estimated_time: int = 20


class Assessment(BaseModel):
    type: str = "quiz"
    questions: int = 5
    time_limit: int = 15


class Session(BaseModel):
    session_id: str
    subject: str
    unit: str
    topics: list[str]
    duration: int  # minutes
    start_time: str
    end_time: str
    type: SessionType = "learning"
    learning_objectives: list[str] = Field(default_factory=list)
    resources: list[Resource] = Field(default_factory=list)
    exercises: list[Exercise] = Field(default_factory=list)
    assessment: Assessment | None = None
    is_completed: bool = False
    completion_time: dt.datetime | None = None
    score: float | None = None
    notes: str = ""


class DailyGoal(BaseModel):
    goal: str
    is_completed: bool = False


class DailyReflection(BaseModel):
    mood: str | None = None
    energy: int | None = Field(default=None, ge=1, le=10)
    notes: str = ""
    challenges: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)


class DayProgress(BaseModel):
    completed_sessions: int = 0
    total_sessions: int = 0
    study_time: int = 0
    score: float = 0


class DayRoadmap(BaseModel):
    day_number: int
    date: dt.date
    day_of_week: str
    is_study_day: bool
    total_study_hours: int
    sessions: list[Session] = Field(default_factory=list)
    daily_goals: list[DailyGoal] = Field(default_factory=list)
    daily_reflection: DailyReflection = Field(default_factory=DailyReflection)
    progress: DayProgress = Field(default_factory=DayProgress)


class WeeklyMilestone(BaseModel):
    week_number: int
    title: str
    description: str
    goals: list[str]
    target_progress: int
    is_completed: bool = False
    completed_at: dt.datetime | None = None
    achievements: list[str] = Field(default_factory=list)


# Weekly plan models also accept the camelCase keys the generative service is asked for.


class ScheduleSession(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    subject: str
    unit: str
    topics: list[str] = Field(default_factory=list)
    duration: int
    start_time: str
    end_time: str
    type: str = "learning"


class WeeklyPlanDay(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    day: str
    sessions: list[ScheduleSession] = Field(default_factory=list)


class Schedule(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    weekly_plan: list[WeeklyPlanDay] = Field(min_length=1)
    daily_study_hours: int = Field(ge=1)
    weekly_study_days: int = Field(default=5, ge=1, le=7)
    break_days: list[str] = Field(default_factory=lambda: ["Saturday", "Sunday"])
    source: Literal["ai", "local"] = "local"
