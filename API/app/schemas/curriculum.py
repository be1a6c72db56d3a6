from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_TOPIC_HOURS = 20.0

CurriculumSource = str  # "explicit" | "preset" | "roadmap.sh" | "AI-generated" | "default" | "fallback"


class Topic(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    difficulty: int | None = Field(default=None, ge=1, le=10)
    estimated_hours: float = Field(default=DEFAULT_TOPIC_HOURS, gt=0)
    prerequisites: list[str] = Field(default_factory=list)
    learning_objectives: list[str] = Field(default_factory=list)


class Unit(BaseModel):
    title: str
    description: str = ""
    topics: list[Topic] = Field(default_factory=list)
    estimated_duration: float = Field(default=0.0, ge=0)
    order: int = 1


class Subject(BaseModel):
    name: str
    description: str = ""
    weightage: int = 0
    units: list[Unit] = Field(default_factory=list)
    total_hours: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def _orders_are_unique(self) -> "Subject":
        orders = [unit.order for unit in self.units]
        if len(orders) != len(set(orders)):
            raise ValueError(f"Duplicate unit order values in subject '{self.name}'")
        return self

    def ordered_units(self) -> list[Unit]:
        return sorted(self.units, key=lambda unit: unit.order)


class Curriculum(BaseModel):
    """Read-only subject -> unit -> topic tree handed to the packers."""

    model_config = ConfigDict(frozen=True)

    subjects: list[Subject]
    total_duration: int
    roadmap_type: str | None = None
    source: CurriculumSource = "explicit"

    @property
    def total_hours(self) -> float:
        return sum(subject.total_hours for subject in self.subjects)

    @property
    def total_topics(self) -> int:
        return sum(len(unit.topics) for subject in self.subjects for unit in subject.units)


# Stage roadmaps (roadmap.sh tables and AI-generated roadmaps) before conversion.


class RoadmapTopic(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    duration: float | None = None


class RoadmapStage(BaseModel):
    name: str = Field(min_length=1)
    topics: list[RoadmapTopic] = Field(min_length=1)


class StageRoadmap(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    stages: list[RoadmapStage] = Field(min_length=1)
