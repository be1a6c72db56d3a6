from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

StudentType = Literal["school", "college"]


class LearningStyle(BaseModel):
    visual: float = Field(default=0.34, ge=0, le=1)
    auditory: float = Field(default=0.33, ge=0, le=1)
    kinesthetic: float = Field(default=0.33, ge=0, le=1)


class ExamPreparation(BaseModel):
    neet: bool = False
    jee: bool = False


class SchoolDetails(BaseModel):
    board: str = "CBSE"
    class_level: str = "9"
    exam_preparation: ExamPreparation = Field(default_factory=ExamPreparation)


class CollegeDetails(BaseModel):
    degree: str | None = None
    branch: str | None = None
    year: int | None = Field(default=None, ge=1, le=4)
    technologies: list[str] = Field(default_factory=list)


class StudentProfile(BaseModel):
    learner_id: str = Field(min_length=1)
    name: str = ""
    age: int = Field(ge=5, le=100)
    student_type: StudentType | None = None
    learning_style: LearningStyle = Field(default_factory=LearningStyle)
    preferred_subjects: list[str] = Field(default_factory=list)
    difficulty_preference: int = Field(default=5, ge=1, le=10)
    school_details: SchoolDetails | None = None
    college_details: CollegeDetails | None = None


class WeeklyPreferences(BaseModel):
    weekly_study_days: int | None = Field(default=None, ge=1, le=7)
    study_on_weekends: bool = False
