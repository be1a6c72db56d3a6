"""
Learning-plan API: plan generation, retrieval, today's roadmap and session completion.
"""
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.agents.planner import RoadmapPlannerAgent
from app.core.logging import DOMAIN_PLANNING, get_domain_logger
from app.data.curriculum_presets import get_available_roadmaps
from app.memory.store import LearningPlanStore, get_plan_store
from app.planning.service import complete_session, completion_percentage, generate_learning_plan, today_roadmap
from app.schemas.learning_plan import (
    CompleteSessionRequest,
    GeneratePlanRequest,
    GeneratePlanResponse,
    LearningPlan,
)
from app.schemas.roadmap import DayRoadmap

router = APIRouter(prefix="/learning-plans", tags=["learning-plans"])
logger = get_domain_logger(__name__, DOMAIN_PLANNING)


class TodayResponse(BaseModel):
    plan_id: str
    day: DayRoadmap
    completion_percentage: int


class CompleteSessionResponse(BaseModel):
    success: bool = True
    plan_id: str
    session_id: str
    day: DayRoadmap
    completion_percentage: int
    status: str


def get_planner_agent() -> RoadmapPlannerAgent:
    return RoadmapPlannerAgent()


def _load_plan(store: LearningPlanStore, plan_id: str) -> LearningPlan:
    plan = store.get(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail=f"Learning plan '{plan_id}' not found")
    return plan


@router.get("/roadmaps")
async def list_roadmaps():
    return {"success": True, "roadmaps": get_available_roadmaps()}


@router.post("/generate", response_model=GeneratePlanResponse, response_model_by_alias=False)
async def generate_plan(
    payload: GeneratePlanRequest,
    agent: RoadmapPlannerAgent = Depends(get_planner_agent),
    store: LearningPlanStore = Depends(get_plan_store),
):
    plan = await generate_learning_plan(payload.student, payload, agent=agent, start_date=payload.start_date)
    store.save(plan)
    source = "AI" if plan.generated_by == "AI" else "local fallback"
    return GeneratePlanResponse(
        learning_plan=plan,
        message=f"Learning plan generated ({source} schedule)",
        stats=plan.stats,
    )


@router.get("/by-learner/{learner_id}")
async def list_learner_plans(learner_id: str, store: LearningPlanStore = Depends(get_plan_store)):
    plans = store.list_for_learner(learner_id)
    return {
        "learner_id": learner_id,
        "plans": [
            {
                "plan_id": plan.plan_id,
                "title": plan.title,
                "plan_type": plan.plan_type,
                "status": plan.status,
                "start_date": plan.start_date.isoformat(),
                "end_date": plan.end_date.isoformat(),
                "completion_percentage": completion_percentage(plan),
            }
            for plan in plans
        ],
    }


@router.get("/{plan_id}", response_model=LearningPlan, response_model_by_alias=False)
async def get_plan(plan_id: str, store: LearningPlanStore = Depends(get_plan_store)):
    return _load_plan(store, plan_id)


@router.get("/{plan_id}/today", response_model=TodayResponse)
async def get_today(plan_id: str, store: LearningPlanStore = Depends(get_plan_store)):
    plan = _load_plan(store, plan_id)
    day = today_roadmap(plan, date.today())
    if day is None:
        raise HTTPException(status_code=404, detail="No roadmap entry for today in this plan")
    return TodayResponse(plan_id=plan.plan_id, day=day, completion_percentage=completion_percentage(plan))


@router.put("/{plan_id}/sessions/{session_id}/complete", response_model=CompleteSessionResponse)
async def complete_plan_session(
    plan_id: str,
    session_id: str,
    payload: CompleteSessionRequest,
    store: LearningPlanStore = Depends(get_plan_store),
):
    plan = _load_plan(store, plan_id)
    day = complete_session(plan, session_id, score=payload.score, notes=payload.notes)
    store.save(plan)
    logger.bind(plan_id=plan_id, session_id=session_id).info("Session completed")
    return CompleteSessionResponse(
        plan_id=plan.plan_id,
        session_id=session_id,
        day=day,
        completion_percentage=completion_percentage(plan),
        status=plan.status,
    )
