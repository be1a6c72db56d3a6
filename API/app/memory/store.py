from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from pathlib import Path

from app.core.logging import DOMAIN_PERSISTENCE, get_domain_logger
from app.core.settings import settings
from app.schemas.learning_plan import LearningPlan

logger = get_domain_logger(__name__, DOMAIN_PERSISTENCE)

_PLAN_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def _sanitize_mongo_error(raw: str) -> str:
    if not raw:
        return raw
    # Hide credentials embedded in connection URLs.
    return re.sub(r"(mongodb(?:\+srv)?://)([^/@\s]+)@", r"\1***:***@", raw)


class LearningPlanStore(ABC):
    """Whole-document persistence for generated learning plans."""

    @abstractmethod
    def save(self, plan: LearningPlan) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, plan_id: str) -> LearningPlan | None:
        raise NotImplementedError

    @abstractmethod
    def list_for_learner(self, learner_id: str) -> list[LearningPlan]:
        raise NotImplementedError


class FileLearningPlanStore(LearningPlanStore):
    def __init__(self, base_dir: Path):
        self.base = base_dir / "learning_plans"
        self.base.mkdir(parents=True, exist_ok=True)

    def _path(self, plan_id: str) -> Path:
        if not _PLAN_ID_PATTERN.match(plan_id):
            raise ValueError(f"Invalid plan_id: {plan_id!r}")
        return self.base / f"{plan_id}.json"

    def save(self, plan: LearningPlan) -> None:
        target = self._path(plan.plan_id)
        tmp = target.with_suffix(".json.tmp")
        tmp.write_text(plan.model_dump_json(indent=2), encoding="utf-8")
        tmp.replace(target)

    def get(self, plan_id: str) -> LearningPlan | None:
        try:
            path = self._path(plan_id)
        except ValueError:
            return None
        if not path.exists():
            return None
        return LearningPlan.model_validate(json.loads(path.read_text(encoding="utf-8")))

    def list_for_learner(self, learner_id: str) -> list[LearningPlan]:
        plans = []
        for path in self.base.glob("*.json"):
            data = json.loads(path.read_text(encoding="utf-8"))
            if data.get("learner_id") == learner_id:
                plans.append(LearningPlan.model_validate(data))
        return sorted(plans, key=lambda plan: plan.created_at, reverse=True)


class MongoLearningPlanStore(LearningPlanStore):
    def __init__(self, mongodb_url: str, db_name: str):
        from pymongo import ASCENDING, DESCENDING, MongoClient

        self._ASC = ASCENDING
        self._DESC = DESCENDING
        self._client = MongoClient(mongodb_url, serverSelectionTimeoutMS=3000)
        self._plans = self._client[db_name]["learning_plans"]
        self._ensure_indexes()

    def _ensure_indexes(self) -> None:
        self._plans.create_index([("plan_id", self._ASC)], unique=True, name="ux_learning_plans_plan_id")
        self._plans.create_index(
            [("learner_id", self._ASC), ("created_at", self._DESC)],
            name="ix_learning_plans_learner_created",
        )

    def save(self, plan: LearningPlan) -> None:
        doc = plan.model_dump(mode="json")
        self._plans.replace_one({"plan_id": plan.plan_id}, doc, upsert=True)

    def get(self, plan_id: str) -> LearningPlan | None:
        doc = self._plans.find_one({"plan_id": plan_id}, {"_id": 0})
        return LearningPlan.model_validate(doc) if doc else None

    def list_for_learner(self, learner_id: str) -> list[LearningPlan]:
        cursor = self._plans.find({"learner_id": learner_id}, {"_id": 0}).sort("created_at", self._DESC)
        return [LearningPlan.model_validate(doc) for doc in cursor]


def build_plan_store() -> LearningPlanStore:
    backend = settings.plan_store_backend.strip().lower()
    if backend == "mongo":
        logger.info("Learning plans stored in MongoDB db=%s", settings.mongodb_db_name)
        return MongoLearningPlanStore(settings.mongodb_url, settings.mongodb_db_name)
    if backend != "file":
        logger.warning("Unknown PLAN_STORE_BACKEND=%s; falling back to file store", backend)
    return FileLearningPlanStore(Path(settings.runtime_data_dir))


_plan_store: LearningPlanStore | None = None


def get_plan_store() -> LearningPlanStore:
    global _plan_store
    if _plan_store is None:
        _plan_store = build_plan_store()
    return _plan_store


def _mongo_ping() -> tuple[bool, str | None]:
    try:
        from pymongo import MongoClient

        with MongoClient(settings.mongodb_url, serverSelectionTimeoutMS=3000) as client:
            client.admin.command("ping")
        return True, None
    except Exception as exc:  # noqa: BLE001
        return False, _sanitize_mongo_error(str(exc))


def get_store_runtime_status() -> dict:
    backend = settings.plan_store_backend.strip().lower()
    status = {"configured_backend": backend}
    if backend == "mongo":
        mongo_ok, mongo_error = _mongo_ping()
        status["mongo"] = {"connected": mongo_ok, "db_name": settings.mongodb_db_name, "error": mongo_error}
    return status
