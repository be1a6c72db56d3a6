from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api.health import router as health_router
from app.api.learning_plans import router as learning_plans_router
from app.core.errors import (
    PlanningError,
    http_exception_handler,
    planning_exception_handler,
    request_id_middleware,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.core.logging import DOMAIN_PLANNING, configure_logging, get_domain_logger
from app.core.settings import settings
from app.memory.store import get_plan_store

logger = get_domain_logger(__name__, DOMAIN_PLANNING)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    store = get_plan_store()
    logger.info(
        "LearnPath API starting env=%s llm_provider=%s plan_store=%s",
        settings.app_env,
        settings.llm_provider,
        type(store).__name__,
    )
    yield


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    application = FastAPI(title="LearnPath API", version="0.1.0", lifespan=lifespan)
    application.include_router(health_router)
    application.include_router(learning_plans_router)
    application.middleware("http")(request_id_middleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(HTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(PlanningError, planning_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
    return application


app = create_app()
