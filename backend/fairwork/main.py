"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fairwork.config import get_settings
from fairwork.database import init_db
from fairwork.routers import insights, tasks

settings = get_settings()


def configure_logging(level: str) -> None:
    """Attach one console handler to the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    await init_db()
    yield


app = FastAPI(
    title="Fair Groupwork",
    description="Contribution fairness tracking and workload balancing for student group projects",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(insights.router)
app.include_router(tasks.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
