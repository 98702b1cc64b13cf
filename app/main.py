from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import setup_logging
from app.api.v1.routes.schedule import router as schedule_router

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Match Schedule API (published sheet feed)",
    version="1.0.0",
)

# Optional CORS (handy for frontend usage)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schedule_router, prefix="")

@app.get("/healthz")
def healthz():
    return {"ok": True}
