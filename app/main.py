import logging

from fastapi import FastAPI

from app.config import settings
from app.targets.router import router as targets_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="NutritionTargets", version="0.1.0")
app.include_router(targets_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "targets": {
            "reference": "/targets/reference",
            "calculate": "/targets/calculate",
            "preview": "/targets/profiles/{user_id}/preview",
            "confirm": "/targets/profiles/{user_id}/confirm",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
