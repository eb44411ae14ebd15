import logging

from fastapi import APIRouter

from resume_ats.core.config.scoring import get_scoring_config

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and scoring config availability.")
async def health_check():
    try:
        get_scoring_config()
    except RuntimeError as exc:
        logger.error("health_scoring_config_unavailable: %s", exc)
        return {"status": "degraded", "scoring_config": "unavailable"}
    return {"status": "healthy", "scoring_config": "loaded"}
