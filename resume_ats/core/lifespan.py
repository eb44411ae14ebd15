from contextlib import asynccontextmanager
import logging

from resume_ats.core.config.scoring import get_scoring_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    config = get_scoring_config()
    logger.info("scoring_config_loaded sections=%s", sorted(config))
    yield
