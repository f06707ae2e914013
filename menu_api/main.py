# Load environment variables FIRST, before any module imports that need them
from dotenv import load_dotenv
load_dotenv()

import logging

import uvicorn

from . import config
from .app_factory import create_app
from .logging_config import setup_logging

# Configure logging at module load time
LOG_LEVEL = setup_logging()

logger = logging.getLogger(__name__)

app = create_app()


def run() -> None:
    logger.info("Server running on http://localhost:%d%s", config.PORT, config.GRAPHQL_PATH)
    # log_config=None keeps uvicorn on the handlers installed by setup_logging
    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        log_config=None,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
