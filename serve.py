import os

import uvicorn
from dotenv import load_dotenv

from tardy_critic.config import Settings
from tardy_critic.logging_setup import setup_logging
from tardy_critic.web import create_app

# Load .env (TMDB_API_KEY, LETTERBOXD_RSS_URL, LOG_LEVEL, ...) before reading settings.
load_dotenv()

settings = Settings.from_env()
setup_logging(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_level=settings.log_level.lower(),
    )
