# server/main.py

import logging
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import auth, portfolio
from core import config
from core.errors import register_exception_handlers
from database import init_db


logger = logging.getLogger(__name__)

init_db()

if config.JWT_SECRET_KEY == config.DEFAULT_SECRET_KEY:
    logger.warning("JWT_SECRET_KEY is not set; tokens are signed with the development default")

app = FastAPI(title="Portfolio API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(portfolio.router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc)}


def run():
    config.configure_logging()
    logger.info("Starting portfolio API on http://%s:%s", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
