import time

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError

from infracanvas import __version__, config
from infracanvas.api.routes import router
from infracanvas.db.models import Base
from infracanvas.db.session import engine
from infracanvas.logging_config import configure_logging

configure_logging()
log = structlog.get_logger(__name__)

app = FastAPI(
    title="InfraCanvas Compiler",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.on_event("startup")
def startup():
    retries = 5
    delay = 2

    for attempt in range(retries):
        try:
            Base.metadata.create_all(bind=engine)
            log.info("database_connected")
            return
        except OperationalError:
            log.warning("database_waiting", attempt=attempt + 1, retries=retries)
            time.sleep(delay)

    # keep serving; compile results do not depend on the log table
    log.warning("database_unavailable", persistence=False)
