import logging

from fastapi import FastAPI

from shelfstats import config
from shelfstats.routers import import_export, stats


def create_app() -> FastAPI:
    logging.getLogger("shelfstats").setLevel(config.LOG_LEVEL)

    app = FastAPI(title="Shelfstats", version="0.1.0")
    app.include_router(stats.router)
    app.include_router(import_export.router)
    return app


app = create_app()
