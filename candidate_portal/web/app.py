"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from jinja2 import Environment, FileSystemLoader
from starlette.responses import HTMLResponse

from candidate_portal.config import AppConfig
from candidate_portal.view import ViewSynchronizer

from .routes import router

logger = logging.getLogger("candidate_portal.web")

WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"


def _create_jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
    )


class _Templates:
    """Thin wrapper that mimics Jinja2Templates from starlette."""

    def __init__(self):
        self.env = _create_jinja_env()

    def render(self, name: str, context: dict) -> str:
        return self.env.get_template(name).render(**context)

    def TemplateResponse(self, name: str, context: dict, status_code: int = 200):
        return HTMLResponse(self.render(name, context), status_code=status_code)


def create_app(
    config: Optional[AppConfig] = None,
    view: Optional[ViewSynchronizer] = None,
) -> FastAPI:
    """Build the portal app around one session-scoped ViewSynchronizer.

    When ``view`` already holds a dataset, startup skips loading.
    """
    config = config or AppConfig()
    if view is None:
        view = ViewSynchronizer(defaults=config.filters.to_params())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Until this completes the store is empty and every view is empty.
        if app.state.view.store.is_empty and config.dataset.source:
            logger.info("Loading dataset from %s", config.dataset.source)
            app.state.view.load(config.dataset.source, timeout=config.dataset.timeout)
        else:
            app.state.view.recompute()
        yield

    app = FastAPI(title="Candidate Portal", lifespan=lifespan)
    app.state.config = config
    app.state.view = view
    app.state.templates = _Templates()
    app.include_router(router)

    return app
