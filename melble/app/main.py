"""FastAPI application for the Melble daily puzzle."""

import contextlib
import pathlib
from collections.abc import AsyncGenerator

import fastapi
import fastapi.responses
import uvicorn

import common.app

from .game import database
from .routers import game

APP_DIR = pathlib.Path(__file__).resolve().parent


@contextlib.asynccontextmanager
async def lifespan(app: fastapi.FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the round database on startup."""
    database.create_db_and_tables()
    yield


app = common.app.create_app(
    'Melble',
    static_dir=APP_DIR / 'static',
    routers=[game.router],
    lifespan=lifespan,
)

templates = common.app.make_templates(APP_DIR / 'templates')


@app.get('/', response_class=fastapi.responses.HTMLResponse)
async def index(request: fastapi.Request) -> fastapi.responses.HTMLResponse:
    """Render the landing page."""
    return templates.TemplateResponse(request=request, name='index.html.jinja2')


if __name__ == '__main__':
    uvicorn.run(app, host='0.0.0.0', port=8000)
