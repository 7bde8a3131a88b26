"""FastAPI application factory and Jinja2 template setup."""

import pathlib
from collections.abc import Iterable
from typing import Any

import fastapi
import fastapi.staticfiles
import fastapi.templating

import common.log
import common.settings

_health_router = fastapi.APIRouter(tags=['health'])


@_health_router.api_route('/health', methods=['GET', 'HEAD'])
async def health() -> dict[str, str]:
    """Liveness probe; answers HEAD as well for uptime checkers."""
    return {'status': 'healthy'}


def template_globals() -> dict[str, str]:
    """Site-wide values available to every page."""
    return {
        'domain': common.settings.DOMAIN,
        'home_url': common.settings.HOME_URL,
        'site_url': common.settings.SITE_URL,
    }


def make_templates(
    directory: pathlib.Path | str, **extra_globals: Any
) -> fastapi.templating.Jinja2Templates:
    """Create Jinja2Templates for *directory* with the site globals pre-set.

    Keyword arguments are added as extra template globals.
    """
    templates = fastapi.templating.Jinja2Templates(directory=str(directory))
    env_globals = templates.env.globals  # type: ignore[reportUnknownMemberType]
    env_globals.update(template_globals(), **extra_globals)
    return templates


def create_app(
    title: str,
    *,
    static_dir: pathlib.Path | None = None,
    routers: Iterable[fastapi.APIRouter] = (),
    **kwargs: Any,
) -> fastapi.FastAPI:
    """Create a FastAPI app with logging, the health route and *routers*.

    ``static_dir``, when given, is served under ``/static``.  Remaining
    keyword arguments go to ``FastAPI.__init__`` (e.g. ``lifespan``).
    """
    common.log.configure_logging()
    app = fastapi.FastAPI(title=title, **kwargs)
    app.include_router(_health_router)
    if static_dir is not None:
        app.mount(
            '/static',
            fastapi.staticfiles.StaticFiles(directory=static_dir),
            name='static',
        )
    for router in routers:
        app.include_router(router)
    return app
