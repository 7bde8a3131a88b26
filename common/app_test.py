"""Unit tests for common/app.py."""

import contextlib
import logging
import pathlib
import tempfile
import unittest
from collections.abc import AsyncGenerator
from unittest import mock

import fastapi
import fastapi.testclient

import common.app
import common.log
import common.settings


class TestMakeTemplates(unittest.TestCase):
    """Tests for the make_templates factory."""

    def setUp(self) -> None:
        """Create a temporary templates directory."""
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.tmpdir = pathlib.Path(tmp.name)

    def test_site_globals(self) -> None:
        """Pages see domain, home_url and site_url from settings."""
        with mock.patch.object(common.settings, 'SITE_URL', 'https://x.example'):
            templates = common.app.make_templates(self.tmpdir)
        env_globals = templates.env.globals  # type: ignore[reportUnknownMemberType]
        self.assertEqual(env_globals['domain'], common.settings.DOMAIN)
        self.assertEqual(env_globals['home_url'], common.settings.HOME_URL)
        self.assertEqual(env_globals['site_url'], 'https://x.example')

    def test_extra_globals(self) -> None:
        templates = common.app.make_templates(str(self.tmpdir), max_tries=6)
        env_globals = templates.env.globals  # type: ignore[reportUnknownMemberType]
        self.assertEqual(env_globals['max_tries'], 6)

    def test_renders_globals(self) -> None:
        (self.tmpdir / 'page.html').write_text('{{ site_url }}', encoding='utf-8')
        templates = common.app.make_templates(self.tmpdir)
        rendered = templates.get_template('page.html').render()
        self.assertEqual(rendered, common.settings.SITE_URL)


class TestCreateApp(unittest.TestCase):
    """Tests for the create_app factory."""

    def test_health_endpoint(self) -> None:
        """Apps built by create_app answer GET and HEAD /health."""
        client = fastapi.testclient.TestClient(common.app.create_app('Test'))
        response = client.get('/health')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'status': 'healthy'})
        self.assertEqual(client.head('/health').status_code, 200)

    def test_title(self) -> None:
        self.assertEqual(common.app.create_app('Melble').title, 'Melble')

    def test_configures_access_log_filter(self) -> None:
        common.app.create_app('Test')
        logger = logging.getLogger('uvicorn.access')
        self.assertTrue(
            any(isinstance(f, common.log.HealthCheckFilter) for f in logger.filters)
        )

    def test_includes_routers(self) -> None:
        router = fastapi.APIRouter()

        @router.get('/ping')
        async def ping() -> str:
            return 'pong'

        client = fastapi.testclient.TestClient(
            common.app.create_app('Test', routers=[router])
        )
        self.assertEqual(client.get('/ping').json(), 'pong')

    def test_static_dir(self) -> None:
        """Files in static_dir are served under /static."""
        with tempfile.TemporaryDirectory() as tmp:
            static_dir = pathlib.Path(tmp)
            (static_dir / 'site.css').write_text('body {}', encoding='utf-8')
            app = common.app.create_app('Test', static_dir=static_dir)
            client = fastapi.testclient.TestClient(app)
            self.assertEqual(client.get('/static/site.css').text, 'body {}')

    def test_no_static_dir(self) -> None:
        client = fastapi.testclient.TestClient(common.app.create_app('Test'))
        self.assertEqual(client.get('/static/site.css').status_code, 404)

    def test_forwards_lifespan(self) -> None:
        """Extra keyword arguments such as lifespan reach FastAPI."""
        calls: list[str] = []

        @contextlib.asynccontextmanager
        async def lifespan(app: fastapi.FastAPI) -> AsyncGenerator[None, None]:
            calls.append('start')
            yield

        app = common.app.create_app('Test', lifespan=lifespan)
        with fastapi.testclient.TestClient(app):
            pass
        self.assertEqual(calls, ['start'])


if __name__ == '__main__':
    unittest.main()
