import asyncio
import random

from voltage.adapters.locale_form import LocaleForm
from voltage.adapters.rc_file import RcFileStore
from voltage.app import VoltageApp
from voltage.core.config_model import Locale
from voltage.core.controller import VoltageController
from voltage.core.errors import ConfigIOError
from voltage.core.headings import pool_for
from voltage.core.ports import ConfigStore
from voltage.core.runner import CommandRunner
from voltage.core.state_machine import AppState


class _Store(ConfigStore):
    def __init__(self, content=None, error=None):
        self.content = content or {}
        self.error = error
        self.checks = 0

    def resolve_path(self):
        raise NotImplementedError

    def exists(self) -> bool:
        self.checks += 1
        if self.error:
            raise self.error
        return True

    def fetch_default(self):
        raise AssertionError("rc file exists, nothing to fetch")

    def load(self):
        return dict(self.content)

    def persist(self, mapping) -> None:
        self.content = dict(mapping)


class _Response:
    content = b"VOLTAGE_API_URL=\nVOLTAGE_LOCALE=\n"

    def raise_for_status(self):
        pass


class _Http:
    def get(self, url, timeout=None):
        return _Response()


def _app(store, error_display_seconds=10.0):
    form = LocaleForm()
    controller = VoltageController(form, error_display_seconds=error_display_seconds)
    app = VoltageApp(controller, CommandRunner(store, form, rng=random.Random(1)), form.widget)
    return app, controller


async def _settle(app, pilot, rounds=6):
    for _ in range(rounds):
        await app.workers.wait_for_complete()
        await pilot.pause()


def test_app_shows_and_rerolls_heading_from_saved_locale():
    app, controller = _app(_Store(content={"VOLTAGE_LOCALE": "EN"}))

    async def scenario():
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            assert controller.state == AppState.SHOWING_HEADING
            assert controller.heading in pool_for(Locale.EN).phrases
            assert not app.query_one("#locale").display

            first = controller.heading_index
            await pilot.press("space")
            await _settle(app, pilot)
            assert controller.heading_index != first

            await pilot.press("q")

    asyncio.run(scenario())
    assert app.return_code == 0


def test_app_first_run_selects_and_saves_locale(tmp_path):
    store = RcFileStore(home=lambda: tmp_path, http=_Http())
    app, controller = _app(store)

    async def scenario():
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            assert controller.state == AppState.SELECTING_LOCALE
            assert app.query_one("#locale").display

            await pilot.press("down")
            await pilot.press("enter")
            await _settle(app, pilot)
            assert controller.state == AppState.SHOWING_HEADING
            assert controller.pool == pool_for(Locale.PL)
            assert not app.query_one("#locale").display

            await pilot.press("q")

    asyncio.run(scenario())
    assert store.load() == {"VOLTAGE_API_URL": "", "VOLTAGE_LOCALE": "PL"}
    assert app.return_code == 0


def test_app_config_error_exits_after_display_delay():
    store = _Store(error=ConfigIOError("permission denied"))
    app, controller = _app(store, error_display_seconds=1.0)

    async def scenario():
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            assert controller.state == AppState.CONFIG_ERROR
            assert "permission denied" in controller.render()
            await asyncio.sleep(1.5)

    asyncio.run(scenario())
    assert app.return_code == 1
    assert store.checks == 1
