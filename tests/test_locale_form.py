import asyncio

from textual.app import App

from voltage.adapters.locale_form import LocaleForm
from voltage.core.config_model import Locale
from voltage.core.ports import LocaleSelector
from voltage.locales import LOCALE_PROMPT


class _Host(App):
    def __init__(self, form):
        super().__init__()
        self.form = form

    def compose(self):
        yield self.form.widget


def test_locale_form_is_a_locale_selector():
    assert isinstance(LocaleForm(), LocaleSelector)


def test_keys_before_init_are_ignored():
    form = LocaleForm()
    form.update("down")
    form.update("enter")
    assert form.submitted_value() is None


def test_enter_submits_highlighted_option():
    form = LocaleForm()
    form.init()
    assert form.update("enter") == []
    assert form.submitted_value() == Locale.EN


def test_navigation_moves_the_list_highlight():
    form = LocaleForm()
    form.init()
    assert form.widget.highlighted == 0

    form.update("j")
    assert form.highlighted == Locale.PL
    form.update("k")
    assert form.highlighted == Locale.EN
    form.update("end")
    assert form.highlighted == Locale.PL
    form.update("home")
    assert form.highlighted == Locale.EN


def test_navigation_wraps_around():
    form = LocaleForm()
    form.init()
    form.update("up")
    assert form.highlighted == Locale.PL
    form.update("tab")
    assert form.highlighted == Locale.EN


def test_init_resets_highlight():
    form = LocaleForm()
    form.widget.action_last()
    form.init()
    assert form.highlighted == Locale.EN


def test_value_is_permanent_once_submitted():
    form = LocaleForm()
    form.init()
    form.update("down")
    form.update("enter")
    form.update("up")
    form.update("enter")
    assert form.submitted_value() == Locale.PL
    assert form.highlighted == Locale.PL


def test_render_shows_title():
    form = LocaleForm()
    form.init()
    assert form.render() == LOCALE_PROMPT


def test_mounted_list_follows_relayed_keys():
    form = LocaleForm()
    app = _Host(form)

    async def scenario():
        async with app.run_test() as pilot:
            widget = app.query_one("#locale")
            assert [str(option.prompt) for option in widget.options] == ["EN", "PL"]
            assert not widget.has_focus

            form.init()
            form.update("down")
            await pilot.pause()
            assert widget.highlighted == 1

            form.update("enter")
            assert form.submitted_value() == Locale.PL

    asyncio.run(scenario())
