"""Tests for rncreate.core.progress."""

from rncreate.core.progress import DEFAULT_STEP_DELAY_MS, progress_step, sleep
from rncreate.ui.theme import plain, styled


class TestSleep:

    def test_converts_milliseconds(self, no_sleep):
        sleep(500)
        assert no_sleep == [0.5]

    def test_default_delay(self, no_sleep):
        sleep()
        assert no_sleep == [0.45]


class TestProgressStep:

    def test_prints_styled_message(self, capsys, no_sleep):
        seen = []

        def style(text):
            seen.append(text)
            return text.upper()

        progress_step("doing magic", style, 123)

        assert seen == ["› doing magic"]
        assert capsys.readouterr().out == "› DOING MAGIC\n"
        assert no_sleep == [0.123]

    def test_default_delay(self, capsys, no_sleep):
        progress_step("step", plain)
        assert no_sleep == [DEFAULT_STEP_DELAY_MS / 1000]

    def test_zero_delay_skips_sleep(self, capsys, no_sleep):
        progress_step("step", plain, 0)
        assert no_sleep == []
        assert "› step" in capsys.readouterr().out

    def test_markup_in_message_is_escaped(self, capsys):
        progress_step("name [bold]x", styled("kind.hook"), 0)
        assert "› name [bold]x" in capsys.readouterr().out

    def test_long_message_stays_on_one_line(self, capsys):
        message = "x" * 60 + " " + "y" * 60

        progress_step(message, plain, 0)

        assert capsys.readouterr().out == f"› {message}\n"
