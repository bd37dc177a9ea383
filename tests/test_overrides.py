# test_overrides.py

import threading
from unittest.mock import Mock, patch

import pytest

from tintline import (
    ColorLevel,
    ColorOverride,
    Override,
    Stream,
    colorize,
    override,
    override_ansi,
    override_set,
    override_status,
    override_truecolor,
    override_xterm,
    set_override,
    supports,
    unset_override,
    with_override,
)
from tintline.colors import Black
from tintline.overrides import AtomicOverride
from tintline.supports import probe


def on_black(value):
    return colorize(value).bg(Black)


class TestOverrideValue:
    def test_packing(self):
        assert Override.none().to_num() == 0
        assert Override.enable().to_num() == 0b010101
        assert Override.disable().to_num() == 0b101010
        value = Override.none().with_ansi(ColorOverride.ENABLE).with_truecolor(ColorOverride.DISABLE)
        assert value.to_num() == 0b010010
        assert Override.from_num(value.to_num()) == value

    def test_unused_pattern_reads_as_none(self):
        assert Override.from_num(0b111111) == Override.none()

    def test_to_level(self):
        value = Override.none().with_xterm(ColorOverride.ENABLE)
        assert value.to_level(False) == ColorLevel(ansi=False, xterm=True, truecolor=False)
        assert Override.disable().to_level(ColorLevel(True, True, True)) == ColorLevel.none()

    def test_to_bool(self):
        assert ColorOverride.NONE.to_bool(True) is True
        assert ColorOverride.NONE.to_bool(False) is False
        assert ColorOverride.ENABLE.to_bool(False) is True
        assert ColorOverride.DISABLE.to_bool(True) is False


class TestAtomicOverride:
    def test_single_tier_stores_leave_others_alone(self):
        cell = AtomicOverride()
        cell.store_ansi(ColorOverride.ENABLE)
        cell.store_xterm(ColorOverride.DISABLE)
        cell.store_truecolor(ColorOverride.ENABLE)
        assert cell.load() == Override(ColorOverride.ENABLE, ColorOverride.DISABLE, ColorOverride.ENABLE)
        cell.store_xterm(ColorOverride.NONE)
        assert cell.load().xterm is ColorOverride.NONE
        assert cell.load().ansi is ColorOverride.ENABLE

    def test_module_api(self):
        override_ansi(ColorOverride.DISABLE)
        override_xterm(ColorOverride.ENABLE)
        override_truecolor(ColorOverride.ENABLE)
        status = override_status()
        assert status.ansi is ColorOverride.DISABLE
        assert status.xterm is ColorOverride.ENABLE
        assert status.truecolor is ColorOverride.ENABLE

    def test_boolean_shorthands(self):
        set_override(True)
        assert override_status().ansi is ColorOverride.ENABLE
        set_override(False)
        assert override_status().ansi is ColorOverride.DISABLE
        unset_override()
        assert override_status() == Override.none()


class TestScopedOverride:
    def test_enable_inside_disable_outside(self):
        set_override(False)
        assert str(colorize("example").if_supports_color(Stream.STDOUT, on_black)) == "example"

        def render():
            return str(colorize("example").if_supports_color(Stream.STDOUT, on_black))

        assert with_override(Override.enable(), render) == "\x1b[40mexample\x1b[0m"
        assert str(colorize("example").if_supports_color(Stream.STDOUT, on_black)) == "example"

    def test_restored_when_computation_raises(self):
        override_set(Override.disable())
        wrapped = colorize("example").if_supports_color(Stream.STDOUT, on_black)

        def fail():
            assert str(wrapped) == "\x1b[40mexample\x1b[0m"
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            with_override(Override.enable(), fail)
        assert override_status() == Override.disable()
        assert str(wrapped) == "example"

    def test_nested_scopes_restore_in_order(self):
        first = Override.none().with_ansi(ColorOverride.ENABLE)
        second = Override.disable()
        with override(first):
            with override(second):
                assert override_status() == second
            assert override_status() == first
        assert override_status() == Override.none()

    def test_passes_arguments_and_returns_result(self):
        assert with_override(True, lambda a, b=0: a + b, 1, b=2) == 3

    def test_scope_is_visible_to_other_threads(self):
        seen = []
        entered = threading.Event()
        checked = threading.Event()

        def reader():
            entered.wait(timeout=5)
            seen.append(supports(Stream.STDOUT).ansi)
            checked.set()

        thread = threading.Thread(target=reader)
        thread.start()
        with override(Override.enable()):
            entered.set()
            checked.wait(timeout=5)
        thread.join(timeout=5)
        assert seen == [True]


class TestSupports:
    def test_complete_override_skips_probe(self):
        with patch("tintline.supports.probe") as mock_probe:
            override_set(Override.enable())
            assert supports(Stream.STDERR) == ColorLevel(True, True, True)
            mock_probe.assert_not_called()

    def test_none_tiers_fall_back_to_probe(self):
        detected = ColorLevel(ansi=True, xterm=True, truecolor=False)
        with patch("tintline.supports.probe", return_value=detected):
            assert supports(Stream.STDOUT) == detected
            override_xterm(ColorOverride.DISABLE)
            override_truecolor(ColorOverride.ENABLE)
            assert supports(Stream.STDOUT) == ColorLevel(ansi=True, xterm=False, truecolor=True)

    def test_conditional_display_uses_detection(self):
        wrapped = colorize(10).if_supports_color(Stream.STDOUT, lambda v: colorize(v).red())
        with patch("tintline.supports.probe", return_value=ColorLevel.none()):
            assert f"{wrapped:03d}" == "010"
        with patch("tintline.supports.probe", return_value=ColorLevel(ansi=True)):
            assert f"{wrapped:03d}" == "\x1b[31m010\x1b[0m"
            assert repr(wrapped) == "\x1b[31m10\x1b[0m"


class TestProbe:
    def test_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert probe(Stream.STDOUT) == ColorLevel.none()

    def test_color_depth_from_environment(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("PROMPT_TOOLKIT_COLOR_DEPTH", "DEPTH_8_BIT")
        assert probe(Stream.STDERR) == ColorLevel(ansi=True, xterm=True, truecolor=False)

    def test_console_color_system(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("PROMPT_TOOLKIT_COLOR_DEPTH", raising=False)
        console = Mock()
        console.color_system = "truecolor"
        with patch("tintline.supports.Console", return_value=console):
            assert probe(Stream.STDOUT) == ColorLevel(True, True, True)

    def test_result_is_cached_per_stream(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("PROMPT_TOOLKIT_COLOR_DEPTH", raising=False)
        console = Mock()
        console.color_system = None
        with patch("tintline.supports.Console", return_value=console) as factory:
            assert probe(Stream.STDOUT) == ColorLevel.none()
            assert probe(Stream.STDOUT) == ColorLevel.none()
            assert factory.call_count == 1
            probe(Stream.STDERR)
            assert factory.call_count == 2


class TestTtyDisplay:
    def test_styles_when_stream_is_a_terminal(self):
        terminal = Mock(isatty=Mock(return_value=True))
        with patch("sys.stdout", new=terminal):
            assert str(colorize("example").if_tty(Stream.STDOUT, on_black)) == "\x1b[40mexample\x1b[0m"

    def test_plain_when_stream_is_redirected(self):
        redirected = Mock(isatty=Mock(return_value=False))
        with patch("sys.stderr", new=redirected):
            assert str(colorize("example").if_tty(Stream.STDERR, on_black)) == "example"

    def test_ignores_overrides(self):
        terminal = Mock(isatty=Mock(return_value=True))
        set_override(False)
        with patch("sys.stdout", new=terminal):
            assert str(colorize("example").if_tty(Stream.STDOUT, on_black)) == "\x1b[40mexample\x1b[0m"

    def test_decided_at_render_time(self):
        wrapped = colorize(5).if_tty(Stream.STDOUT, lambda v: colorize(v).red())
        with patch("sys.stdout", new=Mock(isatty=Mock(return_value=False))):
            assert f"{wrapped:02d}" == "05"
        with patch("sys.stdout", new=Mock(isatty=Mock(return_value=True))):
            assert f"{wrapped:02d}" == "\x1b[31m05\x1b[0m"
