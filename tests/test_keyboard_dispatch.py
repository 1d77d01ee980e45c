"""Tests for the keyboard dispatch engine and the pynput target."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

import keyboard_dispatch
from keyboard_dispatch import (
    KeyboardDispatcher,
    PynputKeyTarget,
    build_key_events,
    get_key_code,
    is_mac_platform,
)
from models import KeyEvent, Modifier
from shortcuts import SHORTCUTS, find_shortcut_by_id


class RecordingTarget:
    def __init__(self, log: list) -> None:
        self.log = log

    def dispatch_event(self, event: KeyEvent) -> None:
        self.log.append(("event", event))


requires_pynput = pytest.mark.skipif(
    keyboard_dispatch.Key is None, reason="no pynput keyboard backend available"
)


@pytest.fixture
def sleeps(monkeypatch) -> list:  # noqa: ANN001
    log: list = []

    async def fake_sleep(delay: float) -> None:
        log.append(("sleep", delay))

    monkeypatch.setattr(
        keyboard_dispatch, "asyncio", SimpleNamespace(sleep=fake_sleep, Lock=asyncio.Lock)
    )
    return log


# ---------------------------------------------------------------
# Key codes and event construction
# ---------------------------------------------------------------

def test_key_codes() -> None:
    assert get_key_code("g") == "KeyG"
    assert get_key_code("G") == "KeyG"
    assert get_key_code("?") == "Slash"
    assert get_key_code("\\") == "Backslash"
    assert get_key_code("7") == "Digit7"
    assert get_key_code("Enter") == "Enter"
    assert get_key_code("ArrowUp") == "ArrowUp"


def test_platform_detection() -> None:
    assert is_mac_platform("darwin") is True
    assert is_mac_platform("linux") is False


def test_primary_modifier_is_meta_on_mac_and_ctrl_elsewhere() -> None:
    mac_down, _ = build_key_events("k", (Modifier.PRIMARY,), mac=True)
    pc_down, _ = build_key_events("k", (Modifier.PRIMARY,), mac=False)

    assert (mac_down.meta, mac_down.ctrl) == (True, False)
    assert (pc_down.meta, pc_down.ctrl) == (False, True)


def test_secondary_modifier_is_always_ctrl() -> None:
    down, _ = build_key_events("k", (Modifier.SECONDARY,), mac=True)
    assert (down.meta, down.ctrl) == (False, True)


def test_shifted_symbols_carry_shift() -> None:
    down, up = build_key_events("?")
    assert down.shift is True and up.shift is True
    assert down.code == "Slash"
    assert build_key_events("/")[0].shift is False


def test_events_are_a_down_up_pair() -> None:
    down, up = build_key_events("c", (Modifier.SHIFT, Modifier.ALT))
    assert (down.type, up.type) == ("keydown", "keyup")
    assert down.shift and down.alt
    assert (down.key, down.code) == (up.key, up.code) == ("c", "KeyC")


# ---------------------------------------------------------------
# KeyboardDispatcher
# ---------------------------------------------------------------

def test_sequential_shortcut_presses_keys_in_order(sleeps) -> None:  # noqa: ANN001
    target = RecordingTarget(sleeps)
    dispatcher = KeyboardDispatcher(target, platform="linux")

    asyncio.run(dispatcher.dispatch(find_shortcut_by_id("go_to_inbox")))

    summary = [
        (entry[1].type, entry[1].key) if entry[0] == "event" else entry for entry in sleeps
    ]
    assert summary == [
        ("keydown", "g"),
        ("keyup", "g"),
        ("sleep", 0.05),
        ("keydown", "i"),
        ("keyup", "i"),
    ]


def test_single_key_shortcut_applies_modifiers(sleeps) -> None:  # noqa: ANN001
    target = RecordingTarget(sleeps)
    dispatcher = KeyboardDispatcher(target, platform="darwin")

    asyncio.run(dispatcher.dispatch(find_shortcut_by_id("search")))

    events = [entry[1] for entry in sleeps if entry[0] == "event"]
    assert [e.type for e in events] == ["keydown", "keyup"]
    assert all(e.key == "k" and e.meta and not e.ctrl for e in events)
    assert not any(entry[0] == "sleep" for entry in sleeps)


def test_focused_target_is_preferred(sleeps) -> None:  # noqa: ANN001
    default_log: list = []
    focused_log: list = []
    dispatcher = KeyboardDispatcher(
        RecordingTarget(default_log),
        focused_target=lambda: RecordingTarget(focused_log),
    )

    asyncio.run(dispatcher.dispatch(find_shortcut_by_id("show_shortcuts")))

    assert default_log == []
    assert [e.type for _kind, e in focused_log] == ["keydown", "keyup"]
    assert focused_log[0][1].shift is True


def test_falls_back_to_default_target_without_focus(sleeps) -> None:  # noqa: ANN001
    default_log: list = []
    dispatcher = KeyboardDispatcher(RecordingTarget(default_log), focused_target=lambda: None)

    asyncio.run(dispatcher.dispatch(find_shortcut_by_id("toggle_sidebar")))

    assert [e.code for _kind, e in default_log] == ["Backslash", "Backslash"]


def test_concurrent_dispatches_do_not_interleave() -> None:
    log: list = []
    dispatcher = KeyboardDispatcher(RecordingTarget(log), key_delay_s=0.01)
    inbox = find_shortcut_by_id("go_to_inbox")
    backlog = find_shortcut_by_id("go_to_backlog")

    async def run() -> None:
        await asyncio.gather(dispatcher.dispatch(inbox), dispatcher.dispatch(backlog))

    asyncio.run(run())

    keys = [e.key for _kind, e in log if e.type == "keydown"]
    assert keys == ["g", "i", "g", "b"]


# ---------------------------------------------------------------
# PynputKeyTarget
# ---------------------------------------------------------------

@requires_pynput
def test_pynput_target_presses_modifiers_around_key() -> None:
    Key = keyboard_dispatch.Key
    controller = MagicMock()
    target = PynputKeyTarget(controller=controller)
    down, up = build_key_events("k", (Modifier.PRIMARY, Modifier.SHIFT), mac=False)

    target.dispatch_event(down)
    target.dispatch_event(up)

    assert [c.args[0] for c in controller.press.call_args_list] == [Key.ctrl, Key.shift, "k"]
    assert [c.args[0] for c in controller.release.call_args_list] == ["k", Key.shift, Key.ctrl]


@requires_pynput
def test_pynput_target_types_shifted_symbol_directly() -> None:
    controller = MagicMock()
    target = PynputKeyTarget(controller=controller)

    down, _up = build_key_events("?")
    target.dispatch_event(down)

    controller.press.assert_called_once_with("?")


@requires_pynput
def test_pynput_target_maps_named_keys() -> None:
    Key = keyboard_dispatch.Key
    controller = MagicMock()
    target = PynputKeyTarget(controller=controller)

    target.dispatch_event(build_key_events("Escape")[0])
    target.dispatch_event(build_key_events("ArrowUp")[0])

    pressed = [c.args[0] for c in controller.press.call_args_list]
    assert pressed == [Key.esc, Key.up]


@requires_pynput
def test_every_catalogue_key_maps_to_pynput() -> None:
    target = PynputKeyTarget(controller=MagicMock())
    for shortcut in SHORTCUTS:
        for key in shortcut.keys:
            target._to_pynput(key)


@requires_pynput
def test_pynput_target_rejects_unknown_event_type() -> None:
    target = PynputKeyTarget(controller=MagicMock())
    with pytest.raises(ValueError):
        target.dispatch_event(KeyEvent(type="keypress", key="a", code="KeyA"))
