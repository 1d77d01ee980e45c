from __future__ import annotations

from types import SimpleNamespace

import pytest

from hotkey import GlobalHotkeyAdapter, key_name, normalize_hotkey


class FakeListener:
    instances: list["FakeListener"] = []

    def __init__(self, on_press, on_release) -> None:  # noqa: ANN001
        self.on_press = on_press
        self.on_release = on_release
        self.started = False
        self.stopped = False
        FakeListener.instances.append(self)

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture(autouse=True)
def _reset_listeners() -> None:
    FakeListener.instances.clear()


ALT_L = "Key.alt_l"


class _SpecialKey:
    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name


def test_key_name_and_normalize() -> None:
    assert key_name(SimpleNamespace(char="R")) == "r"
    assert key_name(_SpecialKey(ALT_L)) == ALT_L
    assert normalize_hotkey("R") == "r"
    assert normalize_hotkey(ALT_L) == ALT_L


def test_press_and_release_are_forwarded_once() -> None:
    events: list[str] = []
    adapter = GlobalHotkeyAdapter(listener_factory=FakeListener)
    adapter.register(ALT_L, lambda: events.append("press"), lambda: events.append("release"))
    listener = FakeListener.instances[0]
    key = _SpecialKey(ALT_L)

    assert listener.started is True
    listener.on_press(key)
    listener.on_press(key)  # auto-repeat
    listener.on_press(_SpecialKey("Key.ctrl"))
    listener.on_release(key)
    listener.on_release(key)

    assert events == ["press", "release"]


def test_disposer_stops_listener_and_blocks_events() -> None:
    events: list[str] = []
    adapter = GlobalHotkeyAdapter(listener_factory=FakeListener)
    dispose = adapter.register("r", lambda: events.append("press"), lambda: None)
    listener = FakeListener.instances[0]

    dispose()
    dispose()  # idempotent
    listener.on_press(SimpleNamespace(char="r"))

    assert listener.stopped is True
    assert events == []


def test_register_disposes_previous_listener() -> None:
    events: list[str] = []
    adapter = GlobalHotkeyAdapter(listener_factory=FakeListener)
    adapter.register("r", lambda: events.append("old"), lambda: None)
    adapter.register("t", lambda: events.append("new"), lambda: None)
    old, new = FakeListener.instances

    old.on_press(SimpleNamespace(char="r"))
    new.on_press(SimpleNamespace(char="t"))

    assert old.stopped is True
    assert new.stopped is False
    assert events == ["new"]


def test_stop_disposes_current_listener() -> None:
    adapter = GlobalHotkeyAdapter(listener_factory=FakeListener)
    adapter.register("r", lambda: None, lambda: None)

    adapter.stop()
    adapter.stop()

    assert FakeListener.instances[0].stopped is True


def test_register_without_pynput_raises(monkeypatch) -> None:  # noqa: ANN001
    import hotkey

    monkeypatch.setattr(hotkey, "keyboard", None)
    with pytest.raises(RuntimeError, match="pynput is not installed"):
        GlobalHotkeyAdapter().register("r", lambda: None, lambda: None)
