"""Replays a resolved shortcut as synthetic keyboard events."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Iterable, Optional

from config import SEQUENTIAL_KEY_DELAY_S
from interfaces import FocusedTargetProvider, KeyEventTarget
from models import KeyEvent, Modifier, ShortcutDescriptor

try:
    from pynput.keyboard import Controller, Key
except Exception:  # pragma: no cover
    Controller = None  # type: ignore
    Key = None  # type: ignore

logger = logging.getLogger(__name__)

# Shifted digit-row symbols always carry the shift flag.
SHIFTED_SYMBOLS = frozenset("?+!@#$%^&*()_")

SPECIAL_KEY_CODES = {
    "Enter": "Enter",
    "Escape": "Escape",
    "Backspace": "Backspace",
    "Delete": "Delete",
    "Tab": "Tab",
    "\\": "Backslash",
    "/": "Slash",
    "[": "BracketLeft",
    "]": "BracketRight",
    ".": "Period",
    ",": "Comma",
    "?": "Slash",
    "+": "Equal",
    "-": "Minus",
    "=": "Equal",
    **{str(d): f"Digit{d}" for d in range(10)},
}


def get_key_code(key: str) -> str:
    if key in SPECIAL_KEY_CODES:
        return SPECIAL_KEY_CODES[key]
    if len(key) == 1 and "a" <= key <= "z":
        return f"Key{key.upper()}"
    if len(key) == 1 and "A" <= key <= "Z":
        return f"Key{key}"
    return key


def is_mac_platform(platform: Optional[str] = None) -> bool:
    return (platform or sys.platform) == "darwin"


def build_key_events(
    key: str,
    modifiers: Iterable[Modifier] = (),
    mac: bool = False,
) -> tuple[KeyEvent, KeyEvent]:
    """Return the (keydown, keyup) pair for one logical key press."""
    mods = set(modifiers)
    flags = dict(
        key=key,
        code=get_key_code(key),
        shift=Modifier.SHIFT in mods or key in SHIFTED_SYMBOLS,
        meta=Modifier.PRIMARY in mods and mac,
        ctrl=Modifier.SECONDARY in mods or (Modifier.PRIMARY in mods and not mac),
        alt=Modifier.ALT in mods,
    )
    return KeyEvent(type="keydown", **flags), KeyEvent(type="keyup", **flags)


class KeyboardDispatcher:
    def __init__(
        self,
        default_target: KeyEventTarget,
        focused_target: Optional[FocusedTargetProvider] = None,
        platform: Optional[str] = None,
        key_delay_s: float = SEQUENTIAL_KEY_DELAY_S,
    ) -> None:
        self._default_target = default_target
        self._focused_target = focused_target
        self._mac = is_mac_platform(platform)
        self._key_delay_s = key_delay_s
        self._lock: Optional[asyncio.Lock] = None

    async def dispatch(self, shortcut: ShortcutDescriptor) -> None:
        # One shortcut at a time so two dispatches never interleave.
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            logger.info("Executing shortcut %s (%s)", shortcut.id, "+".join(shortcut.keys))
            if shortcut.sequential:
                last = len(shortcut.keys) - 1
                for i, key in enumerate(shortcut.keys):
                    self._press(key)
                    if i < last:
                        await asyncio.sleep(self._key_delay_s)
            else:
                self._press(shortcut.keys[0], shortcut.modifiers)

    def _press(self, key: str, modifiers: Iterable[Modifier] = ()) -> None:
        target = self._resolve_target()
        down, up = build_key_events(key, modifiers, mac=self._mac)
        target.dispatch_event(down)
        target.dispatch_event(up)

    def _resolve_target(self) -> KeyEventTarget:
        if self._focused_target is not None:
            focused = self._focused_target()
            if focused is not None:
                return focused
        return self._default_target


class PynputKeyTarget:
    """Sends key events to whatever window has keyboard focus."""

    def __init__(self, controller=None) -> None:
        if controller is None:
            if Controller is None:
                raise RuntimeError("pynput is not installed")
            controller = Controller()
        self._controller = controller

    def dispatch_event(self, event: KeyEvent) -> None:
        key = self._to_pynput(event.key)
        mods = self._modifier_keys(event)
        if event.type == "keydown":
            for mod in mods:
                self._controller.press(mod)
            self._controller.press(key)
        elif event.type == "keyup":
            self._controller.release(key)
            for mod in reversed(mods):
                self._controller.release(mod)
        else:
            raise ValueError(f"unsupported key event type: {event.type}")

    def _modifier_keys(self, event: KeyEvent) -> list:
        if Key is None:
            raise RuntimeError("pynput is not installed")
        mods = []
        if event.meta:
            mods.append(Key.cmd)
        if event.ctrl:
            mods.append(Key.ctrl)
        if event.alt:
            mods.append(Key.alt)
        # Shifted symbols are typed as their character; pynput applies shift itself.
        if event.shift and event.key not in SHIFTED_SYMBOLS:
            mods.append(Key.shift)
        return mods

    def _to_pynput(self, key: str):
        if Key is None:
            raise RuntimeError("pynput is not installed")
        named = {
            "Enter": Key.enter,
            "Escape": Key.esc,
            "Backspace": Key.backspace,
            "Delete": Key.delete,
            "Tab": Key.tab,
            "ArrowUp": Key.up,
            "ArrowDown": Key.down,
            "ArrowLeft": Key.left,
            "ArrowRight": Key.right,
            " ": Key.space,
        }
        if key in named:
            return named[key]
        if len(key) == 1:
            return key
        raise ValueError(f"no pynput mapping for key {key!r}")
