"""Global push-to-talk hotkey based on pynput."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

try:
    from pynput import keyboard
except Exception:  # pragma: no cover
    keyboard = None  # type: ignore

logger = logging.getLogger(__name__)

Disposer = Callable[[], None]


def key_name(key: object) -> str:
    """``"r"`` for character keys, ``"Key.alt_l"`` style for special keys."""
    char = getattr(key, "char", None)
    if char:
        return str(char).lower()
    return str(key)


def normalize_hotkey(name: str) -> str:
    return name if name.startswith("Key.") else name.lower()


class GlobalHotkeyAdapter:
    """Registers one press/release listener set at a time.

    ``register`` always disposes the previous set before installing the new
    one, and a disposed set never forwards another event.
    """

    def __init__(self, listener_factory: Optional[Callable[..., Any]] = None) -> None:
        self._listener_factory = listener_factory
        self._dispose: Optional[Disposer] = None
        self._lock = threading.Lock()

    def register(
        self,
        hotkey_name: str,
        on_press: Callable[[], None],
        on_release: Callable[[], None],
    ) -> Disposer:
        factory = self._listener_factory
        if factory is None:
            if keyboard is None:
                raise RuntimeError("pynput is not installed")
            factory = keyboard.Listener

        self.stop()

        wanted = normalize_hotkey(hotkey_name)
        revoked = threading.Event()
        pressed = [False]
        state_lock = threading.Lock()

        def _on_press(key: object) -> None:
            if revoked.is_set() or key_name(key) != wanted:
                return
            with state_lock:
                if pressed[0]:
                    return  # auto-repeat
                pressed[0] = True
            on_press()

        def _on_release(key: object) -> None:
            if revoked.is_set() or key_name(key) != wanted:
                return
            with state_lock:
                if not pressed[0]:
                    return
                pressed[0] = False
            on_release()

        listener = factory(on_press=_on_press, on_release=_on_release)
        listener.start()
        logger.info("Listening for activation key %s", wanted)

        def _dispose() -> None:
            if revoked.is_set():
                return
            revoked.set()
            listener.stop()
            logger.debug("Removed listeners for %s", wanted)

        with self._lock:
            self._dispose = _dispose
        return _dispose

    def stop(self) -> None:
        with self._lock:
            dispose, self._dispose = self._dispose, None
        if dispose is not None:
            dispose()
