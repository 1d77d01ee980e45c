"""State-machine based voice command sessions in the capture context."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from config import Settings
from errors import ERROR_MESSAGES, SHORTCUT_NOT_FOUND, TRANSCRIPTION_FAILED, VoiceCommandError
from hotkey import GlobalHotkeyAdapter
from interfaces import Recorder
from keyboard_dispatch import KeyboardDispatcher
from messages import Message, Response, TranscribeMessage
from models import IntentResult, SessionState, ShortcutDescriptor, StatusKind, TranscriptionResult
from recognizer import _pcm_to_wav_base64
from shortcuts import find_shortcut_by_id

logger = logging.getLogger(__name__)

SendFn = Callable[[Message], Awaitable[Response]]
StateCallback = Callable[[SessionState, SessionState], None]
StatusCallback = Callable[[StatusKind, str], None]
ShortcutLookup = Callable[[str], Optional[ShortcutDescriptor]]

_ALLOWED = {
    (SessionState.IDLE, SessionState.RECORDING),
    (SessionState.RECORDING, SessionState.PROCESSING),
    (SessionState.RECORDING, SessionState.IDLE),
    (SessionState.PROCESSING, SessionState.IDLE),
}


class SessionController:
    def __init__(
        self,
        recorder: Recorder,
        send: SendFn,
        dispatcher: KeyboardDispatcher,
        hotkeys: GlobalHotkeyAdapter,
        settings: Optional[Settings] = None,
        find_shortcut: ShortcutLookup = find_shortcut_by_id,
        on_state_change: Optional[StateCallback] = None,
        on_status: Optional[StatusCallback] = None,
    ) -> None:
        self._recorder = recorder
        self._send = send
        self._dispatcher = dispatcher
        self._hotkeys = hotkeys
        self._settings = settings or Settings()
        self._find_shortcut = find_shortcut
        self._on_state_change = on_state_change
        self._on_status = on_status

        self._state = SessionState.IDLE
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def settings(self) -> Settings:
        return self._settings

    # ------------------------------------------------------------------
    # Activation key wiring
    # ------------------------------------------------------------------

    def activate(self, loop: asyncio.AbstractEventLoop) -> None:
        """Install the activation-key listeners; events are handled on ``loop``."""
        self._loop = loop
        self._register_listeners()

    def apply_settings(self, settings: Settings) -> None:
        old_key = self._settings.activation_key
        self._settings = settings
        if old_key != settings.activation_key:
            logger.info("Activation key changed from %s to %s", old_key, settings.activation_key)
            # the release of the old key will never be delivered
            if self._cancel_recording():
                self._emit_status(StatusKind.ERROR, "Recording cancelled: activation key changed")
            if self._loop is not None:
                self._register_listeners()

    def shutdown(self) -> None:
        self._hotkeys.stop()
        self._cancel_recording()

    def _cancel_recording(self) -> bool:
        if self._state != SessionState.RECORDING:
            return False
        try:
            self._recorder.stop()
        except Exception as exc:
            logger.debug("Recorder stop while cancelling: %s", exc)
        self._transition(SessionState.IDLE)
        return True

    def _register_listeners(self) -> None:
        self._hotkeys.register(
            self._settings.activation_key,
            on_press=self._on_hotkey_press,
            on_release=self._on_hotkey_release,
        )

    def _on_hotkey_press(self) -> None:
        # pynput thread
        if self._loop is not None:
            self._loop.call_soon_threadsafe(self.start_session)

    def _on_hotkey_release(self) -> None:
        # pynput thread
        if self._loop is not None:
            asyncio.run_coroutine_threadsafe(self.stop_session(), self._loop)

    # ------------------------------------------------------------------
    # Session flow
    # ------------------------------------------------------------------

    def start_session(self) -> None:
        if self._state != SessionState.IDLE:
            return
        self._transition(SessionState.RECORDING)
        self._emit_status(StatusKind.RECORDING, "Release key to process")
        try:
            self._recorder.start()
        except VoiceCommandError as exc:
            self._emit_status(StatusKind.ERROR, exc.message)
            self._transition(SessionState.IDLE)
        except Exception as exc:
            logger.error("Failed to start recording: %s", exc)
            self._emit_status(
                StatusKind.ERROR, "Failed to start recording. Check microphone permissions."
            )
            self._transition(SessionState.IDLE)

    async def stop_session(self) -> None:
        if self._state != SessionState.RECORDING:
            return
        self._transition(SessionState.PROCESSING)
        try:
            await self._process()
        except VoiceCommandError as exc:
            logger.warning("Voice command failed: %s", exc.message)
            self._emit_status(StatusKind.ERROR, exc.message)
        except Exception as exc:
            logger.exception("Voice command failed")
            self._emit_status(StatusKind.ERROR, str(exc) or "Command failed")
        finally:
            self._transition(SessionState.IDLE)

    async def _process(self) -> None:
        audio = self._recorder.stop()
        audio_data = _pcm_to_wav_base64(audio.pcm16_bytes, audio.sample_rate, audio.channels)

        self._emit_status(StatusKind.TRANSCRIBING, "Converting speech to text...")
        response = await self._send(TranscribeMessage(audio_data=audio_data))
        if not response.success:
            raise VoiceCommandError(TRANSCRIPTION_FAILED, response.error or None)

        data = response.data or {}
        transcription = TranscriptionResult.from_dict(data.get("transcription") or {})
        intent = IntentResult.from_dict(data.get("intent") or {})
        self._emit_status(StatusKind.PROCESSING, transcription.text)

        if not intent.shortcut_id:
            self._emit_status(
                StatusKind.ERROR, f'No matching command found for "{transcription.text}"'
            )
            return

        shortcut = self._find_shortcut(intent.shortcut_id)
        if shortcut is None:
            self._emit_status(
                StatusKind.ERROR, f"{ERROR_MESSAGES[SHORTCUT_NOT_FOUND]}: {intent.shortcut_id}"
            )
            return

        await self._dispatcher.dispatch(shortcut)
        self._emit_status(StatusKind.COMPLETE, f"Executed: {shortcut.name}")

    def _emit_status(self, kind: StatusKind, message: str) -> None:
        if self._on_status:
            self._on_status(kind, message)

    def _transition(self, to_state: SessionState) -> None:
        from_state = self._state
        if from_state == to_state:
            return
        if (from_state, to_state) not in _ALLOWED:
            raise RuntimeError(f"illegal session transition {from_state.value} -> {to_state.value}")
        self._state = to_state
        if self._on_state_change:
            self._on_state_change(from_state, to_state)
