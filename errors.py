"""Shared error codes, user-facing messages and the coded exception type."""

from __future__ import annotations

PERMISSION_DENIED = "PERMISSION_DENIED"
CAPABILITY_UNAVAILABLE = "CAPABILITY_UNAVAILABLE"
MODEL_LOAD_FAILED = "MODEL_LOAD_FAILED"
MODEL_NOT_LOADED = "MODEL_NOT_LOADED"
AUDIO_TOO_SHORT = "AUDIO_TOO_SHORT"
NO_AUDIO = "NO_AUDIO"
NO_SPEECH = "NO_SPEECH"
SHORTCUT_NOT_FOUND = "SHORTCUT_NOT_FOUND"
UNKNOWN_MESSAGE = "UNKNOWN_MESSAGE"
COMPUTE_NOT_READY = "COMPUTE_NOT_READY"
TRANSCRIPTION_FAILED = "TRANSCRIPTION_FAILED"

ERROR_MESSAGES = {
    PERMISSION_DENIED: "Failed to start recording. Check microphone permissions.",
    CAPABILITY_UNAVAILABLE: "GPU acceleration is not available on this machine.",
    MODEL_LOAD_FAILED: "Failed to load models. Please check your connection.",
    MODEL_NOT_LOADED: "ASR model not loaded",
    AUDIO_TOO_SHORT: "Recording too short. Please hold the key for at least 0.5 seconds.",
    NO_AUDIO: "No audio captured. Please check your microphone and speak clearly.",
    NO_SPEECH: (
        "No speech detected. Please speak clearly into your microphone "
        "and hold the key longer."
    ),
    SHORTCUT_NOT_FOUND: "Shortcut not found",
    UNKNOWN_MESSAGE: "Unknown message type",
    COMPUTE_NOT_READY: "Compute context is not ready",
    TRANSCRIPTION_FAILED: "Transcription failed",
}


class VoiceCommandError(Exception):
    """An error that carries one of the codes above."""

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        super().__init__(self.message)


class CapabilityError(VoiceCommandError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(CAPABILITY_UNAVAILABLE, message)


class UnknownMessageError(VoiceCommandError):
    def __init__(self, message_type: object) -> None:
        self.message_type = message_type
        super().__init__(UNKNOWN_MESSAGE, f"Unknown message type: {message_type}")
