from __future__ import annotations

import pytest

from errors import UnknownMessageError
from messages import (
    GetSettingsMessage,
    LoadModelsMessage,
    MessageType,
    ModelProgressMessage,
    Response,
    TranscribeMessage,
    parse_message,
)
from models import ModelKind


def test_parse_transcribe() -> None:
    message = parse_message({"type": "TRANSCRIBE", "payload": {"audioData": "UklGRg=="}})
    assert message == TranscribeMessage(audio_data="UklGRg==")
    assert message.type is MessageType.TRANSCRIBE


def test_parse_transcribe_requires_audio() -> None:
    with pytest.raises(ValueError):
        parse_message({"type": "TRANSCRIBE", "payload": {}})


def test_parse_load_models_variants() -> None:
    explicit = parse_message(
        {"type": "LOAD_MODELS", "payload": {"asrModel": "a", "embeddingModel": "e"}}
    )
    assert explicit == LoadModelsMessage(asr_model="a", embedding_model="e")

    shorthand = parse_message(
        {"type": "LOAD_MODELS", "payload": {"settings": {"asr_model": "a"}, "minSimilarity": "0.7"}}
    )
    assert shorthand.settings == {"asr_model": "a"}
    assert shorthand.min_similarity == 0.7


def test_parse_progress_and_settings() -> None:
    progress = parse_message(
        {
            "type": "MODEL_PROGRESS",
            "payload": {"modelType": "embedding", "progress": 42, "status": "Downloading"},
        }
    )
    assert progress == ModelProgressMessage(ModelKind.EMBEDDING, 42, "Downloading")
    assert parse_message({"type": "GET_SETTINGS"}) == GetSettingsMessage()


def test_unknown_type_raises() -> None:
    with pytest.raises(UnknownMessageError) as info:
        parse_message({"type": "EXPLODE", "payload": {}})
    assert info.value.message == "Unknown message type: EXPLODE"


def test_to_dict_is_parseable() -> None:
    messages = [
        TranscribeMessage(audio_data="abc"),
        LoadModelsMessage(asr_model="a", embedding_model="e", min_similarity=0.5),
        GetSettingsMessage(),
        ModelProgressMessage(ModelKind.ASR, 10, "Downloading"),
    ]
    for message in messages:
        assert parse_message(message.to_dict()) == message


def test_response_dict_omits_empty_fields() -> None:
    assert Response.ok().to_dict() == {"success": True}
    assert Response.fail("boom").to_dict() == {"success": False, "error": "boom"}
    assert Response.from_dict({"success": True, "data": {"x": 1}}) == Response.ok({"x": 1})
