from __future__ import annotations

import pytest

from models import Modifier, ShortcutDescriptor
from shortcuts import SHORTCUTS, find_shortcut_by_id, iter_triggers, list_shortcuts


def test_ids_are_unique() -> None:
    ids = [s.id for s in SHORTCUTS]
    assert len(ids) == len(set(ids))


def test_every_shortcut_is_well_formed() -> None:
    for shortcut in list_shortcuts():
        assert shortcut.keys, shortcut.id
        assert shortcut.voice_triggers, shortcut.id
        if not shortcut.sequential:
            assert len(shortcut.keys) == 1, shortcut.id
        for trigger in shortcut.voice_triggers:
            assert trigger == trigger.strip() and trigger, shortcut.id


def test_find_by_id() -> None:
    inbox = find_shortcut_by_id("go_to_inbox")
    assert inbox is not None
    assert inbox.keys == ("g", "i")
    assert inbox.sequential is True
    assert "go to inbox" in inbox.voice_triggers

    search = find_shortcut_by_id("search")
    assert search is not None
    assert search.modifiers == (Modifier.PRIMARY,)

    assert find_shortcut_by_id("nope") is None


def test_iter_triggers_follows_catalogue_order() -> None:
    pairs = list(iter_triggers())
    assert pairs[0] == (SHORTCUTS[0], SHORTCUTS[0].voice_triggers[0])
    assert len(pairs) == sum(len(s.voice_triggers) for s in SHORTCUTS)


def test_descriptor_rejects_bad_key_shapes() -> None:
    with pytest.raises(ValueError):
        ShortcutDescriptor(id="x", name="X", description="", voice_triggers=("x",), keys=())
    with pytest.raises(ValueError):
        ShortcutDescriptor(
            id="x", name="X", description="", voice_triggers=("x",), keys=("a", "b")
        )
