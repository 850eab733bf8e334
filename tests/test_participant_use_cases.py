"""Tests for the participant use cases against a real database session."""

from __future__ import annotations

import pytest

from app.application.use_cases.participants import (
    create_participant,
    delete_participant,
    get_participant,
    list_participants,
    update_participant,
)
from app.domain.exceptions import InvalidInput, NotFoundError


def test_create_and_get_participant(session):
    participant = create_participant(session, name="Ana")

    assert participant.id
    assert participant.name == "Ana"
    assert get_participant(session, participant.id) == participant


@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_participant_requires_name(session, name):
    with pytest.raises(InvalidInput):
        create_participant(session, name=name)

    assert list_participants(session) == []


def test_update_participant_replaces_name(session):
    participant = create_participant(session, name="Ana")

    updated = update_participant(session, participant_id=participant.id, name="Bea")

    assert updated.id == participant.id
    assert get_participant(session, participant.id).name == "Bea"


def test_strict_update_rejects_empty_name(session):
    participant = create_participant(session, name="Ana")

    with pytest.raises(InvalidInput):
        update_participant(session, participant_id=participant.id, name="", strict=True)

    assert get_participant(session, participant.id).name == "Ana"


def test_delete_participant_returns_previous_record(session):
    participant = create_participant(session, name="Ana")

    deleted = delete_participant(session, participant.id)

    assert deleted == participant
    with pytest.raises(NotFoundError):
        get_participant(session, participant.id)


def test_missing_participant_operations_raise_not_found(session):
    existing = create_participant(session, name="Ana")

    with pytest.raises(NotFoundError):
        get_participant(session, "missing")
    with pytest.raises(NotFoundError):
        update_participant(session, participant_id="missing", name="x")
    with pytest.raises(NotFoundError):
        delete_participant(session, "missing")

    assert list_participants(session) == [existing]


def test_list_participants_in_key_order(session):
    created = [create_participant(session, name=name) for name in ("Ana", "Bea", "Caio")]

    assert [p.id for p in list_participants(session)] == sorted(p.id for p in created)
