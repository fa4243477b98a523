"""Tests for pigdice/engine/events.py - payloads and recorders."""

from pigdice.engine.events import EventPayload, EventRecorder, GameEvent, ignore_event


class TestEventPayload:

    def test_defaults(self):
        payload = EventPayload(event=GameEvent.GAME_STARTED)
        assert payload.player_index is None
        assert payload.player_name is None
        assert payload.data == {}

    def test_data_not_shared(self):
        first = EventPayload(event=GameEvent.TURN_STARTED)
        second = EventPayload(event=GameEvent.TURN_STARTED)
        first.data["score"] = 5
        assert second.data == {}


class TestEventRecorder:

    def test_records_in_order(self):
        recorder = EventRecorder()
        recorder(EventPayload(GameEvent.TURN_STARTED, 0, "A"))
        recorder(EventPayload(GameEvent.PLAYER_BUST, 0, "A", {"roll": 1}))
        assert recorder.events == [GameEvent.TURN_STARTED, GameEvent.PLAYER_BUST]

    def test_of_type(self):
        recorder = EventRecorder()
        recorder(EventPayload(GameEvent.SCORE_UPDATED, 0, "A", {"score": 8}))
        recorder(EventPayload(GameEvent.TURN_STARTED, 1, "B"))
        recorder(EventPayload(GameEvent.SCORE_UPDATED, 1, "B", {"score": 0}))
        scores = [p.data["score"] for p in recorder.of_type(GameEvent.SCORE_UPDATED)]
        assert scores == [8, 0]


def test_ignore_event_returns_none():
    assert ignore_event(EventPayload(GameEvent.GAME_WON)) is None
