import asyncio
import json
import logging

import pytest

import core.api.deliberate_thinking as deliberate_thinking_module
from core import DeliberateThinking
from core.errors import InvalidParameterError, SerializationError
from core.models import ThoughtRequest


def _request(**fields) -> ThoughtRequest:
    base = {"thought": "step", "nextThoughtNeeded": True, "thoughtNumber": 1, "totalThoughts": 3}
    base.update(fields)
    return ThoughtRequest(**base)


@pytest.mark.asyncio
async def test_concrete_branch_scenario():
    system = DeliberateThinking()

    first = await system.submit(_request(thought="A"))
    assert first.model_dump(by_alias=True) == {
        "thoughtNumber": 1,
        "totalThoughts": 3,
        "nextThoughtNeeded": True,
        "branches": [],
        "thoughtHistoryLength": 1,
    }

    second = await system.submit(
        _request(thought="B-alt", thoughtNumber=2, branchFromThought=1, branchId="alt")
    )
    assert second.branches == ["alt"]
    assert second.thought_history_length == 2
    history = await system.get_history()
    assert [t["thought"] for t in history] == ["A", "B-alt"]


@pytest.mark.asyncio
async def test_n_plain_thoughts():
    system = DeliberateThinking()
    for n in range(1, 6):
        response = await system.submit(_request(thoughtNumber=n, totalThoughts=5))
    assert response.thought_history_length == 5
    assert response.branches == []


@pytest.mark.asyncio
async def test_invalid_request_leaves_ledger_untouched():
    system = DeliberateThinking()
    await system.submit(_request())

    with pytest.raises(InvalidParameterError):
        await system.submit(_request(thoughtNumber=0))
    with pytest.raises(InvalidParameterError):
        await system.submit(_request(totalThoughts=0))

    status = await system.get_status()
    assert status["history_length"] == 1


@pytest.mark.asyncio
async def test_submit_json_uses_wire_names():
    system = DeliberateThinking()
    payload = json.loads(await system.submit_json(_request(needsMoreThoughts=True)))
    assert payload == {
        "thoughtNumber": 1,
        "totalThoughts": 3,
        "nextThoughtNeeded": True,
        "branches": [],
        "thoughtHistoryLength": 1,
    }


@pytest.mark.asyncio
async def test_serialization_failure_after_mutation(monkeypatch):
    def broken(response):
        raise ValueError("boom")

    monkeypatch.setattr(deliberate_thinking_module, "serialize_response", broken)
    system = DeliberateThinking()

    with pytest.raises(SerializationError) as exc:
        await system.submit_json(_request())

    assert exc.value.message == "Failed to serialize response: boom"
    assert (await system.get_status())["history_length"] == 1


@pytest.mark.asyncio
async def test_concurrent_submissions_get_distinct_lengths():
    system = DeliberateThinking()

    responses = await asyncio.gather(
        *(system.submit(_request(thoughtNumber=n, totalThoughts=50)) for n in range(1, 51))
    )

    lengths = sorted(r.thought_history_length for r in responses)
    assert lengths == list(range(1, 51))


@pytest.mark.asyncio
async def test_status_tracks_main_and_active_branch():
    system = DeliberateThinking()
    await system.submit(_request())
    await system.submit(_request(thoughtNumber=2))
    await system.submit(_request(thoughtNumber=2, branchFromThought=1, branchId="b"))
    await system.submit(_request(thoughtNumber=3))

    assert await system.get_status() == {
        "active_branch": "b",
        "branch_count": 1,
        "main_length": 2,
        "history_length": 3,
    }
    assert await system.list_branches() == ["b"]


@pytest.mark.asyncio
async def test_logs_step_with_annotations(caplog):
    system = DeliberateThinking()
    caplog.set_level(logging.INFO, logger="core")

    await system.submit(_request(thought="first"))
    await system.submit(
        _request(thought="again", thoughtNumber=2, isRevision=True, revisesThought=1, branchId="x")
    )

    messages = [r.getMessage() for r in caplog.records]
    assert "Deliberate Thinking Step 1/3: first" in messages
    assert "Deliberate Thinking Step 2/3: again" in messages
    assert "  Branch: x" in messages
    assert "  Revision of thought 1" in messages


@pytest.mark.asyncio
async def test_submission_waits_for_lock_holder():
    system = DeliberateThinking()
    await system.submit(_request())

    await system._lock.acquire()
    try:
        pending = asyncio.create_task(system.submit(_request(thoughtNumber=2)))
        for _ in range(5):
            await asyncio.sleep(0)

        assert not pending.done()
        assert system.ledger.history_length() == 1
    finally:
        system._lock.release()

    response = await pending
    assert response.thought_history_length == 2


@pytest.mark.asyncio
async def test_rejected_submission_waits_for_lock_too():
    system = DeliberateThinking()

    await system._lock.acquire()
    pending = asyncio.create_task(system.submit(_request(thoughtNumber=0)))
    await asyncio.sleep(0)
    assert not pending.done()
    system._lock.release()

    with pytest.raises(InvalidParameterError):
        await pending
