import asyncio

import pytest

from typeahead.core.debouncer import Debouncer


@pytest.mark.asyncio
async def test_rapid_pushes_emit_only_the_last_value():
    emitted: list[str] = []
    debouncer = Debouncer(0.3, emitted.append)

    for text in ("a", "ap", "app"):
        debouncer.push(text)
        await asyncio.sleep(0.05)

    assert emitted == []
    await asyncio.sleep(0.4)
    assert emitted == ["app"]
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_each_push_restarts_the_window():
    emitted: list[str] = []
    debouncer = Debouncer(0.1, emitted.append)

    debouncer.push("a")
    await asyncio.sleep(0.07)
    debouncer.push("ab")
    await asyncio.sleep(0.07)

    # 0.14s after the first push, but only 0.07s after the second
    assert emitted == []
    await asyncio.sleep(0.1)
    assert emitted == ["ab"]


@pytest.mark.asyncio
async def test_separate_bursts_emit_separately():
    emitted: list[str] = []
    debouncer = Debouncer(0.05, emitted.append)

    debouncer.push("one")
    await asyncio.sleep(0.1)
    debouncer.push("two")
    await asyncio.sleep(0.1)

    assert emitted == ["one", "two"]


def test_zero_delay_emits_synchronously():
    emitted: list[str] = []
    debouncer = Debouncer(0, emitted.append)

    debouncer.push("a")
    debouncer.push("ab")

    assert emitted == ["a", "ab"]
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_cancel_drops_pending_value():
    emitted: list[str] = []
    debouncer = Debouncer(0.05, emitted.append)

    debouncer.push("gone")
    assert debouncer.pending
    debouncer.cancel()
    await asyncio.sleep(0.1)

    assert emitted == []
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_flush_emits_immediately():
    emitted: list[str] = []
    debouncer = Debouncer(10, emitted.append)

    debouncer.push("now")
    debouncer.flush()

    assert emitted == ["now"]
    assert not debouncer.pending

    # Nothing pending, nothing to flush
    debouncer.flush()
    assert emitted == ["now"]


def test_negative_delay_is_rejected():
    with pytest.raises(ValueError):
        Debouncer(-0.1, lambda value: None)
