"""Unit tests for the per-request session dependency."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from catalog.db.base import get_db


def _session_factory():
    session = AsyncMock()
    factory = MagicMock()
    factory.return_value.__aenter__ = AsyncMock(return_value=session)
    factory.return_value.__aexit__ = AsyncMock(return_value=False)
    return factory, session


@pytest.mark.asyncio
async def test_get_db_rolls_back_on_cancellation():
    """A cancelled request rolls back pending work and stays cancelled."""
    factory, session = _session_factory()

    with patch("catalog.db.base.AsyncSessionLocal", factory):
        gen = get_db()
        assert await gen.__anext__() is session

        with pytest.raises(asyncio.CancelledError):
            await gen.athrow(asyncio.CancelledError())

    session.rollback.assert_awaited_once()
    session.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_db_normal_exit_does_not_roll_back():
    factory, session = _session_factory()

    with patch("catalog.db.base.AsyncSessionLocal", factory):
        gen = get_db()
        await gen.__anext__()
        with pytest.raises(StopAsyncIteration):
            await gen.__anext__()

    session.rollback.assert_not_awaited()
    factory.return_value.__aexit__.assert_awaited_once()
