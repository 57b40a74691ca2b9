import asyncio

import pytest

from auth_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


class SlowCommitSession:
    """Records the order of session calls; commit takes a while"""

    def __init__(self):
        self.events = []

    async def commit(self):
        self.events.append("commit started")
        await asyncio.sleep(0.05)
        self.events.append("commit finished")

    async def rollback(self):
        self.events.append("rollback")


@pytest.mark.asyncio
async def test_cancelled_commit_finishes_before_rollback():
    session = SlowCommitSession()
    uow = SqlAlchemyUnitOfWork(session)

    async def request():
        async with uow:
            await uow.commit()

    task = asyncio.create_task(request())
    await asyncio.sleep(0.01)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    assert session.events == ["commit started", "commit finished", "rollback"]


@pytest.mark.asyncio
async def test_commit_runs_before_exit_rollback():
    session = SlowCommitSession()

    async with SqlAlchemyUnitOfWork(session) as uow:
        await uow.commit()

    assert session.events == ["commit started", "commit finished", "rollback"]
