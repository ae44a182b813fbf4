"""
Scheduled sweep of expired sessions.

Uses APScheduler to run the cleanup on a fixed interval.
"""

import logging
from typing import AsyncContextManager, Callable, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth import CleanupExpiredSessionsUseCase

logger = logging.getLogger(__name__)

SWEEP_JOB_ID = "session_sweep"


class SessionSweeper:
    """
    Runs CleanupExpiredSessionsUseCase every `interval` seconds, each sweep
    in a fresh unit of work opened by `uow_scope`.

    A failed sweep is logged and the next tick runs as scheduled.
    """

    def __init__(
        self,
        uow_scope: Callable[[], AsyncContextManager[UnitOfWork]],
        interval: float,
        scheduler: Optional[AsyncIOScheduler] = None,
    ):
        self.uow_scope = uow_scope
        self.interval = interval
        self.scheduler = scheduler or AsyncIOScheduler()

    @property
    def running(self) -> bool:
        return self.scheduler.running and self.scheduler.get_job(SWEEP_JOB_ID) is not None

    async def sweep_once(self) -> int:
        try:
            async with self.uow_scope() as uow:
                result = await CleanupExpiredSessionsUseCase(uow).execute()
        except Exception:
            logger.exception("Session sweep failed")
            return 0
        return result.value.removed

    def start(self) -> None:
        """Schedule the sweep; an interval of 0 or less disables it"""
        if self.interval <= 0 or self.running:
            return
        self.scheduler.add_job(
            self.sweep_once,
            trigger=IntervalTrigger(seconds=self.interval),
            id=SWEEP_JOB_ID,
            name="Sweep expired sessions",
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        if not self.scheduler.running:
            self.scheduler.start()
        logger.info("Session sweeper started (every %ss)", self.interval)

    async def stop(self) -> None:
        if not self.scheduler.running:
            return
        self.scheduler.shutdown(wait=False)
        logger.info("Session sweeper stopped")
