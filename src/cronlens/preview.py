"""Background evaluation of cron expressions."""

import asyncio
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Optional
import logging

from config import settings
from models import CronParseResult
from .cron_parser import evaluate

logger = logging.getLogger(__name__)


class CronEvaluator:
    """Runs evaluations on a worker pool so callers are never blocked by the search."""

    def __init__(self, max_workers: Optional[int] = None):
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers or settings.worker_threads,
            thread_name_prefix="cron-eval"
        )

    def submit(
        self,
        expression: str,
        base_time: Optional[datetime] = None,
        count: Optional[int] = None
    ) -> "Future[CronParseResult]":
        return self._pool.submit(evaluate, expression, base_time, count)

    async def evaluate_async(
        self,
        expression: str,
        base_time: Optional[datetime] = None,
        count: Optional[int] = None
    ) -> CronParseResult:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._pool, evaluate, expression, base_time, count)

    def shutdown(self):
        self._pool.shutdown(wait=False, cancel_futures=True)
        logger.info("Cron evaluator shut down")


class PreviewSession:
    """Live preview for one expression input.

    Every update supersedes the previous one. Results of superseded
    evaluations are dropped, so ``latest`` and the listener only ever
    see the result for the most recent expression.
    """

    def __init__(
        self,
        evaluator: CronEvaluator,
        listener: Optional[Callable[[CronParseResult], None]] = None
    ):
        self.evaluator = evaluator
        self.latest: Optional[CronParseResult] = None
        self._listener = listener
        self._generation = 0
        self._lock = threading.Lock()
        self._publish_lock = threading.RLock()

    def update(
        self,
        expression: str,
        base_time: Optional[datetime] = None,
        count: Optional[int] = None
    ) -> "Future[CronParseResult]":
        with self._lock:
            self._generation += 1
            generation = self._generation

        future = self.evaluator.submit(expression, base_time, count)
        future.add_done_callback(lambda done: self._publish(generation, done))
        return future

    def _publish(self, generation: int, future: "Future[CronParseResult]"):
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error(f"Cron evaluation failed: {error}", exc_info=error)
            return

        result = future.result()
        # Publications are serialized so a listener never sees a result after a newer one
        with self._publish_lock:
            with self._lock:
                if generation != self._generation:
                    logger.debug(f"Discarding superseded result for '{result.source}'")
                    return
                self.latest = result

            if self._listener:
                self._listener(result)
