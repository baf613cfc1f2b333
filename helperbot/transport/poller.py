"""Long-polling update loop."""

import asyncio
import contextlib

from loguru import logger

from helperbot.commands.dispatcher import Dispatcher
from helperbot.errors import TelegramError
from helperbot.services.health_service import HealthChecker
from helperbot.transport.telegram import TelegramClient, parse_message


class UpdatePoller:
    """Pulls updates from Telegram and hands each message to the dispatcher.

    Every message is handled in its own task, so a slow upstream fetch for one
    chat never holds up the others.
    """

    def __init__(
        self,
        telegram: TelegramClient,
        dispatcher: Dispatcher,
        health: HealthChecker,
        error_backoff_seconds: float = 5.0,
    ) -> None:
        """Initialize poller.

        Args:
            telegram: Telegram client
            dispatcher: Command dispatcher
            health: Health checker updated after each poll
            error_backoff_seconds: Pause after a failed poll
        """
        self.telegram = telegram
        self.dispatcher = dispatcher
        self.health = health
        self.error_backoff_seconds = error_backoff_seconds
        self.offset: int | None = None
        self._running = False
        self._worker_task: asyncio.Task[None] | None = None
        self._handler_tasks: set[asyncio.Task[bool]] = set()

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start polling in the background."""
        if self._running:
            logger.warning("Poller already running")
            return

        self._running = True
        self._worker_task = asyncio.create_task(self._poll_loop())
        logger.info("Update poller started")

    async def stop(self) -> None:
        """Stop polling and cancel in-flight handlers."""
        if not self._running:
            return

        logger.info("Stopping update poller...")
        self._running = False

        if self._worker_task:
            self._worker_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._worker_task

        for task in list(self._handler_tasks):
            task.cancel()
        await asyncio.gather(*self._handler_tasks, return_exceptions=True)
        self._handler_tasks.clear()

        logger.info("Update poller stopped")

    async def _poll_loop(self) -> None:
        while self._running:
            try:
                await self.poll_once()
            except asyncio.CancelledError:
                break
            except TelegramError as e:
                self.health.set_polling_status(False)
                logger.error(f"Polling failed: {e}")
                await asyncio.sleep(self.error_backoff_seconds)
            except Exception:
                self.health.set_polling_status(False)
                logger.exception("Unexpected error while polling")
                await asyncio.sleep(self.error_backoff_seconds)

    async def poll_once(self) -> int:
        """Fetch one batch of updates and schedule their handling.

        Returns:
            Number of messages scheduled
        """
        updates = await self.telegram.get_updates(offset=self.offset)
        self.health.set_polling_status(True)

        scheduled = 0
        for update in updates:
            update_id = update.get("update_id")
            if isinstance(update_id, int):
                self.offset = update_id + 1

            message = parse_message(update)
            if message is None:
                continue

            task = asyncio.create_task(self.dispatcher.dispatch(message))
            self._handler_tasks.add(task)
            task.add_done_callback(self._handler_tasks.discard)
            scheduled += 1

        return scheduled
