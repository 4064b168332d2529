import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from exceptions import RequestCancelledError

T = TypeVar("T")


class CancellationToken:
    """Signal used to abandon an in-flight request.

    A token can be shared by several calls; cancelling it terminates all of
    them. Cancellation cannot be undone.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def cancel_after(self, delay: float) -> asyncio.TimerHandle:
        """Schedule cancellation after a delay on the running loop.

        Args:
            delay: Seconds to wait before cancelling.

        Returns:
            Timer handle that can be used to abort the scheduled cancellation.

        """
        return asyncio.get_running_loop().call_later(delay, self.cancel)

    async def wait(self) -> None:
        await self._event.wait()

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await a coroutine unless the token fires first.

        Args:
            awaitable: The operation to run.

        Returns:
            The operation result.

        Raises:
            RequestCancelledError: If the token was cancelled before the
                operation completed.

        """
        task = asyncio.ensure_future(awaitable)
        if self.is_cancelled:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            raise RequestCancelledError()

        waiter = asyncio.ensure_future(self.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not task.done():
                task.cancel()
                await asyncio.gather(task, return_exceptions=True)

        if task.cancelled():
            raise RequestCancelledError()
        return task.result()
