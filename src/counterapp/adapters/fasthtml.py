"""
FastHTML Web Adapter

Binds a CounterViewModel to a FastHTML app. The page reads the count through
Datastar signals, the increment button posts to the command route, and an
optional live stream pushes every change to open pages.

```python
from fasthtml.common import fast_app, serve
from counterapp import CounterViewModel
from counterapp.adapters.fasthtml import configure_app

app, rt = fast_app()
configure_app(app, rt, CounterViewModel())
serve()
```
"""

import asyncio
import logging
from typing import AsyncGenerator, List, Optional

from starlette.requests import Request
from starlette.responses import JSONResponse
from datastar_py.fasthtml import DatastarResponse, ServerSentEventGenerator as SSE

from ..core import CounterViewModel, Subscription
from ..ui import counter_page

logger = logging.getLogger(__name__)


def is_datastar_request(request: Request) -> bool:
    """Check if the request is a Datastar request."""
    return "Datastar-Request" in request.headers


class SignalStream:
    """
    Live feed of view-model signals for one client connection.

    While open, every change notification enqueues a snapshot of the
    view-model signals. A full queue drops the newest snapshot; the next
    change carries the current value anyway.
    """

    def __init__(self, view_model: CounterViewModel, max_pending: int = 100):
        self.view_model = view_model
        self.queue: asyncio.Queue = asyncio.Queue(maxsize=max_pending)
        self.subscription: Optional[Subscription] = None

    @property
    def is_open(self) -> bool:
        return self.subscription is not None

    def open(self) -> 'SignalStream':
        if not self.is_open:
            self.subscription = self.view_model.subscribe(self._on_change)
        return self

    def close(self) -> None:
        if self.is_open:
            self.view_model.unsubscribe(self.subscription)
            self.subscription = None

    def _on_change(self, property_name: str) -> None:
        try:
            self.queue.put_nowait(self.view_model.signals)
        except asyncio.QueueFull:
            logger.warning(f"Live queue full, dropping '{property_name}' update")

    async def events(self, heartbeat: float = 15) -> AsyncGenerator[str, None]:
        """
        Yield Datastar merge-signals events until the stream is closed.

        The current signals are sent first. When nothing changes for
        `heartbeat` seconds the current signals are sent again.
        """
        self.open()
        try:
            yield SSE.merge_signals(self.view_model.signals)
            while self.is_open:
                try:
                    signals = await asyncio.wait_for(self.queue.get(), timeout=heartbeat)
                except asyncio.TimeoutError:
                    signals = self.view_model.signals
                yield SSE.merge_signals(signals)
        finally:
            self.close()


def configure_app(app, rt, view_model: CounterViewModel, prefix: str = "/counter",
                  live_queue_size: int = 100, heartbeat: float = 15):
    """
    Register the counter page, state, command and live routes.

    Args:
        app: FastHTML app instance
        rt: FastHTML router instance
        view_model: View-model shared by every client
        prefix: Path prefix for the counter routes
        live_queue_size: Pending updates kept per live connection
        heartbeat: Seconds between repeated signals on an idle live stream

    Returns:
        The configured app instance
    """
    command = view_model.increment_command

    async def counter_index(request: Request):
        return counter_page(view_model, prefix)

    async def counter_state(request: Request):
        if is_datastar_request(request):
            return DatastarResponse(SSE.merge_signals(view_model.signals))
        return JSONResponse({"count": view_model.count})

    async def counter_increment(request: Request):
        datastar = is_datastar_request(request)

        if not command.can_execute():
            logger.info("Increment requested while the command is disabled")
            if datastar:
                return DatastarResponse()
            return JSONResponse({"success": False, "count": view_model.count,
                                 "error": "command is disabled"}, status_code=409)

        changed: List[str] = []
        subscription = view_model.subscribe(changed.append)
        try:
            command.execute()
        finally:
            view_model.unsubscribe(subscription)

        logger.debug(f"Increment executed, count={view_model.count}, changed={changed}")
        if datastar:
            return DatastarResponse([SSE.merge_signals(view_model.signals) for _ in changed])
        return JSONResponse({"success": True, "count": view_model.count, "changed": changed})

    async def counter_live(request: Request):
        stream = SignalStream(view_model, max_pending=live_queue_size)
        return DatastarResponse(stream.events(heartbeat=heartbeat))

    rt("/", methods=["get"])(counter_index)
    rt(prefix, methods=["get"])(counter_state)
    rt(f"{prefix}/increment", methods=["post"])(counter_increment)
    rt(f"{prefix}/live", methods=["get"])(counter_live)

    logger.info(f"📡 Counter routes registered under {prefix}")
    return app
