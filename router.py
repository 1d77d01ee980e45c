"""Request routing between the capture side and the compute context.

The compute context is a single long-lived thread with its own event loop.
``RequestRouter`` makes sure it exists before forwarding anything that
needs the models, and relays progress notifications coming back from it.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Callable, Optional, Protocol

from config import COMPUTE_SETTLE_DELAY_S, Settings
from errors import COMPUTE_NOT_READY, UnknownMessageError, VoiceCommandError
from interfaces import SettingsSource
from messages import (
    GetSettingsMessage,
    LoadModelsMessage,
    Message,
    ModelProgressMessage,
    Response,
    TranscribeMessage,
    parse_message,
)

logger = logging.getLogger(__name__)

Notify = Callable[[Message], None]
ProgressListener = Callable[[ModelProgressMessage], None]


class ComputeEndpoint(Protocol):
    async def request(self, message: Message) -> Response: ...


class ComputeHost(Protocol):
    async def find_existing(self) -> Optional[ComputeEndpoint]: ...

    async def create(self, notify: Notify) -> ComputeEndpoint: ...


# ----------------------------------------------------------------------
# Thread-backed compute context
# ----------------------------------------------------------------------


class _ComputeWorker(threading.Thread):
    def __init__(self, service_factory: Callable[[Notify], Any], notify: Notify) -> None:
        super().__init__(name="compute-context", daemon=True)
        self._service_factory = service_factory
        self._notify = notify
        self.started_event = threading.Event()
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self.service: Any = None
        self.error: Optional[BaseException] = None

    def run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self.loop = loop
        try:
            self.service = self._service_factory(self._notify)
        except Exception as exc:
            self.error = exc
            self.started_event.set()
            loop.close()
            return
        self.started_event.set()
        try:
            loop.run_forever()
        finally:
            loop.close()

    def stop(self, timeout: float = 2.0) -> None:
        if self.loop is not None and self.loop.is_running():
            self.loop.call_soon_threadsafe(self.loop.stop)
        self.join(timeout=timeout)


class ThreadComputeEndpoint:
    def __init__(self, worker: _ComputeWorker) -> None:
        self._worker = worker

    @property
    def alive(self) -> bool:
        return self._worker.is_alive()

    async def request(self, message: Message) -> Response:
        if not self.alive or self._worker.loop is None:
            raise VoiceCommandError(COMPUTE_NOT_READY)
        future = asyncio.run_coroutine_threadsafe(
            self._worker.service.handle(message), self._worker.loop
        )
        return await asyncio.wrap_future(future)

    def close(self) -> None:
        self._worker.stop()


class ThreadComputeHost:
    """Hosts at most one compute context thread per process."""

    def __init__(self, service_factory: Callable[[Notify], Any], start_timeout_s: float = 10.0) -> None:
        self._service_factory = service_factory
        self._start_timeout_s = start_timeout_s
        self._endpoint: Optional[ThreadComputeEndpoint] = None

    async def find_existing(self) -> Optional[ThreadComputeEndpoint]:
        if self._endpoint is not None and self._endpoint.alive:
            return self._endpoint
        return None

    async def create(self, notify: Notify) -> ThreadComputeEndpoint:
        worker = _ComputeWorker(self._service_factory, notify)
        worker.start()
        started = await asyncio.get_running_loop().run_in_executor(
            None, worker.started_event.wait, self._start_timeout_s
        )
        if not started:
            raise VoiceCommandError(COMPUTE_NOT_READY, "Compute context did not start in time")
        if worker.error is not None:
            raise VoiceCommandError(COMPUTE_NOT_READY, f"Compute context failed: {worker.error}")
        self._endpoint = ThreadComputeEndpoint(worker)
        return self._endpoint

    def shutdown(self) -> None:
        if self._endpoint is not None:
            self._endpoint.close()
            self._endpoint = None


# ----------------------------------------------------------------------
# Router
# ----------------------------------------------------------------------


class RequestRouter:
    def __init__(
        self,
        host: ComputeHost,
        settings_source: Optional[SettingsSource] = None,
        settle_delay_s: float = COMPUTE_SETTLE_DELAY_S,
    ) -> None:
        self._host = host
        self._settings_source = settings_source
        self._settle_delay_s = settle_delay_s
        self._settings = Settings()
        self._ready: Optional[asyncio.Future] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._progress_listeners: list[ProgressListener] = []
        self._relay_tasks: set[asyncio.Task] = set()

    @property
    def settings(self) -> Settings:
        return self._settings

    def add_progress_listener(self, listener: ProgressListener) -> Callable[[], None]:
        self._progress_listeners.append(listener)

        def _remove() -> None:
            if listener in self._progress_listeners:
                self._progress_listeners.remove(listener)

        return _remove

    async def startup(self) -> Response:
        """Load settings, bring up the compute context and start loading models."""
        if self._settings_source is not None:
            try:
                self._settings = self._settings_source.get_settings()
            except Exception as exc:
                logger.error("Failed to load settings: %s", exc)
        response = await self.send(
            LoadModelsMessage(
                asr_model=self._settings.asr_model,
                embedding_model=self._settings.embedding_model,
            )
        )
        if response.success:
            logger.info("Models loaded on startup")
        else:
            logger.error("Startup model load failed: %s", response.error)
        return response

    def update_settings(self, settings: Settings) -> None:
        self._settings = settings

    async def send(self, message: Message) -> Response:
        try:
            return await self._dispatch(message)
        except Exception as exc:
            logger.error("Message handler error: %s", exc)
            return Response.fail(str(exc) or "Unknown error")

    async def send_raw(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Wire-level entry point: dict in, dict out."""
        try:
            message = parse_message(raw)
        except UnknownMessageError as exc:
            logger.warning("Unknown message type: %s", exc.message_type)
            return Response.fail(exc.message).to_dict()
        except (ValueError, TypeError) as exc:
            return Response.fail(str(exc)).to_dict()
        response = await self.send(message)
        return response.to_dict()

    async def _dispatch(self, message: Message) -> Response:
        if isinstance(message, TranscribeMessage):
            logger.debug("Transcription request, forwarding to compute context")
            endpoint = await self.ensure_compute_ready()
            return await endpoint.request(message)
        if isinstance(message, LoadModelsMessage):
            return await self._handle_load_models(message)
        if isinstance(message, GetSettingsMessage):
            return Response.ok(self._settings.to_dict())
        if isinstance(message, ModelProgressMessage):
            self._relay_progress(message)
            return Response.ok()
        raise UnknownMessageError(getattr(message, "type", type(message).__name__))

    async def _handle_load_models(self, message: LoadModelsMessage) -> Response:
        if message.settings is not None:
            # Popup-style status check: merge, then load what the settings name.
            self._settings = self._settings.merged(message.settings)
            asr_model = self._settings.asr_model
            embedding_model = self._settings.embedding_model
        else:
            asr_model = message.asr_model or self._settings.asr_model
            embedding_model = message.embedding_model or self._settings.embedding_model

        endpoint = await self.ensure_compute_ready()
        return await endpoint.request(
            LoadModelsMessage(
                asr_model=asr_model,
                embedding_model=embedding_model,
                min_similarity=self._settings.confidence_threshold,
            )
        )

    # ------------------------------------------------------------------
    # Compute context readiness
    # ------------------------------------------------------------------

    async def ensure_compute_ready(self) -> ComputeEndpoint:
        """Await the single shared readiness future, creating it on first use."""
        self._loop = asyncio.get_running_loop()
        if self._ready is None:
            self._ready = asyncio.ensure_future(self._setup_compute())
        ready = self._ready
        try:
            return await asyncio.shield(ready)
        except Exception:
            if self._ready is ready:
                self._ready = None
            raise

    async def _setup_compute(self) -> ComputeEndpoint:
        existing = await self._host.find_existing()
        if existing is not None:
            logger.debug("Compute context already exists")
            return existing
        logger.info("Creating compute context...")
        endpoint = await self._host.create(self._notify_from_compute)
        await asyncio.sleep(self._settle_delay_s)
        logger.info("Compute context created")
        return endpoint

    def _notify_from_compute(self, message: Message) -> None:
        """Called on the compute thread; hops onto the router loop."""
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        loop.call_soon_threadsafe(self._schedule_send, message)

    def _schedule_send(self, message: Message) -> None:
        task = asyncio.ensure_future(self.send(message))
        self._relay_tasks.add(task)
        task.add_done_callback(self._relay_tasks.discard)

    def _relay_progress(self, message: ModelProgressMessage) -> None:
        for listener in list(self._progress_listeners):
            try:
                listener(message)
            except Exception as exc:
                logger.warning("Progress listener failed: %s", exc)
