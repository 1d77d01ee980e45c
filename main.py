"""Application entrypoint."""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from concurrent.futures import Future
from dataclasses import replace

from compute_service import ComputeService
from config import JsonConfigStore, Settings, is_debug
from errors import ERROR_MESSAGES, MODEL_LOAD_FAILED
from hotkey import GlobalHotkeyAdapter
from keyboard_dispatch import KeyboardDispatcher, PynputKeyTarget
from logging_setup import setup_logging
from messages import LoadModelsMessage, ModelProgressMessage, Response
from model_loader import HuggingFaceModelLoader
from model_manager import ModelLifecycleManager
from models import SessionState, StatusKind
from overlay import OverlayWindow
from recorder import SoundDeviceRecorder
from router import RequestRouter, ThreadComputeHost
from session_controller import SessionController

try:
    from PySide6.QtCore import QObject, Signal, QSize
    from PySide6.QtGui import QAction, QIcon, QPixmap, QPainter, QColor, QBrush
    from PySide6.QtWidgets import QApplication, QInputDialog, QMenu, QMessageBox, QSystemTrayIcon
except Exception as exc:  # pragma: no cover
    raise SystemExit(f"PySide6 is required to run the desktop app: {exc}")

logger = logging.getLogger(__name__)


def _create_icon(color: str = "#888888", size: int = 22) -> QIcon:
    """Generate a simple circular tray icon with the given color."""
    pixmap = QPixmap(QSize(size, size))
    pixmap.fill(QColor(0, 0, 0, 0))  # transparent background
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing, True)
    painter.setBrush(QBrush(QColor(color)))
    painter.setPen(QColor(color))
    painter.drawEllipse(2, 2, size - 4, size - 4)
    painter.end()
    return QIcon(pixmap)


ICON_IDLE = "#888888"      # grey
ICON_LOADING = "#3399FF"   # blue
ICON_RECORDING = "#FF4444"  # red
ICON_ERROR = "#FF8800"     # orange


class UIBridge(QObject):
    status_signal = Signal(str, str)  # kind, text
    state_signal = Signal(str, str)  # from_state, to_state
    progress_signal = Signal(str, int, str)  # model type, percent, status
    startup_signal = Signal(bool, str)


class CaptureLoop(threading.Thread):
    """Event loop for the capture side; also runs the request router."""

    def __init__(self) -> None:
        super().__init__(name="capture-context", daemon=True)
        self.loop = asyncio.new_event_loop()

    def run(self) -> None:
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()

    def submit(self, coro) -> Future:
        return asyncio.run_coroutine_threadsafe(coro, self.loop)

    def call(self, fn, *args) -> None:
        self.loop.call_soon_threadsafe(fn, *args)

    def stop(self) -> None:
        self.loop.call_soon_threadsafe(self.loop.stop)
        self.join(timeout=2.0)


def _make_compute_service(notify) -> ComputeService:
    return ComputeService(ModelLifecycleManager(HuggingFaceModelLoader()), notify=notify)


class App:
    def __init__(self) -> None:
        self.app = QApplication(sys.argv)
        self.app.setQuitOnLastWindowClosed(False)
        self.config_store = JsonConfigStore()
        settings = self.config_store.get_settings()

        self.overlay = OverlayWindow()
        self.ui = UIBridge()
        self.ui.status_signal.connect(self._on_status_ui)
        self.ui.state_signal.connect(self._on_state_change_ui)
        self.ui.progress_signal.connect(self._on_progress_ui)
        self.ui.startup_signal.connect(self._on_startup_ui)
        self._progress = {"asr": (0, "Checking..."), "embedding": (0, "Checking...")}

        self.capture = CaptureLoop()
        self.compute_host = ThreadComputeHost(_make_compute_service)
        self.router = RequestRouter(self.compute_host, settings_source=self.config_store)
        self.router.add_progress_listener(self._on_progress)
        self.controller = SessionController(
            recorder=SoundDeviceRecorder(),
            send=self.router.send,
            dispatcher=KeyboardDispatcher(default_target=PynputKeyTarget()),
            hotkeys=GlobalHotkeyAdapter(),
            settings=settings,
            on_state_change=self._on_state_change,
            on_status=self._on_status,
        )
        self._unsubscribe = self.config_store.subscribe(self._on_settings_saved)

        self.tray = QSystemTrayIcon()
        self.tray.setIcon(_create_icon(ICON_LOADING))
        self.tray.setToolTip("Voice Commands — Loading models...")
        self._setup_menu()
        self.tray.show()

    def _setup_menu(self) -> None:
        menu = QMenu()

        hotkey_action = QAction("Set Activation Key", menu)
        hotkey_action.triggered.connect(self._set_activation_key)
        menu.addAction(hotkey_action)

        threshold_action = QAction("Set Confidence Threshold", menu)
        threshold_action.triggered.connect(self._set_threshold)
        menu.addAction(threshold_action)

        status_action = QAction("Model Status", menu)
        status_action.triggered.connect(self._show_model_status)
        menu.addAction(status_action)

        menu.addSeparator()
        quit_action = QAction("Quit", menu)
        quit_action.triggered.connect(self.quit)
        menu.addAction(quit_action)

        self.tray.setContextMenu(menu)

    def _set_activation_key(self) -> None:
        value, ok = QInputDialog.getText(
            None,
            "Activation Key",
            "Single character (e.g. r) or pynput key name (e.g. Key.alt_l)",
            text=self.config_store.get_activation_key(),
        )
        if not ok or not value.strip():
            return
        self.config_store.set_activation_key(value.strip())

    def _set_threshold(self) -> None:
        current = self.config_store.get_settings()
        value, ok = QInputDialog.getDouble(
            None,
            "Confidence Threshold",
            "Minimum similarity (0-1)",
            current.confidence_threshold,
            0.0,
            1.0,
            2,
        )
        if not ok:
            return
        self.config_store.save_settings(replace(current, confidence_threshold=value))

    def _show_model_status(self) -> None:
        lines = [f"{kind}: {pct}% — {status}" for kind, (pct, status) in self._progress.items()]
        QMessageBox.information(None, "Model Status", "\n".join(lines))

    # ------------------------------------------------------------------
    # Callbacks (called from worker threads → emit signals for UI thread)
    # ------------------------------------------------------------------

    def _on_state_change(self, from_state: SessionState, to_state: SessionState) -> None:
        self.ui.state_signal.emit(from_state.value, to_state.value)

    def _on_status(self, kind: StatusKind, text: str) -> None:
        self.ui.status_signal.emit(kind.value, text)

    def _on_progress(self, message: ModelProgressMessage) -> None:
        self.ui.progress_signal.emit(message.model_type.value, message.progress, message.status)

    def _on_settings_saved(self, old: Settings, new: Settings) -> None:
        self.capture.call(self._apply_settings, old, new)

    def _apply_settings(self, old: Settings, new: Settings) -> None:
        # capture loop
        self.router.update_settings(new)
        self.controller.apply_settings(new)
        if (old.asr_model, old.embedding_model, old.confidence_threshold) != (
            new.asr_model,
            new.embedding_model,
            new.confidence_threshold,
        ):
            self.capture.submit(self.router.send(LoadModelsMessage(settings=new.to_dict())))

    def _on_startup_done(self, future: Future) -> None:
        try:
            response: Response = future.result()
        except Exception as exc:
            response = Response.fail(str(exc))
        self.ui.startup_signal.emit(response.success, response.error or "")

    # ------------------------------------------------------------------
    # UI thread handlers (safe for Qt)
    # ------------------------------------------------------------------

    def _on_status_ui(self, kind: str, text: str) -> None:
        self.overlay.show_status(StatusKind(kind), text)

    def _on_state_change_ui(self, from_state: str, to_state: str) -> None:
        if to_state == SessionState.RECORDING.value:
            self.tray.setIcon(_create_icon(ICON_RECORDING))
            self.tray.setToolTip("Voice Commands — Recording...")
        elif to_state == SessionState.PROCESSING.value:
            self.tray.setToolTip("Voice Commands — Processing...")
        elif to_state == SessionState.IDLE.value:
            self.tray.setIcon(_create_icon(ICON_IDLE))
            self.tray.setToolTip("Voice Commands — Ready")

    def _on_progress_ui(self, kind: str, percent: int, status: str) -> None:
        self._progress[kind] = (percent, status)
        summary = ", ".join(f"{k} {p}%" for k, (p, _s) in self._progress.items())
        self.tray.setToolTip(f"Voice Commands — {summary}")
        if status.startswith("Error"):
            self.tray.setIcon(_create_icon(ICON_ERROR))

    def _on_startup_ui(self, success: bool, error: str) -> None:
        if success:
            self.tray.setIcon(_create_icon(ICON_IDLE))
            self.tray.setToolTip("Voice Commands — Ready")
            key = self.controller.settings.activation_key
            self.tray.showMessage(
                "Voice Commands Ready",
                f"Hold {key} in Linear and speak a command.",
            )
        else:
            self.tray.setIcon(_create_icon(ICON_ERROR))
            self.tray.showMessage(
                "Voice Commands Error",
                error or ERROR_MESSAGES[MODEL_LOAD_FAILED],
                QSystemTrayIcon.Warning,
            )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def run(self) -> int:
        self.capture.start()
        try:
            self.controller.activate(self.capture.loop)
        except Exception as exc:
            logger.error("Hotkey registration failed: %s", exc)
            self.overlay.show_status(StatusKind.ERROR, f"Hotkey disabled: {exc}")
        self.capture.submit(self.router.startup()).add_done_callback(self._on_startup_done)
        return self.app.exec()

    def quit(self) -> None:
        self._unsubscribe()
        self.controller.shutdown()
        self.capture.stop()
        self.compute_host.shutdown()
        self.app.quit()


def main() -> int:
    setup_logging(debug=is_debug())
    app = App()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
