"""Overlay toast for voice command status."""

from __future__ import annotations

from config import ERROR_TOAST_MS, SUCCESS_TOAST_MS
from models import StatusKind

try:
    from PySide6.QtCore import Qt, QTimer
    from PySide6.QtWidgets import QApplication, QLabel, QWidget, QVBoxLayout
except Exception:  # pragma: no cover
    Qt = None  # type: ignore
    QTimer = None  # type: ignore
    QApplication = None  # type: ignore
    QLabel = object  # type: ignore
    QWidget = object  # type: ignore
    QVBoxLayout = object  # type: ignore

_BASE_STYLE = "font-size: 18px; padding: 16px; border-radius: 12px;"

STATUS_STYLES = {
    StatusKind.RECORDING: "color: white; background: rgba(200,40,40,200);",
    StatusKind.TRANSCRIBING: "color: white; background: rgba(0,0,0,190);",
    StatusKind.PROCESSING: "color: white; background: rgba(40,60,160,200);",
    StatusKind.COMPLETE: "color: #B9F6CA; background: rgba(0,0,0,200);",
    StatusKind.ERROR: "color: #FF6B6B; background: rgba(0,0,0,210);",
}

STATUS_ICONS = {
    StatusKind.RECORDING: "🎙️",
    StatusKind.TRANSCRIBING: "✍️",
    StatusKind.PROCESSING: "⚙️",
    StatusKind.COMPLETE: "✅",
    StatusKind.ERROR: "⚠️",
}

# Terminal states clear themselves; the in-progress ones stay until replaced.
AUTO_HIDE_MS = {
    StatusKind.COMPLETE: SUCCESS_TOAST_MS,
    StatusKind.ERROR: ERROR_TOAST_MS,
}


class OverlayWindow(QWidget):
    def __init__(self) -> None:
        if Qt is None:
            raise RuntimeError("PySide6 is not installed")
        super().__init__()
        self.setWindowFlags(
            Qt.WindowStaysOnTopHint
            | Qt.FramelessWindowHint
            | Qt.Tool
            | Qt.WindowDoesNotAcceptFocus
        )
        self.setAttribute(Qt.WA_TranslucentBackground, True)
        self.setAttribute(Qt.WA_ShowWithoutActivating, True)
        self.setFixedWidth(520)

        self._label = QLabel("")
        self._label.setWordWrap(True)

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._label)
        self.setLayout(layout)

        self._hide_timer: QTimer | None = None

    def _position(self) -> None:
        """Bottom center of the primary screen."""
        if QApplication is None:
            return
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geom = screen.availableGeometry()
        self.adjustSize()
        x = geom.x() + (geom.width() - self.width()) // 2
        y = geom.y() + geom.height() - self.height() - 60
        self.move(x, y)

    def show_status(self, kind: StatusKind, text: str) -> None:
        """Show a status toast; terminal kinds hide after their display time."""
        self._cancel_hide_timer()
        self._label.setStyleSheet(_BASE_STYLE + STATUS_STYLES[kind])
        self._label.setText(f"{STATUS_ICONS[kind]} {text}")
        self._position()
        self.show()
        delay = AUTO_HIDE_MS.get(kind)
        if delay is not None:
            self.hide_with_delay(delay)

    def hide_with_delay(self, delay_ms: int) -> None:
        self._cancel_hide_timer()
        if QTimer is not None:
            self._hide_timer = QTimer()
            self._hide_timer.setSingleShot(True)
            self._hide_timer.timeout.connect(self.hide)
            self._hide_timer.start(delay_ms)

    def _cancel_hide_timer(self) -> None:
        if self._hide_timer is not None:
            self._hide_timer.stop()
            self._hide_timer = None
