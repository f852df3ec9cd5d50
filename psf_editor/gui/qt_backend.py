"""
Qt Backend - PyQt6 window that shows the editor framebuffer.
"""

import logging
import sys
import time
from typing import List, Optional

from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import (
    QPixmap, QImage, QPainter, QMouseEvent, QKeyEvent, QWheelEvent,
    QPaintEvent, QCloseEvent
)

from ..editor.events import (
    CloseRequested, Event, Key, KeyButton, KeyPress, KeyRelease, MouseButton,
    MouseMotion, MousePress, MouseRelease, MouseWheel
)
from .backend import RenderingBackend

logger = logging.getLogger('PSFE')

_BUTTONS = {
    Qt.MouseButton.LeftButton: MouseButton.LEFT,
    Qt.MouseButton.MiddleButton: MouseButton.MIDDLE,
    Qt.MouseButton.RightButton: MouseButton.RIGHT,
    Qt.MouseButton.BackButton: MouseButton.X1,
    Qt.MouseButton.ForwardButton: MouseButton.X2,
}

# One notch of a standard mouse wheel
WHEEL_STEP = 120


def rgba_to_qpixmap(pixels: bytes, width: int) -> QPixmap:
    """Convert a raw RGBA8888 buffer to QPixmap."""
    height = len(pixels) // (width * 4)
    qimg = QImage(bytes(pixels), width, height, width * 4, QImage.Format.Format_RGBA8888)
    return QPixmap.fromImage(qimg.copy())


def qt_key_to_key(qt_key) -> Optional[KeyButton]:
    """Map a Qt key to an editor key. Only Escape and letters are kept."""
    code = int(getattr(qt_key, "value", qt_key))
    if code == Qt.Key.Key_Escape.value:
        return Key.ESCAPE
    if Qt.Key.Key_A.value <= code <= Qt.Key.Key_Z.value:
        return chr(ord("a") + code - Qt.Key.Key_A.value)
    return None


def translate_key_event(qt_key, pressed: bool, auto_repeat: bool) -> Optional[Event]:
    """
    Turn a Qt key event into an editor event.

    Held keys repeat their press, so holding a command key keeps applying it.
    Qt also sends a release before each repeated press; those are dropped.
    """
    key = qt_key_to_key(qt_key)
    if key is None:
        return None
    if pressed:
        return KeyPress(key)
    if auto_repeat:
        return None
    return KeyRelease(key)


def qt_button_to_button(qt_button) -> Optional[MouseButton]:
    return _BUTTONS.get(qt_button)


class FramebufferView(QWidget):
    """Widget that paints the last presented frame and queues input events."""

    def __init__(self, width: int, height: int, parent=None):
        super().__init__(parent)
        self.pixmap: Optional[QPixmap] = None
        self.events: List[Event] = []
        self._size = QSize(width, height)

        self.setMouseTracking(True)
        self.setFixedSize(self._size)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    def sizeHint(self) -> QSize:
        return self._size

    def set_frame(self, pixmap: QPixmap):
        self.pixmap = pixmap
        self.update()

    def mouseMoveEvent(self, event: QMouseEvent):
        pos = event.position()
        self.events.append(MouseMotion(int(pos.x()), int(pos.y())))

    def mousePressEvent(self, event: QMouseEvent):
        button = qt_button_to_button(event.button())
        if button is not None:
            pos = event.position()
            self.events.append(MousePress(button, int(pos.x()), int(pos.y())))

    def mouseReleaseEvent(self, event: QMouseEvent):
        pos = event.position()
        self.events.append(MouseRelease(int(pos.x()), int(pos.y())))

    def wheelEvent(self, event: QWheelEvent):
        self.events.append(MouseWheel(event.angleDelta().y() // WHEEL_STEP))

    def keyPressEvent(self, event: QKeyEvent):
        self._queue(translate_key_event(event.key(), True, event.isAutoRepeat()))

    def keyReleaseEvent(self, event: QKeyEvent):
        self._queue(translate_key_event(event.key(), False, event.isAutoRepeat()))

    def _queue(self, event: Optional[Event]):
        if event is not None:
            self.events.append(event)

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        if self.pixmap:
            painter.drawPixmap(0, 0, self.pixmap)
        else:
            painter.fillRect(self.rect(), Qt.GlobalColor.black)


class EditorWindow(QMainWindow):
    """Top-level window hosting the framebuffer view."""

    def __init__(self, width: int, height: int, title: str):
        super().__init__()
        self.view = FramebufferView(width, height)
        self.setCentralWidget(self.view)
        self.setWindowTitle(title)

    def closeEvent(self, event: QCloseEvent):
        self.view.events.append(CloseRequested())
        event.ignore()


class QtBackend(RenderingBackend):
    """RenderingBackend on top of a PyQt6 window."""

    def __init__(self):
        self.app: Optional[QApplication] = None
        self.window: Optional[EditorWindow] = None

    def initialize(self, width: int, height: int, title: str) -> None:
        self.app = QApplication.instance() or QApplication(sys.argv)
        self.app.setStyle("Fusion")
        self.window = EditorWindow(width, height, title)
        self.window.show()
        self.window.view.setFocus()
        logger.info(f"Opened {width}x{height} window")

    def present(self, pixels: bytes, width: int) -> None:
        self.window.view.set_frame(rgba_to_qpixmap(pixels, width))

    def poll_input(self) -> List[Event]:
        self.app.processEvents()
        events = self.window.view.events
        self.window.view.events = []
        return events

    def now(self) -> float:
        return time.monotonic()

    def set_title(self, text: str) -> None:
        self.window.setWindowTitle(text)

    def shutdown(self) -> None:
        if self.window is not None:
            self.window.hide()
            self.window.deleteLater()
            self.window = None
        if self.app is not None:
            self.app.processEvents()
