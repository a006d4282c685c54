"""Pointer input handler for a Tkinter canvas.

Translates left-button press, drag and release into PointerEvent records and
hands them to a callback, so the drawing session never touches Tk events.

Usage example (from an object that has a `canvas` and a compositor):

    handler = PointerHandler(
        widget=self.canvas,
        on_event=self._on_pointer,
    )

Bindings are made in the constructor. Call `handler.detach()` to stop
forwarding, e.g. before the canvas is destroyed.
"""
from typing import Callable
import logging

from .types import DRAG, PRESS, RELEASE, PointerEvent

logger = logging.getLogger(__name__)


class PointerHandler:
    def __init__(self, widget, on_event: Callable[[PointerEvent], None], button: int = 1):
        """Create and attach a pointer handler to a Tk widget (usually Canvas).

        widget: a Tkinter widget supporting bind/unbind.
        on_event: called with a PointerEvent for every press, drag and release.
        button: mouse button number to listen to.
        """
        self.widget = widget
        self.on_event = on_event
        self.button = button
        self._sequences = {
            f'<Button-{button}>': PRESS,
            f'<B{button}-Motion>': DRAG,
            f'<ButtonRelease-{button}>': RELEASE,
        }
        self._pressed = False
        for seq, kind in self._sequences.items():
            self.widget.bind(seq, self._make_callback(kind))
        logger.debug(f'PointerHandler attached for button {button}')

    def detach(self):
        """Remove event bindings created by this handler."""
        for seq in self._sequences:
            self.widget.unbind(seq)
        self._pressed = False

    def _make_callback(self, kind):
        def _callback(event):
            self._dispatch(kind, event)
        return _callback

    def _dispatch(self, kind, event):
        if kind == PRESS:
            self._pressed = True
        elif not self._pressed:
            # drag or release without a press seen by this handler
            return
        elif kind == RELEASE:
            self._pressed = False
        self.on_event(PointerEvent(kind, int(event.x), int(event.y)))
