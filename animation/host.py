"""
Host Module - Drawing surface, frame scheduling and theme state

Provides the in-process collaborators a ParticleField needs so it can run
inside the web server: a frame scheduler driven one refresh at a time, an
SVG-backed drawing surface and a host tying them to a viewport.
"""

from typing import Callable, Dict, List, Optional, Tuple


class ThemeState:
    """Observable dark/light flag shared between the page and renderers"""

    def __init__(self, is_dark=False):
        self._is_dark = bool(is_dark)
        self._listeners = []

    @property
    def is_dark(self):
        return self._is_dark

    def set_dark(self, value):
        value = bool(value)
        if value == self._is_dark:
            return
        self._is_dark = value
        for listener in list(self._listeners):
            listener(value)

    def toggle(self):
        self.set_dark(not self._is_dark)

    def subscribe(self, listener):
        self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    @classmethod
    def from_name(cls, theme_name):
        return cls(is_dark=(theme_name == 'dark'))


class FrameScheduler:
    """
    Cooperative stand-in for a display refresh loop

    Callbacks requested during a frame run on the following frame, which is
    what lets a callback re-request itself without looping forever.
    """

    def __init__(self):
        self._pending: Dict[int, Callable[[], None]] = {}
        self._next_id = 0
        self.frames_run = 0

    @property
    def pending_count(self):
        return len(self._pending)

    def request_frame(self, callback):
        self._next_id += 1
        self._pending[self._next_id] = callback
        return self._next_id

    def cancel_frame(self, frame_id):
        self._pending.pop(frame_id, None)

    def run_frame(self):
        """Run every callback queued before this call, return how many ran"""
        due = list(self._pending.items())
        self._pending.clear()
        for _, callback in due:
            callback()
        self.frames_run += 1
        return len(due)

    def run_frames(self, count):
        return sum(self.run_frame() for _ in range(count))


class SvgSurface:
    """Drawing surface that keeps the circles painted since the last clear"""

    def __init__(self, width=0, height=0):
        self.width = width
        self.height = height
        self.circles: List[Tuple[float, float, float, str]] = []
        self.clear_count = 0
        self.draw_count = 0

    def resize(self, width, height):
        self.width = width
        self.height = height

    def clear(self):
        self.circles = []
        self.clear_count += 1

    def fill_circle(self, x, y, radius, color):
        self.circles.append((x, y, radius, color))
        self.draw_count += 1

    def to_svg(self):
        svg = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" '
            f'viewBox="0 0 {self.width} {self.height}">'
        ]
        for x, y, radius, color in self.circles:
            svg.append(f'<circle cx="{x:.2f}" cy="{y:.2f}" r="{radius}" fill="{color}"/>')
        svg.append('</svg>')
        return '\n'.join(svg)


class HeadlessHost:
    """
    Render host with a fixed viewport

    Passing surface=None models a host whose drawing context is unavailable.
    """

    def __init__(self, width, height, surface: Optional[SvgSurface] = None,
                 scheduler: Optional[FrameScheduler] = None):
        self.width = width
        self.height = height
        self.surface = surface
        self.scheduler = scheduler or FrameScheduler()
        self.resize_listeners: List[Callable[[], None]] = []

    def viewport_size(self):
        return self.width, self.height

    def get_surface(self):
        return self.surface

    def request_frame(self, callback):
        return self.scheduler.request_frame(callback)

    def cancel_frame(self, frame_id):
        self.scheduler.cancel_frame(frame_id)

    def add_resize_listener(self, listener):
        self.resize_listeners.append(listener)

    def remove_resize_listener(self, listener):
        if listener in self.resize_listeners:
            self.resize_listeners.remove(listener)

    def resize(self, width, height):
        """Change the viewport and notify listeners, like a window resize event"""
        self.width = width
        self.height = height
        for listener in list(self.resize_listeners):
            listener()


__all__ = ['ThemeState', 'FrameScheduler', 'SvgSurface', 'HeadlessHost']
