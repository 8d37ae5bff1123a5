"""
Field Module - The animated dots background

A ParticleField owns its particles and time accumulator. It is driven by the
host's frame scheduler: every frame advances time by a fixed step, repaints
the whole grid and asks for the next frame until it is unmounted.
"""

import random

from .particles import SPACING, TIME_STEP, fill_color, generate_grid


class ParticleField:

    def __init__(self, host, theme, spacing=SPACING, rng=None, regenerate_on_resize=False):
        self.host = host
        self.theme = theme
        self.spacing = spacing
        self.rng = rng or random.Random()
        # Off by default: a resize only resizes the surface and the grid
        # keeps the coordinates it was built with.
        self.regenerate_on_resize = regenerate_on_resize

        self.surface = None
        self.particles = []
        self.time = 0.0
        self.mounted = False
        self._frame_id = None
        self._listening = False

    def mount(self):
        """Size the surface, build the grid and start the frame loop"""
        if self.mounted:
            return
        surface = self.host.get_surface()
        if surface is None:
            return

        self.surface = surface
        self._resize_surface()
        self.host.add_resize_listener(self._on_resize)
        self._listening = True

        self.particles = generate_grid(surface.width, surface.height, self.spacing, self.rng)
        self.time = 0.0
        self.mounted = True
        self.step()

    def step(self):
        """Advance one frame, repaint and request the next one"""
        if not self.mounted:
            return
        self._frame_id = None

        self.time += TIME_STEP
        self.surface.clear()
        color = fill_color(self.theme.is_dark)

        for particle in self.particles:
            x, y = particle.move(self.time)
            self.surface.fill_circle(x, y, particle.radius, color)

        self._frame_id = self.host.request_frame(self.step)

    def unmount(self):
        """Cancel the pending frame and release the resize listener"""
        if self._frame_id is not None:
            self.host.cancel_frame(self._frame_id)
            self._frame_id = None
        if self._listening:
            self.host.remove_resize_listener(self._on_resize)
            self._listening = False
        self.mounted = False
        self.particles = []

    def _resize_surface(self):
        width, height = self.host.viewport_size()
        self.surface.resize(width, height)

    def _on_resize(self):
        self._resize_surface()
        if self.regenerate_on_resize:
            self.particles = generate_grid(self.surface.width, self.surface.height, self.spacing, self.rng)

    def __enter__(self):
        self.mount()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.unmount()
        return False


__all__ = ['ParticleField']
