"""
Snapshot Module - Render the dots background to an SVG document
"""

import random

from .field import ParticleField
from .host import HeadlessHost, SvgSurface, ThemeState
from .particles import SPACING


def render_background_svg(width, height, dark=False, frames=1, seed=None,
                          spacing=SPACING, regenerate_on_resize=False):
    """
    Mount a field on a headless host, run it for a number of frames and
    return the last painted frame as SVG

    Args:
        width (int): Viewport width in pixels
        height (int): Viewport height in pixels
        dark (bool): Paint with the dark theme color
        frames (int): Frames to render, the mount frame included
        seed (int, optional): Seed for particle phases, random when None

    Returns:
        str: SVG markup
    """
    surface = SvgSurface()
    host = HeadlessHost(width, height, surface=surface)
    field = ParticleField(host, ThemeState(is_dark=dark), spacing=spacing,
                          rng=random.Random(seed),
                          regenerate_on_resize=regenerate_on_resize)

    with field:
        host.scheduler.run_frames(max(frames, 1) - 1)

    return surface.to_svg()


__all__ = ['render_background_svg']
