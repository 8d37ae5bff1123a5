"""
Animation Package - Dots background renderer and its headless host
"""

from .particles import (
    SPACING,
    RADIUS,
    AMPLITUDE,
    TIME_STEP,
    DARK_FILL,
    LIGHT_FILL,
    Particle,
    wave_displacement,
    grid_dimensions,
    generate_grid,
    fill_color
)
from .host import ThemeState, FrameScheduler, SvgSurface, HeadlessHost
from .field import ParticleField
from .snapshot import render_background_svg

__all__ = [
    'SPACING',
    'RADIUS',
    'AMPLITUDE',
    'TIME_STEP',
    'DARK_FILL',
    'LIGHT_FILL',
    'Particle',
    'wave_displacement',
    'grid_dimensions',
    'generate_grid',
    'fill_color',
    'ThemeState',
    'FrameScheduler',
    'SvgSurface',
    'HeadlessHost',
    'ParticleField',
    'render_background_svg'
]
