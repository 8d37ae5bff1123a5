"""
Particles Module - Grid generation and wave motion for the dots background
"""

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


SPACING = 80
RADIUS = 1.5
AMPLITUDE = 8
TIME_STEP = 0.005
WAVE_FREQUENCY = 0.005

DARK_FILL = 'rgba(255, 255, 255, 0.25)'
LIGHT_FILL = 'rgba(100, 100, 100, 0.25)'


@dataclass
class Particle:
    """One dot anchored to a grid cell"""
    base_x: float
    base_y: float
    radius: float = RADIUS
    phase_offset: float = 0.0
    x: float = field(init=False)
    y: float = field(init=False)

    def __post_init__(self):
        self.x = self.base_x
        self.y = self.base_y

    @property
    def base_position(self) -> Tuple[float, float]:
        return (self.base_x, self.base_y)

    @property
    def current_position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def move(self, t: float) -> Tuple[float, float]:
        """Place the particle at its wave position for time t"""
        dx, dy = wave_displacement(t, self.phase_offset, self.base_x, self.base_y)
        self.x = self.base_x + dx
        self.y = self.base_y + dy
        return self.x, self.y


def wave_displacement(t, phase, base_x, base_y):
    """
    Offset of a particle from its base position at time t

    x follows the row (base_y) and y follows the column (base_x), so
    neighbouring dots drift slightly out of step.
    """
    return (
        AMPLITUDE * math.sin(t + phase + base_y * WAVE_FREQUENCY),
        AMPLITUDE * math.cos(t + phase + base_x * WAVE_FREQUENCY),
    )


def grid_dimensions(width, height, spacing=SPACING):
    """Return (cols, rows) needed to cover a width x height surface"""
    if width <= 0 or height <= 0:
        return 0, 0
    return math.ceil(width / spacing), math.ceil(height / spacing)


def generate_grid(width, height, spacing=SPACING, rng: Optional[random.Random] = None) -> List[Particle]:
    """
    Build one particle per grid cell, centered in the cell

    Args:
        width (int): Surface width in pixels
        height (int): Surface height in pixels
        spacing (int): Cell size in pixels
        rng (random.Random, optional): Source for phase offsets

    Returns:
        list: Particles, column by column
    """
    rng = rng or random.Random()
    cols, rows = grid_dimensions(width, height, spacing)
    particles = []
    for i in range(cols):
        for j in range(rows):
            particles.append(Particle(
                base_x=i * spacing + spacing / 2,
                base_y=j * spacing + spacing / 2,
                radius=RADIUS,
                phase_offset=rng.random() * math.pi * 2,
            ))
    return particles


def fill_color(is_dark):
    """Dot color for the active theme"""
    return DARK_FILL if is_dark else LIGHT_FILL


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
    'fill_color'
]
