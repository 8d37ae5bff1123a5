"""
Utils Package - Centralized utility modules initialization
"""

from .data import (
    load_skills,
    load_experience,
    load_featured_projects,
    load_project,
    load_project_slugs
)
from .helpers import (
    format_month_year,
    skill_icon_key,
    group_skills,
    experience_bullets,
    experience_period,
    format_status,
    project_images,
    project_meta,
    render_markdown
)
from .ui_helpers import (
    get_nav_links,
    get_current_theme,
    toggle_theme,
    consume_page_transition,
    Carousel
)

__all__ = [
    # Data
    'load_skills',
    'load_experience',
    'load_featured_projects',
    'load_project',
    'load_project_slugs',

    # Helpers
    'format_month_year',
    'skill_icon_key',
    'group_skills',
    'experience_bullets',
    'experience_period',
    'format_status',
    'project_images',
    'project_meta',
    'render_markdown',

    # UI Helpers
    'get_nav_links',
    'get_current_theme',
    'toggle_theme',
    'consume_page_transition',
    'Carousel'
]
