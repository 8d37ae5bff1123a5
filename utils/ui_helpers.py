"""
UI Helper Functions - Navigation, theme, page transition and carousel state
"""

from flask import request, session, current_app
from typing import Dict, List, Optional


NAV_SECTIONS = [
    ('skills', 'Skills'),
    ('experience', 'Experience'),
    ('projects', 'Projects'),
    ('contact', 'Contact'),
]

THEMES = ('dark', 'light')

# Endpoints that render a full page; only these consume the first-visit overlay
PAGE_ENDPOINTS = {'pages.index', 'portfolio.project_detail'}


def get_nav_links(on_home: bool) -> List[Dict[str, str]]:
    """
    Navigation entries for the navbar

    Args:
        on_home: True when the home page is being rendered, so links can
                 stay in-page anchors instead of navigating back to '/'

    Returns:
        list: [{'id', 'label', 'href'}, ...]
    """
    prefix = '' if on_home else '/'
    return [
        {'id': section_id, 'label': label, 'href': f'{prefix}#{section_id}'}
        for section_id, label in NAV_SECTIONS
    ]


def get_current_theme() -> str:
    """Session theme, else the browser's color-scheme hint, else the configured default"""
    theme = session.get('theme')
    if theme in THEMES:
        return theme
    hint = request.headers.get('Sec-CH-Prefers-Color-Scheme', '').strip('"').lower()
    if hint in THEMES:
        return hint
    default = current_app.config.get('DEFAULT_THEME', 'dark')
    return default if default in THEMES else 'dark'


def toggle_theme() -> str:
    theme = 'light' if get_current_theme() == 'dark' else 'dark'
    session['theme'] = theme
    return theme


def consume_page_transition() -> bool:
    """
    True on the first full page view of a session

    The flag is set the first time it is read so later views skip the overlay.
    """
    if request.endpoint not in PAGE_ENDPOINTS:
        return False
    if session.get('has_loaded_before'):
        return False
    session['has_loaded_before'] = True
    return True


class Carousel:
    """Looping slide position over a list of images"""

    def __init__(self, images: List[str], index: Optional[int] = 0):
        self.images = list(images)
        self.index = self._wrap(index or 0)

    def _wrap(self, index):
        if not self.images:
            return 0
        return index % len(self.images)

    @property
    def current(self):
        return self.images[self.index] if self.images else None

    @property
    def has_controls(self):
        return len(self.images) > 1

    @property
    def prev_index(self):
        return self._wrap(self.index - 1)

    @property
    def next_index(self):
        return self._wrap(self.index + 1)

    def __len__(self):
        return len(self.images)


__all__ = [
    'NAV_SECTIONS',
    'THEMES',
    'PAGE_ENDPOINTS',
    'get_nav_links',
    'get_current_theme',
    'toggle_theme',
    'consume_page_transition',
    'Carousel'
]
