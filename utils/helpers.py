"""
Helpers Module - View composition for skills, experience and projects
"""

import re
from datetime import date, datetime
import mistune
from markupsafe import Markup, escape


DATE_FORMATS = [
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d',
    '%Y-%m-%dT%H:%M:%S.%f',
    '%Y-%m-%dT%H:%M:%S'
]


def parse_date(value):
    """Parse a date, datetime or date string into a date, None if it can't be read"""
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(str(value), fmt).date()
        except ValueError:
            continue
    return None


def format_month_year(value, long_month=False):
    """Format as 'Jan 2024', or 'January 2024' with long_month"""
    parsed = parse_date(value)
    if not parsed:
        return ''
    return parsed.strftime('%B %Y' if long_month else '%b %Y')


# ─── Skills ─────────────────────────────────────────────────────────────────────

def skill_icon_key(name):
    """
    Normalize a skill name into an icon slug

    Example:
        >>> skill_icon_key('Node.js')
        'nodedotjs'
        >>> skill_icon_key('C++')
        'cplusplus'
    """
    normalized = (name or '').lower()
    normalized = re.sub(r'\s+', '', normalized)
    normalized = normalized.replace('.', 'dot')
    normalized = normalized.replace('-', '')
    normalized = normalized.replace('++', 'plusplus')
    normalized = normalized.replace('+', 'plus')
    normalized = normalized.replace('#', 'sharp')
    return normalized


def skill_initials(name):
    return (name or '')[:2].upper()


def skill_visual(skill, icon_cdn=None):
    """
    Decide how a skill tile is drawn

    An explicit svg URL wins, then the icon CDN, then the two-letter initials.
    SVG files get a monochrome filter so they follow the theme.
    """
    svg = skill.get('svg')
    if svg:
        return {'kind': 'image', 'src': svg, 'monochrome': svg.endswith('.svg')}
    key = skill_icon_key(skill.get('name'))
    if icon_cdn and key:
        return {'kind': 'image', 'src': f"{icon_cdn.rstrip('/')}/{key}", 'monochrome': True}
    return {'kind': 'initials', 'text': skill_initials(skill.get('name'))}


def group_skills(skills, icon_cdn=None):
    """
    Split skills into icon categories and text-only categories

    Categories keep the order in which they first appear. A category is
    text-only when every skill in it is 'text-only'.

    Returns:
        tuple: (icon_categories, text_only_categories), each a list of
               {'name': category, 'skills': [...]}
    """
    categories = []
    for skill in skills:
        if skill.get('category') not in categories:
            categories.append(skill.get('category'))

    icon_categories = []
    text_only_categories = []
    for category in categories:
        members = [dict(s, visual=skill_visual(s, icon_cdn)) for s in skills if s.get('category') == category]
        entry = {'name': category, 'skills': members}
        if any(s.get('type') != 'text-only' for s in members):
            icon_categories.append(entry)
        else:
            text_only_categories.append(entry)
    return icon_categories, text_only_categories


# ─── Experience ─────────────────────────────────────────────────────────────────

def experience_bullets(description):
    """Split a description on escaped or real newlines into trimmed bullet lines"""
    if not description:
        return []
    return [line.strip() for line in re.split(r'\\n|\n', description) if line.strip()]


def experience_period(experience):
    start = format_month_year(experience.get('start_date'))
    if experience.get('is_current'):
        return f"{start} - Present"
    end = format_month_year(experience.get('end_date'))
    return f"{start} - {end}" if end else start


# ─── Projects ───────────────────────────────────────────────────────────────────

def format_status(status):
    """'in_progress' -> 'In Progress'; only the first underscore is replaced"""
    label = (status or '').replace('_', ' ', 1)
    return ' '.join(word[:1].upper() + word[1:] for word in label.split(' '))


def project_images(project):
    """Cover image first, then the gallery"""
    images = [project['cover_image_url']] if project.get('cover_image_url') else []
    images.extend(project.get('gallery_image_urls') or [])
    return images


def project_meta(project, owner):
    """Title and description for a project page"""
    if project and project.get('title'):
        title = f"{project['title']} - {owner}"
    else:
        title = f"Project - {owner}"
    description = (project or {}).get('tagline') or 'Project details'
    return {'title': title, 'description': description}


# ─── Markdown ───────────────────────────────────────────────────────────────────

class _ProjectRenderer(mistune.HTMLRenderer):
    """HTML renderer for project descriptions; links open in a new tab"""

    def link(self, text, url, title=None):
        attrs = f' title="{escape(title)}"' if title else ''
        return (f'<a href="{self.safe_url(url)}"{attrs} '
                f'target="_blank" rel="noopener noreferrer">{text}</a>')


# escape=True: raw HTML in the source is shown as text, never passed through
_markdown = mistune.create_markdown(renderer=_ProjectRenderer(escape=True))


def render_markdown(text):
    """
    Render a project description to HTML

    CommonMark through mistune: headings, paragraphs, bullet and numbered
    lists, fenced and inline code, bold, italic and links. Raw HTML is
    escaped and links with unsafe schemes such as javascript: are dropped.

    Returns:
        Markup: Safe HTML for the template
    """
    if not text:
        return Markup('')
    return Markup(_markdown(text).strip())


__all__ = [
    'parse_date',
    'format_month_year',
    'skill_icon_key',
    'skill_initials',
    'skill_visual',
    'group_skills',
    'experience_bullets',
    'experience_period',
    'format_status',
    'project_images',
    'project_meta',
    'render_markdown'
]
