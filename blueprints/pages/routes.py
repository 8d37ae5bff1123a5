"""
Pages Routes - Home page, theme toggle, dots background and SEO files
"""

from datetime import datetime
from urllib.parse import urlparse
from flask import render_template, redirect, url_for, request, current_app
from markupsafe import escape
from animation import render_background_svg
from utils.data import load_skills, load_experience, load_featured_projects, load_project_slugs
from utils.helpers import group_skills, experience_bullets, experience_period
from utils.ui_helpers import get_current_theme, toggle_theme, THEMES
from . import pages_bp


@pages_bp.route('/')
def index():
    """Home page - hero, skills, experience, featured projects and contact"""
    skills = load_skills()
    icon_categories, text_only_categories = group_skills(
        skills, current_app.config.get('SKILL_ICON_CDN'))

    experiences = []
    for exp in load_experience():
        exp['period'] = experience_period(exp)
        exp['bullets'] = experience_bullets(exp.get('description'))
        experiences.append(exp)

    projects = load_featured_projects()

    current_app.logger.info(
        f"Home page: {len(skills)} skills, {len(experiences)} experience entries, {len(projects)} projects")

    return render_template('index.html',
                           icon_categories=icon_categories,
                           text_only_categories=text_only_categories,
                           experiences=experiences,
                           projects=projects)


@pages_bp.route('/theme/toggle', methods=['POST'])
def theme_toggle():
    """Flip between dark and light theme for this session"""
    toggle_theme()
    referrer = request.referrer
    if referrer and urlparse(referrer).netloc == request.host:
        return redirect(referrer)
    return redirect(url_for('pages.index'))


def _clamped_arg(name, default, upper):
    value = request.args.get(name, default, type=int)
    if value is None:
        value = default
    return max(1, min(value, upper))


@pages_bp.route('/background.svg')
def background():
    """Render the dots background for the requested viewport"""
    conf = current_app.config
    width = _clamped_arg('width', conf['BACKGROUND_DEFAULT_WIDTH'], conf['BACKGROUND_MAX_WIDTH'])
    height = _clamped_arg('height', conf['BACKGROUND_DEFAULT_HEIGHT'], conf['BACKGROUND_MAX_HEIGHT'])
    frames = _clamped_arg('frames', 1, conf['BACKGROUND_MAX_FRAMES'])

    theme = request.args.get('theme')
    if theme not in THEMES:
        theme = get_current_theme()

    svg = render_background_svg(width, height,
                                dark=(theme == 'dark'),
                                frames=frames,
                                seed=conf.get('PARTICLE_SEED'),
                                spacing=conf.get('PARTICLE_SPACING', 80),
                                regenerate_on_resize=conf.get('PARTICLE_REGENERATE_ON_RESIZE', False))

    response = current_app.make_response(svg)
    response.headers['Content-Type'] = 'image/svg+xml; charset=utf-8'
    response.headers['Cache-Control'] = 'public, max-age=300'
    return response


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate dynamic sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    today = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = []
    sitemap_entries.append({
        'loc': f'{base_url}/',
        'changefreq': 'weekly',
        'priority': '1.0',
        'lastmod': today
    })

    for project in load_project_slugs():
        sitemap_entries.append({
            'loc': f"{base_url}{url_for('portfolio.project_detail', slug=project['slug'])}",
            'changefreq': 'monthly',
            'priority': '0.8',
            'lastmod': project.get('updated_at') or today
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{escape(entry["loc"])}</loc>')
        sitemap_xml.append(f'<lastmod>{entry["lastmod"]}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Allow: /projects/
Disallow: /theme/
Disallow: /background.svg

Sitemap: """ + request.url_root.rstrip('/') + "/sitemap.xml"

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
