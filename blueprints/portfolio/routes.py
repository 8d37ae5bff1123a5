"""
Portfolio Routes - Public project views
Handles: Project detail page with gallery carousel and markdown description
"""

from flask import render_template, request, current_app
from utils.data import load_project
from utils.helpers import format_month_year, format_status, project_images, project_meta, render_markdown
from utils.ui_helpers import Carousel
from . import portfolio_bp


@portfolio_bp.route('/projects/<slug>')
def project_detail(slug):
    """Project detail page"""
    project = load_project(slug)
    if not project:
        current_app.logger.info(f"Project not found: {slug}")
        return render_template('404.html'), 404

    carousel = Carousel(project_images(project), request.args.get('image', 0, type=int))
    meta = project_meta(project, current_app.config['SITE_OWNER'])

    return render_template('project_detail.html',
                           project=project,
                           carousel=carousel,
                           meta=meta,
                           project_date=format_month_year(project.get('project_date'), long_month=True),
                           status_label=format_status(project.get('status')),
                           description_html=render_markdown(project.get('description_markdown')))
