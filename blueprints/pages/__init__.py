"""
Pages Blueprint - Home page and site-level endpoints
Handles: Home sections, theme toggle, dots background, SEO files
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
