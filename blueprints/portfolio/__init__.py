"""
Portfolio Blueprint - Public project views
Handles: Project detail pages and their image carousel
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
