"""
Pages Blueprint - Public portfolio page
Handles: Landing page sections, page contact form
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
