"""
API Blueprint - JSON endpoints
Handles: Blog post listing and editing, contact submission, contact inbox
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
