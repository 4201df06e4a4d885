"""
WSGI entry point for gunicorn: gunicorn wsgi:app
"""

from app import create_app

# Create app instance for gunicorn
app = create_app()
