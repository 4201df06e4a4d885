"""
Pages Routes - The public single-page portfolio
"""

from flask import render_template, redirect, url_for, request, flash, current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from utils.data import list_blog_posts, blog_post_to_dict, submit_contact_message
from utils.errors import ValidationError, TransientError
from utils.ui_helpers import get_blog_preview
from . import pages_bp

CONTACT_FIELDS = ('name', 'email', 'subject', 'message')
CONSENT_VALUES = ('on', 'true', '1', 'yes')


def _preview_posts():
    """Published posts for the blog section, sample posts when there are none"""
    limit = current_app.config.get('BLOG_PREVIEW_LIMIT', 3)
    try:
        posts = [blog_post_to_dict(p) for p in list_blog_posts(published=True, order='newest')]
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Could not load blog posts for the page: {str(e)}")
        posts = []
    return get_blog_preview(posts, limit), not posts


def _render_index(form=None, errors=None, form_error=None, status=200):
    posts, using_samples = _preview_posts()
    return render_template('index.html',
                           posts=posts,
                           using_sample_posts=using_samples,
                           form=form or {},
                           errors=errors or {},
                           form_error=form_error), status


@pages_bp.route('/')
def index():
    """Landing page - hero, about, projects, blog preview, contact"""
    return _render_index()


@pages_bp.route('/contact', methods=['POST'])
def contact():
    """Contact form on the page; entered data is kept on every failure"""
    form = {field: request.form.get(field, '') for field in CONTACT_FIELDS}
    form['privacy'] = request.form.get('privacy', '').lower() in CONSENT_VALUES

    if not form['privacy']:
        return _render_index(form,
                             errors={'privacy': 'Please accept the privacy policy to continue.'},
                             form_error='Privacy agreement required.',
                             status=400)

    try:
        submit_contact_message({field: form[field] for field in CONTACT_FIELDS})
    except ValidationError as e:
        return _render_index(form,
                             errors=e.field_messages(),
                             form_error='Please correct the highlighted fields.',
                             status=400)
    except TransientError:
        return _render_index(form,
                             form_error='Failed to send message. Please try again later.',
                             status=503)

    flash("Message sent successfully! Thank you for reaching out. I'll get back to you soon.", 'success')
    return redirect(url_for('pages.index', _anchor='contact'))
