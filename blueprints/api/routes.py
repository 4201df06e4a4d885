"""
API Routes - JSON endpoints
Handles: Blog posts, contact submission, contact inbox
"""

from flask import jsonify, request
from utils.data import (
    submit_contact_message, list_contact_messages, get_contact_message,
    set_message_read, get_unread_messages_count, contact_message_to_dict,
    list_blog_posts, get_blog_post, create_blog_post, update_blog_post,
    blog_post_to_dict
)
from utils.decorators import admin_api_enabled
from utils.validation import BlogListQuery, ContactListQuery, ReadFlagUpdate, validate_payload
from . import api_bp


def _json_body():
    return request.get_json(silent=True)


# -----------------------------
# Blog Endpoints
# -----------------------------

@api_bp.route('/blog-posts', methods=['GET'])
def blog_posts():
    """All posts by default, newest first; ?published= and ?order= narrow it"""
    query = validate_payload(BlogListQuery, request.args.to_dict())
    posts = list_blog_posts(published=query.published, order=query.order)
    return jsonify([blog_post_to_dict(p) for p in posts])


@api_bp.route('/blog-posts/<slug>', methods=['GET'])
def blog_post_detail(slug):
    return jsonify(blog_post_to_dict(get_blog_post(slug)))


@api_bp.route('/blog-posts', methods=['POST'])
@admin_api_enabled
def blog_post_create():
    post = create_blog_post(_json_body())
    return jsonify(blog_post_to_dict(post)), 201


@api_bp.route('/blog-posts/<slug>', methods=['PUT'])
@admin_api_enabled
def blog_post_update(slug):
    post = update_blog_post(slug, _json_body())
    return jsonify(blog_post_to_dict(post))


# -----------------------------
# Contact Endpoints
# -----------------------------

@api_bp.route('/contact', methods=['POST'])
def contact():
    """Store a contact form submission"""
    message = submit_contact_message(_json_body())
    return jsonify(contact_message_to_dict(message)), 201


@api_bp.route('/contact-messages', methods=['GET'])
@admin_api_enabled
def contact_messages():
    query = validate_payload(ContactListQuery, request.args.to_dict())
    messages = list_contact_messages(unread_only=query.unread)
    response = jsonify([contact_message_to_dict(m) for m in messages])
    response.headers['X-Unread-Count'] = str(get_unread_messages_count())
    return response


@api_bp.route('/contact-messages/<int:message_id>', methods=['GET'])
@admin_api_enabled
def contact_message_detail(message_id):
    return jsonify(contact_message_to_dict(get_contact_message(message_id)))


@api_bp.route('/contact-messages/<int:message_id>', methods=['PATCH'])
@admin_api_enabled
def contact_message_mark(message_id):
    """Toggle the read flag: {"read": true|false}"""
    data = validate_payload(ReadFlagUpdate, _json_body())
    message = set_message_read(message_id, data.read)
    return jsonify(contact_message_to_dict(message))
