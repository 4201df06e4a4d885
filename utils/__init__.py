"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import admin_api_enabled
from .errors import (
    AppError,
    ValidationError,
    NotFoundError,
    ConflictError,
    TransientError
)
from .validation import (
    ContactMessageCreate,
    BlogPostCreate,
    BlogPostUpdate,
    ReadFlagUpdate,
    validate_payload
)
from .data import (
    submit_contact_message,
    list_contact_messages,
    get_contact_message,
    set_message_read,
    get_unread_messages_count,
    contact_message_to_dict,
    list_blog_posts,
    get_blog_post,
    create_blog_post,
    update_blog_post,
    blog_post_to_dict
)
from .ui_helpers import (
    NAV_SECTIONS,
    SAMPLE_BLOG_POSTS,
    get_blog_preview,
    get_theme,
    get_page_specific_class
)

__all__ = [
    # Decorators
    'admin_api_enabled',

    # Errors
    'AppError',
    'ValidationError',
    'NotFoundError',
    'ConflictError',
    'TransientError',

    # Validation
    'ContactMessageCreate',
    'BlogPostCreate',
    'BlogPostUpdate',
    'ReadFlagUpdate',
    'validate_payload',

    # Data
    'submit_contact_message',
    'list_contact_messages',
    'get_contact_message',
    'set_message_read',
    'get_unread_messages_count',
    'contact_message_to_dict',
    'list_blog_posts',
    'get_blog_post',
    'create_blog_post',
    'update_blog_post',
    'blog_post_to_dict',

    # UI Helpers
    'NAV_SECTIONS',
    'SAMPLE_BLOG_POSTS',
    'get_blog_preview',
    'get_theme',
    'get_page_specific_class'
]
