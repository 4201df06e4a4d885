"""
Data Management Module - Blog posts and contact messages
Every read and write of the two tables goes through here; routes only
translate HTTP to these calls and back.
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from extensions import db
from models import BlogPost, ContactMessage, utcnow
from .errors import ConflictError, NotFoundError, TransientError, ValidationError
from .validation import (
    BlogPostCreate, BlogPostUpdate, ContactMessageCreate, validate_payload
)


def _isoformat(value):
    return value.isoformat() if value else None


def _commit(action):
    """Commit the session; storage failures become TransientError"""
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Database error while {action}: {str(e)}")
        raise TransientError('The server could not save your request. Please try again.') from e


# -----------------------------
# Contact messages
# -----------------------------

def submit_contact_message(payload):
    """
    Validate and store one contact message.

    Args:
        payload (dict): name, email, subject, message. Other keys are ignored.

    Returns:
        ContactMessage: the stored row, unread, with a server timestamp

    Raises:
        ValidationError: a required field is missing or malformed
        TransientError: the row could not be written
    """
    try:
        data = validate_payload(ContactMessageCreate, payload)
    except ValidationError as e:
        fields = ', '.join(item['field'] for item in e.fields)
        current_app.logger.info(f"Contact message rejected, invalid fields: {fields}")
        raise

    message = ContactMessage(
        name=data.name,
        email=str(data.email),
        subject=data.subject,
        message=data.message,
        read=False,
    )
    db.session.add(message)
    _commit('saving contact message')

    current_app.logger.info(f"Contact message saved, message_id: {message.id}")
    return message


def list_contact_messages(unread_only=False):
    """Inbox listing, newest first"""
    query = ContactMessage.query
    if unread_only:
        query = query.filter(ContactMessage.read.is_(False))
    return query.order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc()).all()


def get_contact_message(message_id):
    message = db.session.get(ContactMessage, message_id)
    if message is None:
        raise NotFoundError(f'Message {message_id} not found.')
    return message


def set_message_read(message_id, read):
    """Set the read flag of one message"""
    message = get_contact_message(message_id)
    message.read = bool(read)
    _commit('updating read flag')
    current_app.logger.info(f"Message {message_id} marked {'read' if message.read else 'unread'}")
    return message


def get_unread_messages_count():
    """Get count of unread contact messages"""
    return ContactMessage.query.filter(ContactMessage.read.is_(False)).count()


def contact_message_to_dict(message):
    """Convert message model to dictionary"""
    return {
        'id': message.id,
        'name': message.name,
        'email': message.email,
        'subject': message.subject,
        'message': message.message,
        'read': message.read,
        'createdAt': _isoformat(message.created_at)
    }


# -----------------------------
# Blog posts
# -----------------------------

def list_blog_posts(published=None, order='newest'):
    """
    Stored blog posts. Never substitutes sample content for an empty table.

    Args:
        published (bool, optional): None for every post, True for published
            posts only, False for drafts only
        order (str): 'newest' (created_at descending) or 'oldest'

    Returns:
        list[BlogPost]
    """
    if order not in ('newest', 'oldest'):
        raise ValidationError('Unsupported ordering.', fields=[
            {'field': 'order', 'message': "Input should be 'newest' or 'oldest'"}
        ])

    query = BlogPost.query
    if published is not None:
        query = query.filter(BlogPost.published.is_(bool(published)))

    if order == 'newest':
        query = query.order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
    else:
        query = query.order_by(BlogPost.created_at.asc(), BlogPost.id.asc())
    return query.all()


def get_blog_post(slug):
    post = BlogPost.query.filter_by(slug=slug).first()
    if post is None:
        raise NotFoundError(f"Post '{slug}' not found.")
    return post


def create_blog_post(payload):
    """
    Validate and insert a blog post.

    Raises:
        ValidationError: invalid or missing fields
        ConflictError: the slug is already taken
        TransientError: the row could not be written
    """
    data = validate_payload(BlogPostCreate, payload)

    if BlogPost.query.filter_by(slug=data.slug).first() is not None:
        current_app.logger.warning(f"Blog post rejected, slug already exists: {data.slug}")
        raise ConflictError(f"A post with slug '{data.slug}' already exists.",
                            fields=[{'field': 'slug', 'message': 'Slug already exists'}])

    post = BlogPost(slug=data.slug, **data.content_fields())
    db.session.add(post)
    try:
        _commit('creating blog post')
    except IntegrityError as e:
        # Lost a race with another insert of the same slug
        current_app.logger.warning(f"Blog post rejected, slug already exists: {data.slug}")
        raise ConflictError(f"A post with slug '{data.slug}' already exists.",
                            fields=[{'field': 'slug', 'message': 'Slug already exists'}]) from e

    current_app.logger.info(f"Blog post created: {post.slug} (id {post.id})")
    return post


def update_blog_post(slug, payload):
    """Rewrite the content fields of a post and refresh updated_at"""
    post = get_blog_post(slug)
    data = validate_payload(BlogPostUpdate, payload)

    if data.slug is not None and data.slug != post.slug:
        raise ValidationError('The slug of a post cannot be changed.', fields=[
            {'field': 'slug', 'message': 'Slug is immutable after creation'}
        ])

    for column, value in data.content_fields().items():
        setattr(post, column, value)
    post.updated_at = utcnow()
    _commit('updating blog post')

    current_app.logger.info(f"Blog post updated: {post.slug}")
    return post


def blog_post_to_dict(post):
    """Convert blog post model to dictionary"""
    return {
        'id': post.id,
        'title': post.title,
        'slug': post.slug,
        'excerpt': post.excerpt,
        'content': post.content,
        'category': post.category,
        'tags': list(post.tags or []),
        'imageUrl': post.image_url,
        'published': post.published,
        'readTime': post.read_time,
        'createdAt': _isoformat(post.created_at),
        'updatedAt': _isoformat(post.updated_at)
    }
