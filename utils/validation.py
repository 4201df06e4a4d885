"""
Validation Module - Schemas for every accepted input

The same schemas back the JSON API and the page form, so a payload is
either legal everywhere or rejected everywhere with the same field errors.
"""

from typing import List, Literal, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool, field_validator

from .errors import ValidationError

SLUG_PATTERN = r'^[a-z0-9]+(?:-[a-z0-9]+)*$'


class ContactMessageCreate(BaseModel):
    """name/email/subject/message only; read, id and created_at are server-owned"""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1, max_length=5000)


class _BlogPostFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(min_length=1, max_length=500)
    excerpt: str = Field(min_length=1)
    content: str = Field(min_length=1)
    category: str = Field(min_length=1, max_length=100)
    tags: List[str] = Field(default_factory=list)
    image_url: Optional[str] = Field(default=None, alias='imageUrl', max_length=500)
    published: bool = False
    read_time: int = Field(default=5, alias='readTime', gt=0)

    @field_validator('tags')
    @classmethod
    def tags_not_blank(cls, tags):
        cleaned = [tag.strip() for tag in tags]
        if any(not tag for tag in cleaned):
            raise ValueError('tags must not contain empty labels')
        return cleaned

    @field_validator('image_url')
    @classmethod
    def blank_image_is_none(cls, value):
        return value or None

    def content_fields(self):
        """Column values for the rewritable part of a post"""
        return self.model_dump(exclude={'slug'})


class BlogPostCreate(_BlogPostFields):
    slug: str = Field(min_length=1, max_length=255, pattern=SLUG_PATTERN)


class BlogPostUpdate(_BlogPostFields):
    # Accepted only so a changed slug can be reported; slugs never change.
    slug: Optional[str] = None


class ReadFlagUpdate(BaseModel):
    read: StrictBool


class BlogListQuery(BaseModel):
    published: Optional[bool] = None
    order: Literal['newest', 'oldest'] = 'newest'


class ContactListQuery(BaseModel):
    unread: bool = False


def format_errors(exc):
    """Flatten a pydantic error into [{'field': ..., 'message': ...}]"""
    fields = []
    for err in exc.errors():
        path = '.'.join(str(part) for part in err.get('loc', ())) or 'body'
        fields.append({'field': path, 'message': err.get('msg', 'Invalid value')})
    return fields


def validate_payload(schema, data):
    """
    Parse data with schema or raise ValidationError with field errors.

    Anything that is not a mapping is validated as an empty one, so a
    missing or malformed body reports every required field.
    """
    if not isinstance(data, dict):
        data = {}
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError('Some fields are missing or invalid.',
                              fields=format_errors(exc)) from exc


__all__ = [
    'ContactMessageCreate',
    'BlogPostCreate',
    'BlogPostUpdate',
    'ReadFlagUpdate',
    'BlogListQuery',
    'ContactListQuery',
    'validate_payload',
    'format_errors',
    'SLUG_PATTERN'
]
