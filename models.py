from extensions import db
from datetime import datetime, timezone
from sqlalchemy import JSON
from werkzeug.security import generate_password_hash, check_password_hash


def utcnow():
    """Naive UTC timestamp, the form every supported backend stores"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class BlogPost(db.Model):
    __tablename__ = 'blog_posts'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    excerpt = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False)
    tags = db.Column(SafeJSON, nullable=False, default=list)  # ordered list of labels
    image_url = db.Column(db.String(500))
    published = db.Column(db.Boolean, nullable=False, default=False)
    read_time = db.Column(db.Integer, nullable=False, default=5)  # minutes
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        db.Index('idx_blog_posts_published_created', 'published', 'created_at'),
    )

    def __repr__(self):
        return f'<BlogPost {self.slug}>'


class ContactMessage(db.Model):
    __tablename__ = 'contact_messages'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    read = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f'<ContactMessage {self.id} from {self.email}>'


# Reserved: no flow signs in against this table yet.
class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
