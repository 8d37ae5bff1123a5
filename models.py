from extensions import db
from datetime import datetime
from sqlalchemy import JSON
import uuid

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

class Skill(db.Model):
    __tablename__ = 'skills'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(255), nullable=False)
    proficiency = db.Column(db.Integer, default=50)
    svg = db.Column(db.String(500))  # Optional icon URL
    type = db.Column(db.String(20), default='icon')  # icon, text-only
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

class Experience(db.Model):
    __tablename__ = 'experience'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)  # One bullet per line
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date)
    is_current = db.Column(db.Boolean, default=False)
    logo = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slug = db.Column(db.String(255), unique=True, nullable=False)
    title = db.Column(db.String(255), nullable=False)
    tagline = db.Column(db.String(500), default='')
    cover_image_url = db.Column(db.String(500))
    skills = db.Column(SafeJSON, default=[])
    description_markdown = db.Column(db.Text)
    gallery_image_urls = db.Column(SafeJSON, default=[])
    live_url = db.Column(db.String(500))
    repo_url = db.Column(db.String(500))
    project_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(50), default='completed')  # completed, in_progress, archived
    category = db.Column(db.String(100))
    is_featured = db.Column(db.Boolean, default=False)
    display_order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_project_featured_order', 'is_featured', 'display_order'),
    )
