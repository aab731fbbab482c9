"""Base model with common fields."""
import uuid
from datetime import datetime

from symbol_quest.extensions import db


class BaseModel(db.Model):
    """
    Abstract base for persisted entities.

    Provides a string UUID primary key and created/updated timestamps.
    """

    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )
