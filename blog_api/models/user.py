import enum
from datetime import datetime

from blog_api.extensions import db


class UserType(str, enum.Enum):
    BLOGGER = "blogger"
    ADMIN = "admin"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True)
    email = db.Column(db.String(120), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)

    type = db.Column(
        db.Enum(UserType, name="user_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserType.BLOGGER,
    )

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    posts = db.relationship("Post", back_populates="author", cascade="all, delete-orphan")

    @property
    def is_admin(self):
        return self.type == UserType.ADMIN

    def __repr__(self):
        return f"<User {self.name}>"
