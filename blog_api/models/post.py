import uuid
from datetime import datetime

from blog_api.extensions import db


# blog_api/models/post.py
class Post(db.Model):
    __tablename__ = "posts"

    # UUID guardado como texto para que funcione igual en SQLite y Postgres
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    is_hidden = db.Column(db.Boolean, nullable=False)

    # 👤 Autor (siempre exactamente uno)
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    author = db.relationship("User", back_populates="posts")

    # ⏰ Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # ✅ Mismo formato de claves que consume el frontend
    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "isHidden": self.is_hidden,
            "authorId": self.author_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Post {self.title}>"
