import pytest

from blog_api import create_app
from blog_api.auth.security import get_credentials
from blog_api.config import TestConfig
from blog_api.extensions import db
from blog_api.models import Post, User, UserType

API = "/api/v1"


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def make_user(app):
    def _make_user(name="blogger1", email=None, password="password123", user_type=UserType.BLOGGER):
        user = User(
            name=name,
            email=email or f"{name}@mail.com",
            password_hash=get_credentials().hash(password),
            type=user_type,
        )
        db.session.add(user)
        db.session.commit()
        return user

    return _make_user


@pytest.fixture
def auth_header(app):
    def _auth_header(user):
        token = get_credentials().issue_token({"id": user.id, "type": user.type})
        return {"Authorization": f"Bearer {token}"}

    return _auth_header


@pytest.fixture
def make_post(app):
    def _make_post(author, title="title", content="content", is_hidden=False):
        post = Post(title=title, content=content, is_hidden=is_hidden, author_id=author.id)
        db.session.add(post)
        db.session.commit()
        return post

    return _make_post
