import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("SECRET_KEY", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt")
os.environ.setdefault("PEPPER", "test-pepper")

from app import create_app
from models import Show, User, db
from security import hash_password


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'unit.db'}",
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    def factory(username="alice", email="a@x.com", phone="111", password="p1", role="user"):
        user = User(
            username=username,
            email=email,
            phone=phone,
            password_hash=hash_password(password),
            role=role,
        )
        db.session.add(user)
        db.session.commit()
        return user

    return factory


@pytest.fixture()
def make_show(app):
    def factory(title="Interstellar", hall="Hall 1", rows=3, cells=4, start_at=None):
        show = Show(
            title=title,
            description="",
            hall=hall,
            start_at=start_at or datetime(2030, 1, 1, 19, 0),
            rows=rows,
            cells=cells,
        )
        db.session.add(show)
        db.session.commit()
        return show

    return factory


@pytest.fixture()
def login(client):
    def do_login(email, password):
        response = client.post("/login", data={"email": email, "password": password})
        assert response.status_code == 302
        assert response.headers["Location"].endswith("/shows")
        return response

    return do_login
