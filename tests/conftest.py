# tests/conftest.py
import pytest

from app import create_app
from app.extensions import db
from app.models import Person, Zombie
from app.seed import seed_zombies


@pytest.fixture
def app(tmp_path):
    """App on a temporary SQLite file, tables created and zombies seeded."""
    app = create_app(
        "config.TestingConfig",
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'test.sqlite'}",
    )
    with app.app_context():
        db.create_all()
        seed_zombies()
        db.session.commit()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_person(app):
    """Insert a person directly and return its id."""

    def _add(name, alive=True, eaten_by=None):
        with app.app_context():
            person = Person(name=name, alive=alive, eaten_by=eaten_by)
            db.session.add(person)
            db.session.commit()
            return person.id

    return _add


@pytest.fixture
def zombie_ids(app):
    with app.app_context():
        return [z.id for z in Zombie.query.order_by(Zombie.id.asc()).all()]


def read_flashes(client):
    """Pending (category, message) pairs in the client's session."""
    with client.session_transaction() as sess:
        return [tuple(item) for item in sess.get("_flashes", [])]
