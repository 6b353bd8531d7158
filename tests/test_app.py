# tests/test_app.py
import pytest
from flask import get_flashed_messages

from app import create_app
from app.errors import AppError
from app.extensions import db
from app.feedback import Feedback, FeedbackAlreadySet, pending_messages
from app.models import Person, Zombie, serialize_model
from app.seed import DEFAULT_ZOMBIES, seed_zombies


# -----------------------------------------------------------------
# Feedback
# -----------------------------------------------------------------
def test_feedback_slots_are_write_once():
    fb = Feedback().succeed("ok").fail("ko")
    assert (fb.success, fb.error) == ("ok", "ko")

    with pytest.raises(FeedbackAlreadySet):
        fb.succeed("again")
    with pytest.raises(FeedbackAlreadySet):
        fb.fail("again")


def test_feedback_redirect_flashes_what_was_set(app):
    with app.test_request_context("/"):
        rv = Feedback().fail("sem nome").redirect("/people/")

        assert rv.status_code == 302
        assert rv.headers["Location"] == "/people/"
        assert get_flashed_messages(with_categories=True) == [("error", "sem nome")]


def test_pending_messages_groups_by_category(app):
    with app.test_request_context("/"):
        Feedback().succeed("feito").fail("falhou").redirect("/")

        assert pending_messages() == {"success": ["feito"], "error": ["falhou"]}


def test_empty_feedback_flashes_nothing(app):
    with app.test_request_context("/"):
        Feedback().redirect("/")
        assert pending_messages() == {"success": [], "error": []}


# -----------------------------------------------------------------
# Errors
# -----------------------------------------------------------------
def test_app_error_carries_kind_and_message():
    error = AppError("database", "Problema ao recuperar pessoas")
    assert error.kind == "database"
    assert error.message == "Problema ao recuperar pessoas"
    assert error.status == 500
    assert str(error) == "Problema ao recuperar pessoas"
    assert error.to_dict() == {"error": "database", "message": "Problema ao recuperar pessoas"}


# -----------------------------------------------------------------
# Models / seed
# -----------------------------------------------------------------
def test_serialize_model_uses_column_names(app):
    with app.app_context():
        zombie = Zombie.query.filter_by(name="Zumbi Bob").one()
        person = Person(id=42, name="Quico", alive=False, eaten_by=zombie.id)

        assert serialize_model(person) == {
            "id": 42,
            "name": "Quico",
            "alive": False,
            "eatenBy": zombie.id,
        }
        assert serialize_model(zombie) == {"id": zombie.id, "name": "Zumbi Bob", "pictureUrl": None}


def test_seed_zombies_is_idempotent(app):
    with app.app_context():
        assert Zombie.query.count() == len(DEFAULT_ZOMBIES)
        assert seed_zombies() == 0
        db.session.commit()
        assert Zombie.query.count() == len(DEFAULT_ZOMBIES)


# -----------------------------------------------------------------
# CLI
# -----------------------------------------------------------------
def test_cli_init_db_and_seed(tmp_path):
    app = create_app(
        "config.TestingConfig",
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'cli.sqlite'}",
    )
    runner = app.test_cli_runner()

    result = runner.invoke(args=["init-db"])
    assert result.exit_code == 0
    assert "Database tables created." in result.output

    result = runner.invoke(args=["seed-zombies"])
    assert result.exit_code == 0
    assert f"({len(DEFAULT_ZOMBIES)} added)" in result.output

    result = runner.invoke(args=["seed-zombies"])
    assert "(0 added)" in result.output

    with app.app_context():
        assert Zombie.query.count() == len(DEFAULT_ZOMBIES)
        db.engine.dispose()


# -----------------------------------------------------------------
# Method override / CSRF
# -----------------------------------------------------------------
def test_method_override_ignores_unknown_methods(client):
    rv = client.post("/people/?_method=TRACE", data={"name": "Rui"})
    # still handled as a POST (create)
    assert rv.status_code == 302
    assert rv.headers["Location"] == "/people/"


def test_method_override_only_applies_to_post(client, add_person):
    pid = add_person("Sara")
    rv = client.get(f"/people/{pid}?_method=DELETE")
    assert rv.status_code == 405


def test_csrf_is_enforced_outside_tests(tmp_path):
    app = create_app(
        "config.TestingConfig",
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'csrf.sqlite'}",
        WTF_CSRF_ENABLED=True,
    )
    client = app.test_client()

    rv = client.post("/people/", data={"name": "Tiago"})
    assert rv.status_code == 400
