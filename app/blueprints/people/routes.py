"""
app/blueprints/people/routes.py

People routes (mounted at /people).

Provides:
- GET    /people/         list (HTML or JSON, negotiated on Accept)
- PUT    /people/eaten/   a zombie eats a person
- GET    /people/new/     new person form
- POST   /people/         create a person
- DELETE /people/<id>     delete a person

IMPORTANT:
- Mutations always answer with a redirect; the outcome travels as a flash message.
- Mark-eaten relies on the affected-row count; delete does not look at it at all.
"""

from __future__ import annotations

from flask import Blueprint, abort, current_app, jsonify, render_template, request, url_for
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from ...errors import HTML, JSON, AppError, negotiate
from ...extensions import db
from ...feedback import Feedback, pending_messages
from ...models import Person, Zombie, serialize_model

people_bp = Blueprint("people", __name__, url_prefix="/people")

# Signed 64-bit INTEGER range; larger ids cannot reach the database driver.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


# ---------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------
def _parse_optional_int(value: str | None) -> int | None:
    """Parse optional int from form data. Returns None if empty/invalid."""
    if value is None:
        return None
    raw = str(value).strip()
    if raw == "":
        return None
    try:
        parsed = int(raw)
    except ValueError:
        return None
    if not _is_storable_id(parsed):
        return None
    return parsed


def _is_storable_id(value: int) -> bool:
    return MIN_ID <= value <= MAX_ID


def _people_with_eaters() -> list[dict]:
    """
    person LEFT OUTER JOIN zombie ON eatenBy = zombie.id

    Each row is grouped by source table so that columns with the same name
    (id, name) don't collide: {"person": {...}, "zombie": {...} or None}.
    """
    stmt = (
        select(Person, Zombie)
        .outerjoin(Zombie, Person.eaten_by == Zombie.id)
        .order_by(Person.id.asc())
    )
    rows = db.session.execute(stmt).all()
    return [
        {
            "person": serialize_model(person),
            "zombie": serialize_model(zombie) if zombie is not None else None,
        }
        for person, zombie in rows
    ]


# ---------------------------------------------------------------------
# LIST
# ---------------------------------------------------------------------
@people_bp.route("/", methods=["GET"])
def list_people():
    """List people with the zombie that ate them (if any)."""
    mimetype = negotiate()
    if mimetype is None:
        abort(406)

    try:
        people = _people_with_eaters()
        zombies = []
        if mimetype == HTML:
            zombies = Zombie.query.order_by(Zombie.name.asc()).all()
    except SQLAlchemyError as error:
        current_app.logger.exception("Failed to load people")
        raise AppError("database", "Problema ao recuperar pessoas") from error

    if mimetype == JSON:
        return jsonify({"people": people})

    messages = pending_messages()
    return render_template(
        "people/list.html",
        people=people,
        zombies=zombies,
        success=messages["success"],
        error=messages["error"],
    )


# ---------------------------------------------------------------------
# MARK EATEN
# ---------------------------------------------------------------------
@people_bp.route("/eaten/", methods=["PUT"])
def mark_eaten():
    """
    A zombie eats a person: alive=false, eatenBy=<zombie>.

    Outcomes (always redirect to /):
    - missing ids            -> error, no query
    - 0 (or >1) rows updated -> error "nothing to eat"
    - exactly 1 row          -> success
    - database error         -> error with the description
    """
    feedback = Feedback()
    zombie_id = _parse_optional_int(request.form.get("zombie"))
    person_id = _parse_optional_int(request.form.get("person"))

    if zombie_id is None or person_id is None:
        feedback.fail("Nenhum id de pessoa ou zumbi foi passado!")
        return feedback.redirect("/")

    stmt = (
        update(Person)
        .where(Person.id == person_id)
        .values(alive=False, eaten_by=zombie_id)
        .execution_options(synchronize_session=False)
    )
    try:
        result = db.session.execute(stmt)
        db.session.commit()
    except SQLAlchemyError as error:
        db.session.rollback()
        current_app.logger.exception("Failed to mark person %s as eaten by zombie %s", person_id, zombie_id)
        feedback.fail(f"Erro desconhecido. Descrição: {error}")
        return feedback.redirect("/")

    if result.rowcount != 1:
        feedback.fail("Não há pessoa para ser comida.")
    else:
        current_app.logger.info("Person %s eaten by zombie %s", person_id, zombie_id)
        feedback.succeed("A pessoa foi inteiramente (não apenas cérebro) engolida.")

    return feedback.redirect("/")


# ---------------------------------------------------------------------
# NEW FORM
# ---------------------------------------------------------------------
@people_bp.route("/new/", methods=["GET"])
def new_person():
    """Empty form for a new person. No database access."""
    messages = pending_messages()
    return render_template(
        "people/new.html",
        success=messages["success"],
        error=messages["error"],
    )


# ---------------------------------------------------------------------
# CREATE
# ---------------------------------------------------------------------
@people_bp.route("/", methods=["POST"])
def create_person():
    """
    Create a new (alive) person.

    Runs on a dedicated connection with an explicit transaction:
    begin -> INSERT -> commit, rollback on failure, and the connection is
    always returned to the pool.
    """
    feedback = Feedback()
    name = request.form.get("name")

    if not name:
        feedback.fail("Digite o nome da nova pessoa.")
        return feedback.redirect(url_for("people.list_people"))

    connection = None
    transaction = None
    try:
        connection = db.engine.connect()
        transaction = connection.begin()
        connection.execute(Person.__table__.insert().values(name=name, alive=True))
        transaction.commit()
        current_app.logger.info("Person %r created", name)
        feedback.succeed(f"Pessoa com nome {name} criada com sucesso!")
    except SQLAlchemyError:
        if transaction is not None:
            try:
                transaction.rollback()
            except SQLAlchemyError:
                # The insert failure is the one worth reporting.
                current_app.logger.warning("Rollback failed while creating person %r", name, exc_info=True)
        current_app.logger.exception("Failed to create person %r", name)
        feedback.fail(f"Erro: Não foi possível criar a nova pessoa com nome {name}.")
    finally:
        if connection is not None:
            connection.close()

    return feedback.redirect(url_for("people.list_people"))


# ---------------------------------------------------------------------
# DELETE
# ---------------------------------------------------------------------
@people_bp.route("/<int:person_id>", methods=["DELETE"])
def delete_person(person_id: int):
    """
    Delete a person by id.

    No existence check: deleting an unknown id still reports success.
    """
    feedback = Feedback()
    if not _is_storable_id(person_id):
        feedback.fail(f"Não foi possível excluir a pessoa com id = {person_id}.")
        return feedback.redirect(url_for("people.list_people"))

    stmt = (
        delete(Person)
        .where(Person.id == person_id)
        .execution_options(synchronize_session=False)
    )
    try:
        db.session.execute(stmt)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Failed to delete person %s", person_id)
        feedback.fail(f"Não foi possível excluir a pessoa com id = {person_id}.")
    else:
        current_app.logger.info("Person %s deleted", person_id)
        feedback.succeed(f"Pessoa com id = {person_id} excluída com sucesso!")

    return feedback.redirect(url_for("people.list_people"))
