"""
People & Zombies – Domain Models

- Zombie: the eaters. Only referenced by Person.eatenBy.
- Person: created alive; the mark-eaten UPDATE flips alive=false and sets eatenBy.

IMPORTANT:
- "eatenBy is null while alive" is NOT a database constraint. The only write
  that touches either column is the mark-eaten UPDATE in the people blueprint.
- No cascade: deleting a zombie leaves eatenBy references untouched.
"""

from __future__ import annotations

from typing import Any, Dict

from .extensions import db


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def serialize_model(instance: Any) -> Dict[str, Any]:
    """
    Convert a model instance to a dict snapshot based on its mapped columns.

    NOTES:
    - Keys are the database column names (eatenBy, pictureUrl), not the Python attribute names.
    - Captures only scalar column values (not relationships).
    """
    data: Dict[str, Any] = {}
    for attr in instance.__mapper__.column_attrs:
        data[attr.columns[0].name] = getattr(instance, attr.key)
    return data


# ---------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------
class Zombie(db.Model):
    """A zombie that may eat people."""

    __tablename__ = "zombie"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, index=True)
    picture_url = db.Column("pictureUrl", db.String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Zombie {self.id} {self.name!r}>"


class Person(db.Model):
    """A person, alive until some zombie eats them."""

    __tablename__ = "person"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    alive = db.Column(db.Boolean, default=True, nullable=False)

    eaten_by = db.Column(
        "eatenBy",
        db.Integer,
        db.ForeignKey("zombie.id"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Person {self.id} {self.name!r} alive={self.alive}>"
