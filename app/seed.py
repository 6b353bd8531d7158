"""
app/seed.py

Seed the default zombies.

Rules:
- Safe to run multiple times (idempotent): zombies are matched by name.
- Only flushes; the caller (CLI command) owns the commit.

NOTE:
- People are never seeded; they are created through the UI/API.
"""

from __future__ import annotations

from .extensions import db
from .models import Zombie


DEFAULT_ZOMBIES = [
    # name, pictureUrl
    ("Zumbi Bob", None),
    ("Zumbi Luiza", None),
    ("Zumbi Roberto", None),
    ("Zumbi Marta", None),
]


def seed_zombies() -> int:
    """
    Create the DEFAULT_ZOMBIES that don't exist yet.

    Returns how many rows were added.
    """
    added = 0
    for name, picture_url in DEFAULT_ZOMBIES:
        exists = Zombie.query.filter_by(name=name).first()
        if exists:
            continue
        db.session.add(Zombie(name=name, picture_url=picture_url))
        added += 1

    db.session.flush()
    return added
