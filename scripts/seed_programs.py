#!/usr/bin/env python3
"""Seed the program catalog.

Inserts the default programs into the database configured by
DATABASE_URL. Programs that already exist (matched by id) are left
untouched, so the script is safe to run repeatedly.

Run after the first start, or directly:
    python scripts/seed_programs.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlmodel import Session  # noqa: E402

from fitzone.db.engine import engine, init_db  # noqa: E402
from fitzone.program.models import Program  # noqa: E402

DEFAULT_PROGRAMS = [
    {
        "id": "hiit-bootcamp",
        "title": "HIIT Bootcamp",
        "description": "High-intensity intervals to build endurance and burn fat.",
        "duration": "6 weeks",
        "level": "Intermediate",
        "price": 79.0,
        "instructor": {"name": "Alex Rivera", "experience": "8 years"},
        "schedule": [
            {"day": "Monday", "time": "6:00 AM"},
            {"day": "Wednesday", "time": "6:00 AM"},
            {"day": "Friday", "time": "6:00 AM"},
        ],
        "benefits": ["Improved cardio", "Fat loss", "Higher metabolism"],
        "equipment": ["Kettlebell", "Jump rope"],
    },
    {
        "id": "strength-foundations",
        "title": "Strength Foundations",
        "description": "Learn the core barbell lifts with safe, steady progress.",
        "duration": "8 weeks",
        "level": "Beginner",
        "price": 99.0,
        "instructor": {"name": "Maya Chen", "experience": "12 years"},
        "schedule": [
            {"day": "Tuesday", "time": "5:30 PM"},
            {"day": "Thursday", "time": "5:30 PM"},
        ],
        "benefits": ["Muscle gain", "Better posture", "Joint stability"],
        "equipment": ["Barbell", "Squat rack"],
    },
    {
        "id": "yoga-flow",
        "title": "Yoga Flow",
        "description": "Mobility and breath work for recovery and focus.",
        "duration": "4 weeks",
        "level": "All levels",
        "price": 49.0,
        "instructor": {"name": "Priya Nair", "experience": "6 years"},
        "schedule": [
            {"day": "Saturday", "time": "9:00 AM"},
            {"day": "Sunday", "time": "9:00 AM"},
        ],
        "benefits": ["Flexibility", "Stress relief"],
        "equipment": ["Yoga mat"],
    },
]


def seed(session: Session) -> int:
    """Insert missing default programs.

    Returns:
        Number of programs inserted
    """
    inserted = 0
    for data in DEFAULT_PROGRAMS:
        if session.get(Program, data["id"]) is not None:
            print(f"  - {data['id']} (exists)")
            continue
        session.add(Program(**data))
        inserted += 1
        print(f"  ✓ {data['id']}")
    session.commit()
    return inserted


def main() -> None:
    """Create tables if needed and seed the catalog."""
    init_db()

    print("Seeding programs...")
    with Session(engine) as session:
        inserted = seed(session)

    print(f"\nInserted {inserted} of {len(DEFAULT_PROGRAMS)} programs")


if __name__ == "__main__":
    main()
