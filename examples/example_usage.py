"""Example: use the store and services directly (without Flask).

Goal: controllers are a thin layer; the roster logic lives in RosterStore and the services.
"""

import importlib

from config import get_settings_module

from src.school_roster.school_roster.container import build_container
from src.school_roster.school_roster.core.enums import Collection


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(blob_backend=settings.BLOB_BACKEND, data_dir=settings.DATA_DIR, db_config=settings.DB_CONFIG)

    store = container.roster_store
    student = store.add_student("John Doe", "Grade 10")
    container.attendance_service.mark(Collection.STUDENTS, student.id, "2025-03-15", True)

    print(container.dashboard_service.build_summary())
    print(container.attendance_service.get_sheet("2025-03-15"))


if __name__ == "__main__":
    main()
