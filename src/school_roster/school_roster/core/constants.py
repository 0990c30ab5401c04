"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

STUDENTS_KEY = "students"
TEACHERS_KEY = "teachers"

DATE_KEY_FORMAT = "%Y-%m-%d"

DEFAULT_DATA_DIR = "data"
BLOB_FILE_SUFFIX = ".json"
