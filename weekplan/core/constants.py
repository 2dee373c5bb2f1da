"""
FILE: weekplan/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - DEFAULT_BUCKETS: The seven day buckets in display order
  - CLIPBOARD_COPY / CLIPBOARD_CUT: Clipboard mode tags
  - FORM_FIELDS: Editable task fields
  - FOLDER_TARGET: Drop target name for the billing folder
  - DEMO_WEEK: Seed data for the demo planner
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Centralized constants to avoid magic strings
  - Bucket names are supplied by the presentation layer; these are defaults
"""

# Bucket (day) constants
DEFAULT_BUCKETS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Clipboard mode constants
CLIPBOARD_COPY = "copy"
CLIPBOARD_CUT = "cut"

# Edit form fields
FIELD_TITLE = "title"
FIELD_DESCRIPTION = "description"
FIELD_POINTS = "points"
FORM_FIELDS = (FIELD_TITLE, FIELD_DESCRIPTION, FIELD_POINTS)

# Drop target name reserved for the folder in UI commands
FOLDER_TARGET = "folder"

# Demo week shown on first launch
DEMO_WEEK = {
    "Monday": [
        {"id": 1, "title": "Team meeting", "description": "9am - weekly sync", "points": 2},
        {"id": 2, "title": "Requirements analysis", "description": "Gather client requirements", "points": 5},
    ],
    "Tuesday": [
        {"id": 3, "title": "UI design", "description": "Create the mockups", "points": 8},
        {"id": 4, "title": "Code review", "description": "Review pending PRs", "points": 3},
    ],
    "Wednesday": [
        {"id": 5, "title": "API development", "description": "Backend endpoints", "points": 13},
    ],
    "Thursday": [
        {"id": 6, "title": "Functional tests", "description": "Acceptance tests", "points": 5},
        {"id": 7, "title": "Documentation", "description": "Update the technical docs", "points": 3},
    ],
    "Friday": [
        {"id": 8, "title": "Deployment", "description": "Release v1.2 to production", "points": 8},
    ],
    "Saturday": [],
    "Sunday": [],
}
