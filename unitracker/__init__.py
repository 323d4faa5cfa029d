"""
UniTracker: a study tracker backend.

Tasks on a Kanban board, notes, study sessions, subjects, preferences,
dashboard stats and a consistent timer model, served over a JSON API.
"""

__version__ = "0.1.0"
