"""
Server-wide constants.
"""

PROJECT_NAME = "UniTracker"
API_PREFIX = "/api"
API_VERSION = "0.1.0"
SCHEMA_VERSION = "v1"
