"""
Configuration settings for the AIOps review dashboard.

Centralized configuration for the API client, dashboard copy and logging.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Backend API
API_BASE_URL = os.getenv("AIOPS_API_BASE_URL", "http://localhost:8000")
REVIEWS_PATH = "/api/reviews/"
ASK_PATH = "/api/ask/"

# No timeout unless explicitly configured
_timeout = os.getenv("AIOPS_REQUEST_TIMEOUT", "").strip()
REQUEST_TIMEOUT_SECONDS = float(_timeout) if _timeout else None

# Dashboard copy
DASHBOARD_TITLE = "SLaundry AIOps Dashboard"
DASHBOARD_SUBTITLE = "Customer feedback, Sentiment Analysis, and AI insights."
DASHBOARD_BADGES = ("Snoonu Internal", "MVP · Local")

# Preset questions offered under the ask box
QUICK_QUESTIONS = [
    "Why are customers unhappy with delivery times?",
    "Summarize the main complaints from the last week.",
    "What are customers most satisfied with?",
    "Which aspects have the most negative sentiment?",
    "Are there any recurring issues with drivers?",
]

# Review table
TABLE_HEIGHT_PX = 420

# Logging
LOG_LEVEL = os.getenv("AIOPS_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "aiops_dashboard.log"
