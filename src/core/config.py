"""
Configuration constants and environment setup.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# GOOGLE OAUTH CREDENTIALS (from environment)
# =============================================================================

GOOGLE_CLIENT_ID = os.environ.get("GOOGLE_CLIENT_ID", "")
GOOGLE_CLIENT_SECRET = os.environ.get("GOOGLE_CLIENT_SECRET", "")
REDIRECT_URI = os.environ.get("REDIRECT_URI", "")

SCOPES = [
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/calendar.events",
    "https://www.googleapis.com/auth/gmail.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
    "https://www.googleapis.com/auth/documents.readonly",
    "https://www.googleapis.com/auth/spreadsheets.readonly",
]

# =============================================================================
# GOOGLE ENDPOINTS
# =============================================================================

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
CALENDAR_API_BASE_URL = "https://www.googleapis.com/calendar/v3"
GMAIL_API_BASE_URL = "https://gmail.googleapis.com/gmail/v1"
DRIVE_API_BASE_URL = "https://www.googleapis.com/drive/v3"
DOCS_API_BASE_URL = "https://docs.googleapis.com/v1"
SHEETS_API_BASE_URL = "https://sheets.googleapis.com/v4"

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

CALENDAR_ID = "primary"
DEFAULT_TIMEZONE = os.environ.get("DEFAULT_TIMEZONE", "Asia/Seoul")
DEFAULT_MAX_EVENTS = 10
DEFAULT_REMINDER_METHOD = "popup"

# Trigger substrings per event type. Types are tried in this order and the
# first substring contained in the text wins.
TYPE_RULES = {
    "family": (
        "가족",
        "가족으로",
        "부모님",
        "엄마",
        "아빠",
        "아들",
        "딸",
        "할머니",
        "할아버지",
        "형제",
        "명절",
    ),
    "work": (
        "회의",
        "미팅",
        "업무",
        "출근",
        "프로젝트",
        "발표",
        "회사",
        "마감",
        "면접",
        "출장",
    ),
    "self-improvement": (
        "공부",
        "운동",
        "독서",
        "강의",
        "학습",
        "자기계발",
        "헬스",
        "요가",
        "스터디",
    ),
    "personal": (
        "약속",
        "친구",
        "병원",
        "쇼핑",
        "개인",
        "데이트",
        "취미",
        "휴식",
    ),
}

# Google Calendar event colorId per event type
COLOR_MAPPING = {
    "self-improvement": "2",
    "personal": "1",
    "work": "6",
    "family": "5",
}

# =============================================================================
# API CONFIGURATION
# =============================================================================

SERVICE_NAME = "Google Workspace OAuth"
API_VERSION = "1.0.0"
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("PORT", "3000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

_timeout = os.environ.get("UPSTREAM_TIMEOUT_SECONDS", "")
UPSTREAM_TIMEOUT_SECONDS = float(_timeout) if _timeout else None
