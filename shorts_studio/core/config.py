"""Configuration and setup for Shorts Script Studio"""

import os
import json
from dotenv import load_dotenv
from google.oauth2 import service_account

# Load environment variables
load_dotenv()

# Gemini Configuration
GEMINI_API_KEY = os.getenv('GEMINI_API_KEY', '')
GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-2.5-flash')

# Vertex AI Configuration (used instead of an API key when enabled)
USE_VERTEX_AI = os.getenv('GOOGLE_GENAI_USE_VERTEXAI', 'false').lower() == 'true'
PROJECT_ID = os.getenv('GCP_PROJECT_ID')
LOCATION = os.getenv('GOOGLE_CLOUD_REGION', 'us-central1')

# Logging Configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Script Constraints
SCRIPT_MIN_LENGTH = 250  # characters, inclusive
SCRIPT_MAX_LENGTH = 400  # characters, inclusive

# Retry Configuration
MAX_GENERATION_ATTEMPTS = 3
SHORTFALL_THRESHOLD_FOR_RETRY = 50  # at or below: adjust prompt, above: ask for more info
EXCESS_THRESHOLD_FOR_RETRY = 50

# LLM call settings per agent
SCRIPT_LLM_CONFIG = {
    "max_output_tokens": 1024,
    "temperature": 1.0,
}

HEARING_LLM_CONFIG = {
    "max_output_tokens": 256,
    "temperature": 0.7,
}

ANALYSIS_LLM_CONFIG = {
    "max_output_tokens": 512,
    "temperature": 0.2,
}

# Reference video lookup
YOUTUBE_OEMBED_URL = "https://www.youtube.com/oembed"
YOUTUBE_REQUEST_TIMEOUT = 10.0  # seconds

# API Configuration
API_TITLE = "Shorts Script Studio"
API_VERSION = "1.0.0"


def is_llm_configured() -> bool:
    """Whether a live Gemini client can be built from the environment"""
    if USE_VERTEX_AI:
        return bool(PROJECT_ID)
    return bool(GEMINI_API_KEY)


_CREDENTIALS = None


def get_credentials():
    """Load Vertex AI service account credentials from the environment

    Reads the JSON blob in `credentials_dict`. Returns None when it is not set,
    in which case the Google client falls back to application default credentials.
    """
    global _CREDENTIALS
    if _CREDENTIALS is not None:
        return _CREDENTIALS

    credentials_json = os.getenv('credentials_dict')
    if not credentials_json:
        return None

    credentials_info = json.loads(credentials_json)
    _CREDENTIALS = service_account.Credentials.from_service_account_info(
        credentials_info,
        scopes=['https://www.googleapis.com/auth/cloud-platform']
    )
    return _CREDENTIALS
