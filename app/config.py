"""
Configuration settings for the URL content summarizer application.
"""

import os
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "URL Content Summarizer"
    APP_VERSION = "0.2.0"

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Default models
    MODEL_PROVIDER = os.getenv("MODEL_PROVIDER", "groq")
    DEFAULT_SUMMARY_MODEL = os.getenv("DEFAULT_SUMMARY_MODEL", "llama-3.3-70b-versatile")
    TEMPERATURE = 0.5

    # Network timeouts (seconds)
    COMPLETION_TIMEOUT = float(os.getenv("COMPLETION_TIMEOUT", "60"))
    PAGE_FETCH_TIMEOUT = float(os.getenv("PAGE_FETCH_TIMEOUT", "20"))
    HEAD_PROBE_TIMEOUT = float(os.getenv("HEAD_PROBE_TIMEOUT", "5"))
    TRANSCRIPT_TIMEOUT = float(os.getenv("TRANSCRIPT_TIMEOUT", "20"))
    MAX_RESPONSE_BYTES = int(os.getenv("MAX_RESPONSE_BYTES", str(25_000_000)))

    # Summarization pipeline defaults
    MAX_CHUNK_CHARS = int(os.getenv("MAX_CHUNK_CHARS", "3000"))
    MAX_CONCURRENT = int(os.getenv("MAX_CONCURRENT", "3"))
    BATCH_DELAY_MS = int(os.getenv("BATCH_DELAY_MS", "500"))
    COMBINE_THRESHOLD_CHARS = int(os.getenv("COMBINE_THRESHOLD_CHARS", "6000"))
    EXTRACTION_TRUNCATE_CHARS = int(os.getenv("EXTRACTION_TRUNCATE_CHARS", "100000"))
    COMPLETION_TRUNCATE_CHARS = int(os.getenv("COMPLETION_TRUNCATE_CHARS", "10000"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs"))
    LOG_FILE = "urlsummarizerlogger.log"

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # Validate required environment variables
        if not cls.GROQ_API_KEY:
            print("WARNING: GROQ_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
