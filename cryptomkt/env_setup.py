"""Environment configuration setup utilities.

This module provides functions for loading environment variables from .env files
and configuring the SDK for local development.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from cryptomkt.helpers import DEFAULT_DOMAIN

log = logging.getLogger(__name__)


def setup_environment() -> tuple[str, str, str]:
    """Load and return environment variables for CryptoMkt API configuration.

    Loads environment variables from a .env file in the working directory if
    present, otherwise falls back to system environment variables. Reads
    environment-specific variables based on the ENVIRONMENT variable
    (defaults to 'production').

    Returns:
        Tuple:
            - domain: The API domain (CRYPTOMKT_DOMAIN_<ENV>)
            - api_key: The API key (CRYPTOMKT_API_KEY_<ENV>)
            - secret_key: The secret key (CRYPTOMKT_SECRET_KEY_<ENV>)

    """
    env_file_path = Path(".env")
    if env_file_path.exists():
        log.info("Loading environment variables from .env file")
        load_dotenv(env_file_path)
    else:
        log.info(".env file not found. Falling back to environment variables.")

    environment = os.getenv("ENVIRONMENT", "production").upper()
    log.info("Using %s environment", environment.lower())

    domain = os.environ.get(f"CRYPTOMKT_DOMAIN_{environment}", DEFAULT_DOMAIN)
    api_key = os.environ.get(f"CRYPTOMKT_API_KEY_{environment}", "your-api-key")
    secret_key = os.environ.get(
        f"CRYPTOMKT_SECRET_KEY_{environment}", "your-secret-key"
    )

    return domain, api_key, secret_key
