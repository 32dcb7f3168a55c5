"""Test configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pytest import Config

# Load .env.test before the settings module is imported anywhere
env_test_file = Path(__file__).parent.parent / ".env.test"
if env_test_file.exists():
    load_dotenv(env_test_file, override=True)

os.environ["TESTING"] = "true"

from address_verifier.core.logging import configure_logging  # noqa: E402


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    # Configure logging for test environment
    configure_logging(testing=True)
