"""Root conftest — shared test configuration."""

import os

# Tests never read a developer's .env values for these
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("CAREER_CODES", "[]")
os.environ.setdefault("CAREER_SALT", "test-salt")
os.environ.setdefault("SITE_URL", "https://example.test")
