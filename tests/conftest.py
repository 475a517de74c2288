"""
Pytest configuration and shared fixtures for FastValidator tests.
"""

import json

import pytest
from faker import Faker

from fast_validator import Validator
from fast_validator.core.localization import clear_cache

fake = Faker()


@pytest.fixture
def sample_data():
    """Provide sample data for tests."""
    return {
        "name": fake.name(),
        "email": fake.email(),
        "company": fake.company(),
    }


@pytest.fixture
def validator():
    return Validator()


@pytest.fixture
def lang_dir(tmp_path):
    """Language directory with a small Slovak catalog."""
    directory = tmp_path / "lang"
    directory.mkdir()
    (directory / "sk.json").write_text(json.dumps({
        "rules": {"required": "Pole :attribute je povinné."},
        "custom": {"users.*.email": "Každý používateľ potrebuje e-mail."},
    }), encoding="utf-8")
    return directory


@pytest.fixture(autouse=True)
def fresh_catalogs():
    clear_cache()
    yield
    clear_cache()
