"""
Basic package tests to ensure FastValidator can be imported and basic functionality works.
"""

import fast_validator


def test_package_version():
    """Test that package version is accessible."""
    assert hasattr(fast_validator, '__version__')
    assert fast_validator.__version__ == "0.1.0"


def test_package_metadata():
    """Test that all expected metadata is present."""
    assert fast_validator.__author__ == "Patrik Mojzis"
    assert fast_validator.__license__ == "MIT"
    assert fast_validator.__url__ == "https://github.com/patrikmojzis/fast-validator"


def test_public_surface():
    for name in fast_validator.__all__:
        assert hasattr(fast_validator, name), name
