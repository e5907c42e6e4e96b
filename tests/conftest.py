import pytest

from fieldcheck.core.registry import ValidatorRegistry


@pytest.fixture
def registry() -> ValidatorRegistry:
    return ValidatorRegistry()
