"""
Pytest configuration and fixtures.
"""
from unittest.mock import AsyncMock

import pytest

from apps.catalog.domain.entities.category import Category
from apps.catalog.domain.repositories.category_repository import CategoryRepository
from shared.application.unit_of_work import UnitOfWork


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def category_name(faker):
    """A category name between 3 and 255 characters."""
    name = ""
    while len(name) < 3:
        name = faker.word()
    return name[:255]


@pytest.fixture
def category_description(faker):
    """A category description of at most 10,000 characters."""
    return faker.paragraph()[:10_000]


@pytest.fixture
def category(category_name, category_description):
    """A valid, active category."""
    return Category(category_name, category_description)


@pytest.fixture
def repository_mock():
    """Category repository double with awaitable methods."""
    return AsyncMock(spec=CategoryRepository)


@pytest.fixture
def unit_of_work_mock():
    """Unit of work double with an awaitable commit."""
    return AsyncMock(spec=UnitOfWork)
