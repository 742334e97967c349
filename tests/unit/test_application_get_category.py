"""Unit tests for GetCategoryUseCase."""
from uuid import uuid4

import pytest

from apps.catalog.application.dtos.category_dto import GetCategoryDTO
from apps.catalog.application.use_cases import GetCategoryUseCase
from apps.catalog.domain.exceptions import CategoryNotFoundError
from shared.domain.exceptions import EntityNotFoundError


@pytest.mark.asyncio
async def test_get_category(repository_mock, category):
    repository_mock.get_by_id.return_value = category
    use_case = GetCategoryUseCase(category_repository=repository_mock)

    output = await use_case.execute(GetCategoryDTO(id=category.id))

    repository_mock.get_by_id.assert_awaited_once_with(category.id)
    assert output.id == category.id
    assert output.name == category.name
    assert output.description == category.description
    assert output.is_active == category.is_active
    assert output.created_at == category.created_at


@pytest.mark.asyncio
async def test_not_found_when_category_does_not_exist(repository_mock):
    category_id = uuid4()
    error = CategoryNotFoundError(category_id)
    repository_mock.get_by_id.side_effect = error
    use_case = GetCategoryUseCase(category_repository=repository_mock)

    with pytest.raises(EntityNotFoundError) as exc_info:
        await use_case.execute(GetCategoryDTO(id=category_id))

    assert exc_info.value is error
    assert exc_info.value.message == f"Category with id '{category_id}' not found"
    repository_mock.get_by_id.assert_awaited_once_with(category_id)
