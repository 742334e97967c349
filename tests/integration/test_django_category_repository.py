"""Integration tests for DjangoCategoryRepository and DjangoUnitOfWork.

Coroutines are driven through async_to_sync so the ORM runs on the test
thread and sees the test transaction.
"""
from uuid import uuid4

import pytest
from asgiref.sync import async_to_sync

from apps.catalog.application.dtos.category_dto import CreateCategoryDTO, GetCategoryDTO, UpdateCategoryDTO
from apps.catalog.application.use_cases import CreateCategoryUseCase, GetCategoryUseCase, UpdateCategoryUseCase
from apps.catalog.domain.entities.category import Category
from apps.catalog.domain.exceptions import CategoryNotFoundError
from apps.catalog.infrastructure.models import CategoryModel
from apps.catalog.infrastructure.repositories import DjangoCategoryRepository
from shared.domain.exceptions import ValidationError
from shared.infrastructure.persistence import DjangoUnitOfWork

pytestmark = pytest.mark.django_db


@pytest.fixture
def unit_of_work():
    return DjangoUnitOfWork()


@pytest.fixture
def repository(unit_of_work):
    return DjangoCategoryRepository(unit_of_work)


class TestDjangoCategoryRepository:

    def test_insert_is_staged_until_commit(self, repository, unit_of_work, category):
        async_to_sync(repository.insert)(category)

        assert unit_of_work.has_pending
        assert not CategoryModel.objects.filter(id=category.id).exists()

        async_to_sync(unit_of_work.commit)()

        assert not unit_of_work.has_pending
        model = CategoryModel.objects.get(id=category.id)
        assert model.name == category.name
        assert model.description == category.description
        assert model.is_active == category.is_active
        assert model.created_at == category.created_at

    def test_get_by_id(self, repository, unit_of_work, category):
        async_to_sync(repository.insert)(category)
        async_to_sync(unit_of_work.commit)()

        loaded = async_to_sync(repository.get_by_id)(category.id)

        assert isinstance(loaded, Category)
        assert loaded == category
        assert loaded.name == category.name
        assert loaded.description == category.description
        assert loaded.is_active == category.is_active
        assert loaded.created_at == category.created_at

    def test_get_by_id_not_found(self, repository):
        category_id = uuid4()

        with pytest.raises(CategoryNotFoundError) as exc_info:
            async_to_sync(repository.get_by_id)(category_id)

        assert exc_info.value.entity_id == str(category_id)

    def test_update(self, repository, unit_of_work, category):
        async_to_sync(repository.insert)(category)
        async_to_sync(unit_of_work.commit)()

        category.update("Documentaries", "Real stories")
        category.deactivate()
        async_to_sync(repository.update)(category)
        async_to_sync(unit_of_work.commit)()

        model = CategoryModel.objects.get(id=category.id)
        assert model.name == "Documentaries"
        assert model.description == "Real stories"
        assert model.is_active is False

    def test_update_missing_row_fails_on_commit(self, repository, unit_of_work, category):
        async_to_sync(repository.update)(category)

        with pytest.raises(CategoryNotFoundError):
            async_to_sync(unit_of_work.commit)()

    def test_commit_is_atomic(self, repository, unit_of_work, category, category_name):
        async_to_sync(repository.insert)(category)
        async_to_sync(repository.update)(Category(category_name, "never stored"))

        with pytest.raises(CategoryNotFoundError):
            async_to_sync(unit_of_work.commit)()

        assert not CategoryModel.objects.filter(id=category.id).exists()


class TestUseCasesWithDjango:

    def test_create_then_get(self, repository, unit_of_work):
        created = async_to_sync(CreateCategoryUseCase(repository, unit_of_work).execute)(
            CreateCategoryDTO(name="Movie", description="A movie category")
        )

        fetched = async_to_sync(GetCategoryUseCase(repository).execute)(GetCategoryDTO(id=created.id))

        assert fetched == created

    def test_invalid_create_stores_nothing(self, repository, unit_of_work):
        with pytest.raises(ValidationError):
            async_to_sync(CreateCategoryUseCase(repository, unit_of_work).execute)(
                CreateCategoryDTO(name="ab", description="x")
            )

        assert CategoryModel.objects.count() == 0

    def test_update_then_get(self, repository, unit_of_work):
        created = async_to_sync(CreateCategoryUseCase(repository, unit_of_work).execute)(
            CreateCategoryDTO(name="Movie")
        )

        async_to_sync(UpdateCategoryUseCase(repository, unit_of_work).execute)(
            UpdateCategoryDTO(id=created.id, name="Series", is_active=False)
        )
        fetched = async_to_sync(GetCategoryUseCase(repository).execute)(GetCategoryDTO(id=created.id))

        assert fetched.name == "Series"
        assert fetched.description == ""
        assert fetched.is_active is False
        assert fetched.created_at == created.created_at
