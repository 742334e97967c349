"""
Catalog API v1 views.
"""
from uuid import UUID

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.infrastructure.persistence import DjangoUnitOfWork
from ....application.use_cases import (
    CreateCategoryUseCase,
    GetCategoryUseCase,
    UpdateCategoryUseCase,
)
from ....application.dtos.category_dto import (
    CreateCategoryDTO,
    GetCategoryDTO,
    UpdateCategoryDTO,
)
from ....infrastructure.repositories import DjangoCategoryRepository
from ...serializers.category_serializer import (
    CategorySerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
)


@extend_schema(tags=['Categories'])
class CategoryCreateView(APIView):
    """Category create endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CategoryCreateSerializer,
        responses={201: CategorySerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        # Create use case
        unit_of_work = DjangoUnitOfWork()
        use_case = CreateCategoryUseCase(
            category_repository=DjangoCategoryRepository(unit_of_work),
            unit_of_work=unit_of_work,
        )

        # Execute
        input_dto = CreateCategoryDTO(**serializer.validated_data)
        output = async_to_sync(use_case.execute)(input_dto)

        return Response(CategorySerializer(output).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Categories'])
class CategoryDetailView(APIView):
    """Category detail endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Get category detail",
    )
    def get(self, request, category_id: UUID):
        use_case = GetCategoryUseCase(
            category_repository=DjangoCategoryRepository(DjangoUnitOfWork()),
        )
        output = async_to_sync(use_case.execute)(GetCategoryDTO(id=category_id))

        return Response(CategorySerializer(output).data)

    @extend_schema(
        request=CategoryUpdateSerializer,
        responses={200: CategorySerializer},
        summary="Update a category",
    )
    def put(self, request, category_id: UUID):
        serializer = CategoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        unit_of_work = DjangoUnitOfWork()
        use_case = UpdateCategoryUseCase(
            category_repository=DjangoCategoryRepository(unit_of_work),
            unit_of_work=unit_of_work,
        )

        input_dto = UpdateCategoryDTO(id=category_id, **serializer.validated_data)
        output = async_to_sync(use_case.execute)(input_dto)

        return Response(CategorySerializer(output).data)
