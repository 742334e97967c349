from .category_serializer import (
    CategorySerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
)

__all__ = ['CategorySerializer', 'CategoryCreateSerializer', 'CategoryUpdateSerializer']
