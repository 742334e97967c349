"""
Catalog API v1 URLs.
"""
from django.urls import path

from .views import CategoryCreateView, CategoryDetailView

urlpatterns = [
    path('categories/', CategoryCreateView.as_view(), name='category-create'),
    path('categories/<uuid:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
]
