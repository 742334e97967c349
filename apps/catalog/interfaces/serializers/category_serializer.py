"""
Category serializers.

Field rules (length, blank names) belong to the Category entity; these
serializers only check the request shape.
"""
from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class CategoryCreateSerializer(serializers.Serializer):
    """Serializer for category creation."""
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    # An explicit default keeps form payloads from turning a missing box into False
    is_active = serializers.BooleanField(required=False, default=True)


class CategoryUpdateSerializer(serializers.Serializer):
    """Serializer for category update."""
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    # None leaves the current status untouched
    is_active = serializers.BooleanField(required=False, allow_null=True, default=None)
