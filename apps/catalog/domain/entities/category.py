"""
Category entity.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import AggregateRoot, ValidationError
from shared.domain import validation

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


@dataclass(eq=False)
class Category(AggregateRoot):
    """Catalog category. Validates itself on creation and on every update."""
    name: Optional[str]
    description: Optional[str]
    is_active: bool = True

    def __post_init__(self):
        self._validate()

    def update(self, name: Optional[str], description: Optional[str] = None) -> None:
        """Rename the category and, when given, replace its description.

        A rejected update leaves the category as it was.
        """
        previous = (self.name, self.description)
        self.name = name
        if description is not None:
            self.description = description
        try:
            self._validate()
        except ValidationError:
            self.name, self.description = previous
            raise

    def activate(self) -> None:
        """Activate the category."""
        self.is_active = True

    def deactivate(self) -> None:
        """Deactivate the category."""
        self.is_active = False

    def _validate(self) -> None:
        # Order matters: the first failing rule decides the message.
        validation.not_null_or_empty(
            self.name, 'Name', message='Name should not be empty or null'
        )
        validation.min_length(
            self.name, NAME_MIN_LENGTH, 'Name',
            message=f'Name should be at leats {NAME_MIN_LENGTH} characters long',
        )
        validation.max_length(
            self.name, NAME_MAX_LENGTH, 'Name',
            message=f'Name should be less or equal {NAME_MAX_LENGTH} characters long',
        )
        validation.not_null(self.description, 'Description')
        validation.max_length(
            self.description, DESCRIPTION_MAX_LENGTH, 'Description',
            message='Description should be less or equal 10.000 characters long',
        )
