from .django_unit_of_work import DjangoUnitOfWork

__all__ = ['DjangoUnitOfWork']
