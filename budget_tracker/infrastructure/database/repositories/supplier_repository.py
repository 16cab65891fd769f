"""
SQLAlchemy implementation of SupplierRepository.
"""
from .base_repository import SQLAlchemyNamedRepository
from ....application.interfaces.repositories import SupplierRepository
from ....domain.entities.supplier import Supplier
from ..models.supplier_model import SupplierModel


class SQLAlchemySupplierRepository(SQLAlchemyNamedRepository[Supplier, SupplierModel], SupplierRepository):
    """SQLAlchemy implementation of supplier repository."""

    model_class = SupplierModel
