# studyhub/adapters/outbound/persistence/repositories/base_repository.py (async version)

"""
Async Base Repository

Generic CRUD operations for SQLAlchemy models, bound to one AsyncSession.

Handles:
- Get single records by ID
- Create and update records
- Existence checks

Implements uniform logging and error handling for database operations.
"""

from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.future import select
import logging

from studyhub.adapters.outbound.persistence.models.base_model import Base
from studyhub.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException,
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)

# Configure logger
logger = logging.getLogger(__name__)


class AsyncCRUDBase(Generic[ModelType]):
    """
    Generic asynchronous CRUD base class.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the repository with an SQLAlchemy model and a session.

        Args:
            model: SQLAlchemy model class associated with this repository
            db: Async database session used by every operation
        """
        self.model = model
        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    @staticmethod
    def _as_dict(obj_in: Union[BaseModel, Dict[str, Any]], exclude_unset: bool = False) -> Dict[str, Any]:
        if isinstance(obj_in, dict):
            return dict(obj_in)
        return obj_in.model_dump(exclude_unset=exclude_unset)

    def _is_unique_violation(self, error: IntegrityError) -> bool:
        error_msg = str(error).lower()
        return "unique" in error_msg or "duplicate" in error_msg

    async def get(self, id: Any) -> Optional[ModelType]:
        """Retrieve an object by ID."""
        try:
            query = select(self.model).where(self.model.id == id)
            result = await self.db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error fetching {self.model.__name__}", original_error=e
            )

    async def exists(self, **filters) -> bool:
        """Check if a record exists matching the given filters."""
        try:
            query = select(self.model)
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

            result = await self.db.execute(query.limit(1))
            return result.scalars().first() is not None
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking existence of {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error checking existence of {self.model.__name__}", original_error=e
            )

    async def create(self, data: Union[BaseModel, Dict[str, Any]]) -> ModelType:
        """Create a new record."""
        try:
            db_obj = self.model(**self._as_dict(data))

            # Add and persist in database
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} created with ID: {db_obj.id}")
            return db_obj

        except IntegrityError as e:
            await self.db.rollback()
            if self._is_unique_violation(e):
                self.logger.warning(f"Attempt to create duplicate {self.model.__name__}")
                raise ResourceAlreadyExistsException(
                    detail=f"{self.model.__name__} with these data already exists"
                )
            self.logger.error(f"Integrity error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error creating {self.model.__name__}", original_error=e
            )

    async def update(self, db_obj: ModelType, data: Union[BaseModel, Dict[str, Any]]) -> ModelType:
        """
        Update an existing record.

        Args:
            db_obj: Existing database object to update
            data: New data to apply (schema or dict)

        Returns:
            Updated model instance

        Raises:
            ResourceAlreadyExistsException: If update violates unique constraints
            DatabaseOperationException: For other database errors
        """
        try:
            update_data = self._as_dict(data, exclude_unset=True)

            # Apply updates to existing object
            for field, value in update_data.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)

            # Save changes to database
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} with ID {db_obj.id} updated")
            return db_obj

        except IntegrityError as e:
            await self.db.rollback()
            if self._is_unique_violation(e):
                self.logger.warning(f"Uniqueness violation updating {self.model.__name__}")
                raise ResourceAlreadyExistsException(
                    detail=f"Could not update {self.model.__name__}: value already exists"
                )
            self.logger.error(f"Integrity error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                message=f"Error updating {self.model.__name__}", original_error=e
            )
