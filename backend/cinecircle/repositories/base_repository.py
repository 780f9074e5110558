import logging
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy import case, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from cinecircle.db import Base
from cinecircle.core.exceptions import ConflictException, StoreFailureException

ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)

class BaseRepository(Generic[ModelType]):
    """CRUD over one table; every write commits"""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def commit(self, conflict_message: str = "Already exists") -> None:
        """Commit, translating constraint violations into domain errors"""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity error on {self.model.__tablename__}: {str(e.orig)}")
            raise ConflictException(conflict_message)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error on {self.model.__tablename__}: {str(e)}")
            raise StoreFailureException()

    def get(self, id: Any) -> Optional[ModelType]:
        """Get by primary key (a tuple for composite keys)"""
        return self.db.get(self.model, id)

    def create(self, obj_in: Dict[str, Any], conflict_message: str = "Already exists") -> ModelType:
        """Create new object"""
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        self.commit(conflict_message)
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Dict[str, Any], conflict_message: str = "Already exists") -> ModelType:
        """Update object"""
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        self.commit(conflict_message)
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ModelType) -> None:
        """Delete object"""
        self.db.delete(db_obj)
        self.commit()

    def delete_where(self, **kwargs) -> int:
        """Bulk delete rows matching the filters, returns the row count"""
        deleted = self.db.query(self.model).filter_by(**kwargs).delete(synchronize_session=False)
        self.commit()
        return deleted

    def filter_by(self, **kwargs) -> List[ModelType]:
        """Filter by multiple conditions"""
        return self.db.query(self.model).filter_by(**kwargs).all()

    def filter_one_by(self, **kwargs) -> Optional[ModelType]:
        """Filter by multiple conditions and return first"""
        return self.db.query(self.model).filter_by(**kwargs).first()

    def count(self, **kwargs) -> int:
        return self.db.query(self.model).filter_by(**kwargs).count()

    def adjust_counter(self, field: str, amount: int, **kwargs) -> None:
        """Atomically add ``amount`` to a counter column, never going below zero.

        The arithmetic runs inside a single UPDATE so concurrent writers
        cannot lose each other's increments.
        """
        column = getattr(self.model, field)
        if amount >= 0:
            new_value = column + amount
        else:
            new_value = case((column + amount > 0, column + amount), else_=0)
        statement = (
            update(self.model)
            .filter_by(**kwargs)
            .values({field: new_value})
            .execution_options(synchronize_session=False)
        )
        try:
            self.db.execute(statement)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Counter update failed on {self.model.__tablename__}.{field}: {str(e)}")
            raise StoreFailureException()
        self.commit()
