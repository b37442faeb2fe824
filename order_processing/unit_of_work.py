"""
Unit of Work - transactional scope over a SQLAlchemy session
"""
import logging
from typing import Callable, Optional
from sqlalchemy.orm import Session, SessionTransaction

logger = logging.getLogger(__name__)


class SqlUnitOfWork:
    """
    One session plus one explicit transaction.
    
    Use as a context manager: leaving the block always closes the session,
    rolling back any transaction that was neither committed nor rolled back.
    """
    
    def __init__(self, session_factory: Callable[[], Session]):
        self.session: Session = session_factory()
        self.transaction: Optional[SessionTransaction] = None
    
    def begin(self) -> None:
        """Start the transaction"""
        self.transaction = self.session.begin()
    
    def commit(self) -> None:
        """Commit the current transaction, if any"""
        if self.transaction is not None:
            self.transaction.commit()
            self.transaction = None
    
    def rollback(self) -> None:
        """Roll back the current transaction, if any"""
        if self.transaction is not None:
            self.transaction.rollback()
            self.transaction = None
    
    def close(self) -> None:
        """Release the session"""
        if self.transaction is not None and self.transaction.is_active:
            logger.warning("Closing unit of work with an open transaction, rolling back")
            self.rollback()
        self.transaction = None
        self.session.close()
    
    def __enter__(self) -> "SqlUnitOfWork":
        return self
    
    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class SqlUnitOfWorkFactory:
    """Creates a fresh unit of work per call"""
    
    def __init__(self, session_factory: Callable[[], Session]):
        if session_factory is None:
            raise ValueError("session_factory is required")
        self._session_factory = session_factory
    
    def create(self) -> SqlUnitOfWork:
        return SqlUnitOfWork(self._session_factory)
