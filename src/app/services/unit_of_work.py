from abc import ABC, abstractmethod

from src.app.repositories.waitlist_repository import IWaitlistRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - scopes one store interaction

    SQL stores buffer writes until commit(); stores whose API writes are
    durable on return (Notion) implement commit() and rollback() as no-ops.
    Leaving the context without commit() discards buffered writes.
    """

    # Initialized in __aenter__
    signups: IWaitlistRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        """Make buffered writes durable; raises DuplicateEmailError on conflict"""
        pass

    @abstractmethod
    async def rollback(self):
        pass
