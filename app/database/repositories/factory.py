from app.config.settings import Settings
from app.database.connection import init_pool
from app.database.repositories.base import BaseDocumentRepository
from app.database.repositories.dynamodb_repository import DynamoDocumentRepository
from app.database.repositories.memory_repository import InMemoryDocumentRepository
from app.database.repositories.postgres_repository import PostgresDocumentRepository


class DocumentRepositoryFactory:
    """Creates the configured persistence backend."""

    BACKENDS: tuple[str, ...] = ("postgres", "dynamodb", "memory")

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentRepository:
        backend = settings.persistence_backend.lower()
        if backend == "postgres":
            init_pool(settings)
            return PostgresDocumentRepository()
        if backend == "dynamodb":
            return DynamoDocumentRepository(settings.dynamodb_table_name, settings.aws_region)
        if backend == "memory":
            return InMemoryDocumentRepository()
        raise ValueError(
            f"Unknown persistence backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
