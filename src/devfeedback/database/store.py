"""Store handle and document collections."""

from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional, Type

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from devfeedback.database.models import COLLECTIONS, Base
from devfeedback.errors import StoreError
from devfeedback.logging.config import get_logger

logger = get_logger(__name__)


def mask_url(url: str) -> str:
    """Hide the credentials part of a connection URL."""
    if "@" in url and "://" in url:
        scheme, rest = url.split("://", 1)
        return f"{scheme}://...@{rest.rsplit('@', 1)[1]}"
    return url


class Collection:
    """A named collection of documents supporting insert and full scan."""

    def __init__(self, store: "Store", name: str, model: Type[Base]):
        self.store = store
        self.name = name
        self.model = model

    def insert_one(self, document: Dict[str, Any]) -> None:
        """
        Persist a new document.

        Raises:
            StoreError: If the write fails
        """
        with self.store.session() as db:
            db.add(self.model.from_document(document))
        logger.debug(f"Inserted document into {self.name}: {document}")

    def find(self) -> List[Dict[str, Any]]:
        """
        Read every document in storage-native (insertion) order.

        Raises:
            StoreError: If the read fails
        """
        try:
            with self.store.session() as db:
                rows = db.query(self.model).order_by(self.model.id).all()
                return [row.to_document() for row in rows]
        except ValueError as e:
            # Raised by column type processors on externally edited values
            logger.error(f"Malformed document in {self.name}: {e}")
            raise StoreError(f"Malformed document in {self.name}: {e}") from e

    def count(self) -> int:
        with self.store.session() as db:
            return db.query(self.model).count()


class Store:
    """
    Handle to the persistent store.

    Opened once, handed to the developer registry and feedback log, and
    closed once. Use it as a context manager so the connection is released
    on every exit path:

        with Store(settings.database_url) as store:
            developers = DeveloperRegistry(store)
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "Store":
        """Create the engine and make sure both collections exist."""
        if self.is_open:
            return self

        kwargs: Dict[str, Any] = {"echo": self.echo}
        if self.database_url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.database_url or self.database_url == "sqlite://":
                # One shared connection, otherwise every session sees a fresh database
                kwargs["poolclass"] = StaticPool

        try:
            engine = create_engine(self.database_url, **kwargs)
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as e:
            logger.error(f"Failed to open store: {e}")
            raise StoreError(f"Failed to open store: {e}") from e

        self._engine = engine
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        logger.info(f"Opened store at {mask_url(self.database_url)}")
        return self

    def close(self) -> None:
        """Release the connection pool. Safe to call more than once."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Closed store")

    def __enter__(self) -> "Store":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Get a database session that commits on success.

        Any SQLAlchemy failure is rolled back and re-raised as StoreError.
        """
        if self._session_factory is None:
            raise StoreError("Store is not open")

        db = self._session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Store operation failed: {e}")
            raise StoreError(str(e)) from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def collection(self, name: str) -> Collection:
        """Get a collection by name (``developers`` or ``feedback``)."""
        try:
            model = COLLECTIONS[name]
        except KeyError:
            raise StoreError(f"Unknown collection: {name}") from None
        return Collection(self, name, model)

