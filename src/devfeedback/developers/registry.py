"""Developer registry: ordered in-memory mirror of the ``developers`` collection."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from devfeedback.database.store import Store
from devfeedback.errors import DuplicateDeveloperError
from devfeedback.logging.config import get_logger

logger = get_logger(__name__)

COLLECTION_NAME = "developers"


@dataclass(frozen=True)
class Developer:
    """A registered developer."""

    dev_id: str
    name: str
    project: str

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Developer":
        return cls(
            dev_id=document.get("devId") or "",
            name=document.get("name") or "",
            project=document.get("project") or "",
        )

    def to_document(self) -> Dict[str, Any]:
        return {"devId": self.dev_id, "name": self.name, "project": self.project}

    def describe(self) -> str:
        return f"Developer ID: {self.dev_id} | Name: {self.name} | Project: {self.project}"


class DeveloperRegistry:
    """
    Ordered list of developers, hydrated from the store on construction.

    Developers are kept in insertion order. Registration persists first and
    appends second, so a failed write leaves the in-memory list unchanged.
    """

    def __init__(self, store: Store, reject_duplicates: bool = False):
        """
        Initialize the registry and load existing developers.

        Args:
            store: Open store handle
            reject_duplicates: Refuse to register an ID that is already known

        Raises:
            StoreError: If the stored developers cannot be read
        """
        self.collection = store.collection(COLLECTION_NAME)
        self.reject_duplicates = reject_duplicates
        self._developers: List[Developer] = []
        self.hydrate()

    def hydrate(self) -> int:
        """
        Append every stored developer in storage order without re-persisting.

        Returns:
            Number of developers loaded
        """
        documents = self.collection.find()
        for document in documents:
            self._developers.append(Developer.from_document(document))
        logger.info(f"Loaded {len(documents)} developers from store")
        return len(documents)

    def add_developer(self, dev_id: str, name: str, project: str) -> Developer:
        """
        Register a developer at the tail of the list and persist it.

        Raises:
            DuplicateDeveloperError: If duplicates are rejected and the ID exists
            StoreError: If the write fails (nothing is appended)
        """
        if self.reject_duplicates and self.search_developer(dev_id) is not None:
            raise DuplicateDeveloperError(dev_id)

        developer = Developer(dev_id=dev_id, name=name, project=project)
        self.collection.insert_one(developer.to_document())
        self._developers.append(developer)
        logger.info(f"Added developer {dev_id} ({name}, {project})")
        return developer

    def display_developers(self) -> List[str]:
        """Formatted lines for every developer, in insertion order."""
        if not self._developers:
            return ["No developers found."]
        return [developer.describe() for developer in self._developers]

    def search_developer(self, dev_id: str) -> Optional[Developer]:
        """Return the first-inserted developer with this ID, or None."""
        for developer in self._developers:
            if developer.dev_id == dev_id:
                return developer
        return None

    def __iter__(self) -> Iterator[Developer]:
        return iter(self._developers)

    def __len__(self) -> int:
        return len(self._developers)

    def __contains__(self, dev_id: object) -> bool:
        return isinstance(dev_id, str) and self.search_developer(dev_id) is not None
