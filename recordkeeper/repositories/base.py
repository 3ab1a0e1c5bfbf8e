"""
Base repository pattern implementation for in-memory record keeping.

This module provides a generic keyed repository that can be extended by
specific record repositories. Records are kept in an ordered list; each
record is addressed by one designated key field. Keys are not required to
be unique: every key-based operation targets the first match in insertion
order.
"""

from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Type, TypeVar, Union
import logging

from pydantic import BaseModel

from recordkeeper.exceptions import RecordNotFoundError

# Type variables for the key and the record model
K = TypeVar('K')
V = TypeVar('V', bound=BaseModel)

logger = logging.getLogger(__name__)

class KeyedRepository(Generic[K, V]):
    """
    Generic in-memory repository for keyed records.

    This class provides common CRUD operations for any pydantic record model.
    It can be extended by specific record repositories to add custom queries.

    Attributes:
        model (Type[V]): Record model class
        key_field (str): Name of the field used as the record key
        warn_on_duplicate_keys (bool): Log a warning when a record is
            inserted under a key that is already present
    """

    def __init__(
        self,
        model: Type[V],
        key_field: str,
        records: Optional[Iterable[V]] = None,
        warn_on_duplicate_keys: bool = True,
    ):
        """
        Initialize the repository with a record model and key field.

        Args:
            model (Type[V]): Record model class
            key_field (str): Name of the key field on the model
            records (Iterable[V]): Optional initial records, kept in order
            warn_on_duplicate_keys (bool): Warn when inserting a duplicate key
        """
        if key_field not in model.model_fields:
            raise ValueError(f"{model.__name__} has no field named {key_field!r}")
        self.model = model
        self.key_field = key_field
        self.warn_on_duplicate_keys = warn_on_duplicate_keys
        self._records: List[V] = []
        for record in records or ():
            self.insert(record)

    def key_of(self, record: V) -> K:
        """Return the key of a record."""
        return getattr(record, self.key_field)

    def insert(self, record: V) -> V:
        """
        Append a record to the end of the repository.

        No constraints are checked; duplicate keys are accepted.

        Args:
            record (V): Record to insert

        Returns:
            V: The inserted record
        """
        key = self.key_of(record)
        if self.warn_on_duplicate_keys and key in self:
            logger.warning(
                f"Duplicate {self.model.__name__} key {key!r}; "
                f"only the first match is reachable by key"
            )
        self._records.append(record)
        logger.debug(f"Inserted {self.model.__name__} with key {key!r}")
        return record

    def create(self, data: Union[Dict[str, Any], BaseModel]) -> V:
        """
        Build a record from field values and insert it.

        Args:
            data: Mapping or pydantic payload of field values

        Returns:
            V: Created record
        """
        if isinstance(data, BaseModel):
            data = data.model_dump()
        return self.insert(self.model(**data))

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[V]:
        """
        Get all records in insertion order.

        Args:
            skip (int): Number of records to skip
            limit (int): Maximum number of records to return, all if None

        Returns:
            List[V]: New list of records; empty when the repository is empty

        Raises:
            ValueError: If skip or limit is negative
        """
        if skip < 0 or (limit is not None and limit < 0):
            raise ValueError(f"skip and limit must be non-negative, got skip={skip} limit={limit}")
        end = None if limit is None else skip + limit
        return self._records[skip:end]

    def is_empty(self) -> bool:
        return not self._records

    def get_by_key(self, key: K) -> Optional[V]:
        """
        Get the first record whose key equals ``key``.

        Matching is exact equality; there is no partial or case-insensitive
        matching.

        Args:
            key (K): Key value

        Returns:
            Optional[V]: Record if found, None otherwise
        """
        return self.find(lambda record: self.key_of(record) == key)

    def get_or_raise(self, key: K) -> V:
        """
        Get a record by key, raising if it does not exist.

        Raises:
            RecordNotFoundError: If no record has the key
        """
        record = self.get_by_key(key)
        if record is None:
            raise RecordNotFoundError(key, self.model.__name__)
        return record

    def find(self, predicate: Callable[[V], bool]) -> Optional[V]:
        """Return the first record satisfying ``predicate``, or None."""
        for record in self._records:
            if predicate(record):
                return record
        return None

    def filter(self, predicate: Callable[[V], bool]) -> List[V]:
        """Return every record satisfying ``predicate``, in insertion order."""
        return [record for record in self._records if predicate(record)]

    def count(self, key: K) -> int:
        """Return how many records share ``key``."""
        return sum(1 for record in self._records if self.key_of(record) == key)

    def update(self, key: K, data: Union[Dict[str, Any], BaseModel]) -> Optional[V]:
        """
        Update a record by key.

        The first record with the key is modified in place. Only the fields
        present in ``data`` are written (for a pydantic payload, the fields
        explicitly set on it); names that are not model fields are ignored.
        The merged values are validated before anything is written, so an
        invalid payload leaves the record unchanged.

        Args:
            key (K): Key of the record to update
            data: Mapping or pydantic payload of field values to update

        Returns:
            Optional[V]: Updated record if found, None otherwise

        Raises:
            pydantic.ValidationError: If the merged values are invalid
        """
        record = self.get_by_key(key)
        if record is None:
            logger.debug(f"No {self.model.__name__} with key {key!r} to update")
            return None

        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        changes = {name: value for name, value in data.items() if name in self.model.model_fields}

        validated = self.model.model_validate({**record.model_dump(), **changes})
        for name in changes:
            setattr(record, name, getattr(validated, name))
        logger.debug(f"Updated {self.model.__name__} with key {key!r}: {sorted(changes)}")
        return record

    def delete(self, key: K) -> bool:
        """
        Delete a record by key.

        Only the first record with the key is removed.

        Args:
            key (K): Key of the record to delete

        Returns:
            bool: True if deleted, False if not found
        """
        for index, record in enumerate(self._records):
            if self.key_of(record) == key:
                del self._records[index]
                logger.debug(f"Deleted {self.model.__name__} with key {key!r}")
                return True
        return False

    def search(self, query: str) -> List[V]:
        """
        Search for records matching a query string.

        This is a basic implementation matching the key rendered as text. It
        should be overridden by specific repositories to search the fields
        that make sense for their records.

        Args:
            query (str): Search query string

        Returns:
            List[V]: List of matching records
        """
        needle = query.lower()
        return self.filter(lambda record: needle in str(self.key_of(record)).lower())

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._records))

    def __contains__(self, key: object) -> bool:
        return any(self.key_of(record) == key for record in self._records)
