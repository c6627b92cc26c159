"""Base repository with shared CRUD over an EntityStore.

Eliminates duplicated find/create/update/delete logic across repositories.
Subclasses specify model_class, create_schema, id_column and
required_fields; the base provides the common implementations.

Every record handed out is a deep copy, so callers may mutate what they
receive without touching stored state.
"""

import copy
from typing import Any, Callable, Generic, List, Mapping, Optional, Tuple, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel

from ..exceptions import MissingRequiredFieldError, ValidationError
from ..schemas.base import EntityModel
from ..store import EntityStore

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = Union[BaseModel, Mapping[str, Any]]


def _first_error_field(exc: pydantic.ValidationError) -> Optional[str]:
    errors = exc.errors()
    if errors and errors[0].get("loc"):
        return ".".join(str(part) for part in errors[0]["loc"])
    return None


class BaseRepository(Generic[ModelT]):
    """Shared repository logic for in-memory entities.

    Class variables to set in subclasses:
        model_class:     The stored pydantic model (e.g., Chat)
        create_schema:   Partial schema accepted by create() (e.g., ChatCreate)
        id_column:       Name of the key field (default "id")
        required_fields: Fields create() refuses to default
    """

    model_class: Type[ModelT]
    create_schema: Type[BaseModel]
    id_column: str = "id"
    required_fields: Tuple[str, ...] = ()

    def __init__(self, store: Optional[EntityStore[ModelT]] = None):
        self.store: EntityStore[ModelT] = store or EntityStore(self.entity_name)

    @property
    def entity_name(self) -> str:
        return self.model_class.__name__

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _copy(row: ModelT) -> ModelT:
        return row.model_copy(deep=True)

    def _copies(self, rows: List[ModelT]) -> List[ModelT]:
        return [self._copy(row) for row in rows]

    def _coerce(self, item: Payload) -> dict:
        """Turn a create payload into a dict of the fields the caller set.

        A stored model is taken whole, defaulted id and timestamp included.
        """
        if isinstance(item, EntityModel):
            data = item.model_dump()
        elif isinstance(item, BaseModel):
            data = item.model_dump(exclude_unset=True)
        else:
            try:
                data = self.create_schema.model_validate(dict(item)).model_dump(exclude_unset=True)
            except pydantic.ValidationError as e:
                raise ValidationError(
                    f"Invalid {self.entity_name} payload: {e.errors()[0]['msg']}",
                    field=_first_error_field(e),
                ) from e
        # Explicit None means "not given" so defaults still apply.
        return {key: value for key, value in data.items() if value is not None}

    def _build(self, data: Mapping[str, Any]) -> ModelT:
        """Validate *data* into a stored row that shares nothing with the caller."""
        try:
            return self.model_class.model_validate(copy.deepcopy(dict(data)))
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Invalid {self.entity_name}: {e.errors()[0]['msg']}",
                field=_first_error_field(e),
            ) from e

    def _new_row(self, item: Payload) -> ModelT:
        data = self._coerce(item)
        for field in self.required_fields:
            if field not in data:
                raise MissingRequiredFieldError(self.entity_name, field)
        return self._build(data)

    def _key_matches(self, entity_id: str) -> Callable[[ModelT], bool]:
        return lambda row: getattr(row, self.id_column) == entity_id

    def _changes(self, changes: Payload) -> dict:
        if isinstance(changes, BaseModel):
            return changes.model_dump(exclude_unset=True)
        return dict(changes)

    def _check_key_unchanged(self, entity_id: str, changes: Mapping[str, Any]) -> None:
        if self.id_column in changes and changes[self.id_column] != entity_id:
            raise ValidationError(
                f"{self.entity_name} {self.id_column} cannot change",
                field=self.id_column,
            )

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def find_all(self) -> List[ModelT]:
        """Snapshot of every row in insertion order."""
        return self._copies(list(self.store))

    def find_by_id(self, entity_id: str) -> Optional[ModelT]:
        """First row whose key equals *entity_id*, or None."""
        for row in self.store:
            if getattr(row, self.id_column) == entity_id:
                return self._copy(row)
        return None

    def create(self, item: Payload) -> ModelT:
        """Fill defaults, append, and return a copy of the new row.

        Raises MissingRequiredFieldError when a required field is absent.
        """
        row = self._new_row(item)
        self.store.append(row)
        return self._copy(row)

    def update(self, entity_id: str, changes: Payload) -> Optional[ModelT]:
        """Merge *changes* onto the row in place. Returns None if missing."""
        changes = self._changes(changes)
        self._check_key_unchanged(entity_id, changes)
        with self.store.lock:
            index = self.store.index_of(self._key_matches(entity_id))
            if index == -1:
                return None
            merged = {**self.store.get(index).model_dump(), **changes}
            row = self._build(merged)
            self.store.replace(index, row)
            return self._copy(row)

    def delete(self, entity_id: str) -> Optional[ModelT]:
        """Remove and return the row, or None if missing."""
        with self.store.lock:
            index = self.store.index_of(self._key_matches(entity_id))
            if index == -1:
                return None
            return self._copy(self.store.pop(index))

    def save_many(self, items: List[Payload]) -> List[ModelT]:
        """Validate every item, then append them all in order.

        Missing ids are generated. Nothing is stored if any item is invalid.
        """
        rows = [self._new_row(item) for item in items]
        self.store.extend(rows)
        return self._copies(rows)
