"""
repositories/base.py
--------------------
Generic persistence base shared by every repository.

Column lists come from the model dataclass (``dataclasses.fields``), so one
INSERT/UPDATE writer serves every entity:

    class QuestionRepository(BaseRepository[Question]):
        model = Question        # table_name resolves to "questions"
"""

import re
import sqlite3
from collections.abc import Mapping
from dataclasses import fields
from typing import Any, Generic, Optional, Sequence, Type, TypeVar, Union

from db.connection import get_connection
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
M = TypeVar("M")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_CONSONANT_Y = re.compile(r"[^aeiou]y$")


def table_name_for(model: type) -> str:
    """
    Derive the table name for a model class.

    ``Question`` -> ``questions``, ``QuestionFollow`` -> ``question_follows``,
    ``Reply`` -> ``replies``.
    """
    name = _CAMEL_BOUNDARY.sub("_", model.__name__).lower()
    if _CONSONANT_Y.search(name):
        return name[:-1] + "ies"
    if name.endswith(("s", "x", "z", "ch", "sh")):
        return name + "es"
    return name + "s"


def _row_to_model(model: Type[M], row: sqlite3.Row) -> M:
    return model(**{f.name: row[f.name] for f in fields(model)})


class InvariantViolationError(Exception):
    """Raised when a write is requested on an entity in the wrong lifecycle state."""


class AlreadyPersistedError(InvariantViolationError):
    def __init__(self, entity_type: str, entity_id: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' is already in the database; use update()")


class NotPersistedError(InvariantViolationError):
    def __init__(self, entity_type: str):
        self.entity_type = entity_type
        super().__init__(f"{entity_type} has no id and is not in the database; use create()")


class BaseRepository(Generic[T]):
    """
    Table-agnostic CRUD for one model dataclass.

    Subclasses set ``model``; ``table_name`` is derived from it once, when the
    subclass is defined, unless the subclass sets it explicitly.
    """

    model: Type[T]
    table_name: str

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        model = cls.__dict__.get("model")
        if model is not None and "table_name" not in cls.__dict__:
            cls.table_name = table_name_for(model)

    def __init__(self, conn: Optional[sqlite3.Connection] = None):
        """
        Args:
            conn: Connection to run statements on; defaults to the
                process-wide connection from ``db.connection``.
        """
        self._conn = conn if conn is not None else get_connection()

    @property
    def conn(self) -> sqlite3.Connection:
        return self._conn

    @classmethod
    def columns(cls) -> list[str]:
        """Every non-identity column, in model declaration order."""
        return [f.name for f in fields(cls.model) if f.name != "id"]

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """
        Fetch a single row by primary key.

        Returns:
            The model instance or None if not found.
        """
        return self._lookup(self.model, entity_id)

    def find_all(self) -> list[T]:
        """Fetch every row, in the order the database returns them."""
        sql = f"SELECT * FROM {self.table_name};"
        logger.debug(f"find_all on {self.table_name}")
        return [_row_to_model(self.model, r) for r in self._conn.execute(sql).fetchall()]

    def find_by(
        self, predicate: Union[str, Mapping], *params: Any
    ) -> Optional[list[T]]:
        """
        Fetch rows matching a filter.

        Args:
            predicate: Either a raw SQL filter such as ``"fname = ? OR lname = ?"``
                (values passed in ``params``), or a mapping of field name to
                required value, combined with AND. A None value matches NULL.
            params: Positional parameters for a raw filter.

        Returns:
            List of matching instances, or None if nothing matched.

        Raises:
            ValueError: If a mapping names a field the model does not have,
                or parameters are passed alongside a mapping.
        """
        if isinstance(predicate, Mapping):
            if params:
                raise ValueError("find_by() takes no extra parameters with a mapping predicate")
            where, values = self._where_from_mapping(predicate)
        else:
            where, values = predicate, list(params)

        sql = f"SELECT * FROM {self.table_name}"
        if where:
            sql += f" WHERE {where}"
        return self._fetch_many(sql + ";", values)

    def count(self) -> int:
        """Number of rows in the table."""
        return self._fetch_scalar(f"SELECT COUNT(*) FROM {self.table_name};", ()) or 0

    def exists(self, entity_id: int) -> bool:
        row = self._conn.execute(
            f"SELECT 1 FROM {self.table_name} WHERE id = ?;", (entity_id,)
        ).fetchone()
        return row is not None

    # ── WRITE ─────────────────────────────────────────────

    def save(self, instance: T) -> T:
        """Insert the instance if it has no id yet, otherwise update its row."""
        if instance.id is None:
            return self.create(instance)
        return self.update(instance)

    def create(self, instance: T) -> T:
        """
        Insert a new row built from every non-id field.

        Returns:
            The same instance with its ``id`` populated.

        Raises:
            AlreadyPersistedError: If the instance already has an id.
        """
        if instance.id is not None:
            raise AlreadyPersistedError(type(instance).__name__, instance.id)

        columns = self.columns()
        placeholders = ", ".join("?" for _ in columns)
        sql = f"INSERT INTO {self.table_name} ({', '.join(columns)}) VALUES ({placeholders});"
        values = [getattr(instance, c) for c in columns]
        try:
            cur = self._conn.execute(sql, values)
            self._conn.commit()
        except sqlite3.Error as e:
            self._conn.rollback()
            logger.error(f"Failed to insert into {self.table_name}: {e}")
            raise
        instance.id = cur.lastrowid
        logger.info(f"Created {type(instance).__name__} #{instance.id}")
        return instance

    def update(self, instance: T) -> T:
        """
        Overwrite every non-id column of the row with the instance's id.

        Raises:
            NotPersistedError: If the instance has no id.
        """
        if instance.id is None:
            raise NotPersistedError(type(instance).__name__)

        columns = self.columns()
        assignments = ", ".join(f"{c} = ?" for c in columns)
        sql = f"UPDATE {self.table_name} SET {assignments} WHERE id = ?;"
        values = [getattr(instance, c) for c in columns] + [instance.id]
        try:
            cur = self._conn.execute(sql, values)
            self._conn.commit()
        except sqlite3.Error as e:
            self._conn.rollback()
            logger.error(f"Failed to update {self.table_name} #{instance.id}: {e}")
            raise
        if cur.rowcount == 0:
            logger.warning(f"Update matched no row in {self.table_name} for id {instance.id}")
        else:
            logger.info(f"Updated {type(instance).__name__} #{instance.id}")
        return instance

    # ── HELPERS ───────────────────────────────────────────

    def _where_from_mapping(self, predicate: Mapping) -> tuple[str, list]:
        known = {f.name for f in fields(self.model)}
        clauses, values = [], []
        for name, value in predicate.items():
            if name not in known:
                raise ValueError(f"{self.model.__name__} has no field '{name}'")
            if value is None:
                clauses.append(f"{name} IS NULL")
            else:
                clauses.append(f"{name} = ?")
                values.append(value)
        return " AND ".join(clauses), values

    def _lookup(self, model: Type[M], entity_id: Optional[int]) -> Optional[M]:
        """Fetch one row of any model's table by primary key."""
        if entity_id is None:
            return None
        table = self.table_name if model is self.model else table_name_for(model)
        sql = f"SELECT * FROM {table} WHERE id = ?;"
        return self._fetch_one(sql, (entity_id,), model)

    def _fetch_one(
        self, sql: str, params: Sequence, model: Optional[type] = None
    ) -> Optional[Any]:
        logger.debug(f"fetch_one: {sql.strip()} {tuple(params)}")
        row = self._conn.execute(sql, params).fetchone()
        return _row_to_model(model or self.model, row) if row else None

    def _fetch_many(
        self, sql: str, params: Sequence, model: Optional[type] = None
    ) -> Optional[list]:
        """Run a query and map its rows; None when no row matched."""
        logger.debug(f"fetch_many: {sql.strip()} {tuple(params)}")
        rows = self._conn.execute(sql, params).fetchall()
        if not rows:
            return None
        return [_row_to_model(model or self.model, r) for r in rows]

    def _fetch_scalar(self, sql: str, params: Sequence) -> Any:
        row = self._conn.execute(sql, params).fetchone()
        return row[0] if row else None
