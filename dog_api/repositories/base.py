"""
Base Repository

A small query-builder store over one SQLAlchemy model. The services never
build SQL themselves: they describe what they want with plain dicts and
hand those to the repository.

Predicates
==========
Keys are model attribute names. A plain value means equality; a dict
holds operators:

    {"name": "Beagle"}                                  # equality
    {"name": {"contains": "coll", "mode": "insensitive"}}
    {"category_id": {"in": ["a", "b"]}}
    {"colors": {"has_some": ["Black", "Tan"]}}          # JSON list overlap
    {"average_height": {"gte": 20, "lte": 30}}
    {"breeds": {"some": {}}} / {"breeds": {"none": {}}} # relationships

Paging
======
find_many(cursor={"id": x}, skip=1, take=n) seeks to the cursor row using
the (order field, id) key and returns up to n rows after it. A negative
take walks the other way and returns the |n| rows preceding the cursor,
nearest to the cursor first.
"""

import json
import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import String, and_, cast, false, func, inspect, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from dog_api.database import Base
from dog_api.errors import NotFoundError, translate_integrity_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

DEFAULT_ORDER_BY = {"id": "asc"}


def compile_where(model: type[Base], where: dict[str, Any]) -> list[Any]:
    """
    Translate a predicate dict into SQLAlchemy WHERE clauses.

    Raises:
        ValueError: On unknown fields or operators (a programming error,
            never caused by client input)
    """
    mapper = inspect(model)
    clauses = []

    for key, condition in where.items():
        if key in mapper.relationships:
            clauses.append(_relationship_clause(model, key, condition))
            continue

        if key not in mapper.columns:
            raise ValueError(f"{model.__name__} has no column '{key}'")

        column = getattr(model, key)
        if not isinstance(condition, dict):
            clauses.append(column.is_(None) if condition is None else column == condition)
            continue

        insensitive = condition.get("mode") == "insensitive"
        for operator, value in condition.items():
            if operator == "mode":
                continue
            clauses.append(_column_clause(column, operator, value, insensitive))

    return clauses


def _column_clause(column: Any, operator: str, value: Any, insensitive: bool) -> Any:
    if operator == "contains":
        if insensitive:
            return func.lower(column).contains(value.lower(), autoescape=True)
        return column.contains(value, autoescape=True)
    if operator == "in":
        return column.in_(value)
    if operator == "has_some":
        if not value:
            return false()
        # JSON text holds each element as a quoted string, so matching the
        # quoted form only hits whole elements.
        as_text = cast(column, String)
        return or_(*[as_text.contains(json.dumps(item), autoescape=True) for item in value])
    if operator == "gte":
        return column >= value
    if operator == "lte":
        return column <= value
    raise ValueError(f"Unsupported operator '{operator}'")


def _relationship_clause(model: type[Base], key: str, condition: dict[str, Any]) -> Any:
    relationship = getattr(model, key)
    target = inspect(model).relationships[key].mapper.class_

    if "some" in condition:
        return relationship.any(*compile_where(target, condition["some"]))
    if "none" in condition:
        return ~relationship.any(*compile_where(target, condition["none"]))
    raise ValueError(f"Unsupported relationship filter on '{key}': {condition}")


class Repository(Generic[ModelT]):
    """
    Store for one model, bound to the current request's session.

    Subclasses set ``model`` and ``resource`` (the name used in error
    messages).
    """

    model: ClassVar[type[Base]]
    resource: ClassVar[str]

    def __init__(self, db: Session):
        self.db = db

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def find_many(
        self,
        where: dict[str, Any] | None = None,
        order_by: dict[str, str] | None = None,
        cursor: dict[str, Any] | None = None,
        skip: int | None = None,
        take: int | None = None,
    ) -> list[ModelT]:
        """Fetch rows matching ``where`` in ``order_by`` order, optionally paged."""
        ((field, direction),) = (order_by or DEFAULT_ORDER_BY).items()
        if field not in inspect(self.model).columns:
            raise ValueError(f"Cannot sort {self.resource} by '{field}'")

        column = getattr(self.model, field)
        descending = direction == "desc"
        if take is not None and take < 0:
            descending = not descending

        stmt = select(self.model).where(*compile_where(self.model, where or {}))

        if cursor is not None:
            anchor = self.find_unique(cursor["id"])
            if anchor is None:
                return []
            stmt = stmt.where(
                self._seek(column, getattr(anchor, field), anchor.id, descending)
            )

        if descending:
            stmt = stmt.order_by(column.desc(), self.model.id.desc())
        else:
            stmt = stmt.order_by(column.asc(), self.model.id.asc())

        if skip:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(abs(take))

        return list(self.db.execute(stmt).scalars().all())

    def _seek(self, column: Any, value: Any, anchor_id: str, descending: bool) -> Any:
        """Rows at or past the anchor in the effective ordering."""
        if descending:
            return or_(column < value, and_(column == value, self.model.id <= anchor_id))
        return or_(column > value, and_(column == value, self.model.id >= anchor_id))

    def count(self, where: dict[str, Any] | None = None) -> int:
        """Count rows matching ``where``, ignoring any paging."""
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(*compile_where(self.model, where or {}))
        )
        return self.db.execute(stmt).scalar() or 0

    def find_unique(self, id: str) -> ModelT | None:
        """Fetch one row by primary key, or None."""
        stmt = select(self.model).where(self.model.id == id)
        return self.db.execute(stmt).scalar_one_or_none()

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def create(self, data: dict[str, Any]) -> ModelT:
        instance = self.model(**data)
        self.db.add(instance)
        self._commit()
        self.db.refresh(instance)
        logger.info(f"Created {self.resource} {instance.id}")
        return instance

    def update(self, id: str, data: dict[str, Any]) -> ModelT:
        """
        Apply a partial update. Only the keys present in ``data`` change.

        Raises:
            NotFoundError: If no row has this id
        """
        instance = self.find_unique(id)
        if instance is None:
            raise NotFoundError(self.resource, id)

        for key, value in data.items():
            setattr(instance, key, value)

        self._commit()
        self.db.refresh(instance)
        logger.info(f"Updated {self.resource} {id}: {sorted(data)}")
        return instance

    def delete(self, id: str) -> None:
        """
        Delete a row by id.

        Raises:
            NotFoundError: If no row has this id
            ForeignKeyError: If other rows still reference it
        """
        instance = self.find_unique(id)
        if instance is None:
            raise NotFoundError(self.resource, id)

        self.db.delete(instance)
        self._commit()
        logger.info(f"Deleted {self.resource} {id}")

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(f"{self.resource} write rejected: {exc.orig}")
            raise translate_integrity_error(exc, self.resource) from exc
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"{self.resource} write failed", exc_info=True)
            raise
