##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Declarations that attach table and field metadata to entity classes.

Entities are usually declared with the `entity` class decorator and `Property`
class attributes:

    @entity(table="users")
    class User(BaseEntity):
        email: str = Property(unique=True)
        name: str = Property()
        age: int = Property(type="number")

Classes that can't use the decorators can register themselves with
`declare_entity` and `declare_property` instead; the decorators are thin
wrappers around those two functions.
"""

import inspect
import logging
import types
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union, get_args, get_origin

from surrealorm.metadata import (
    ENTITY_METADATA_KEY,
    PROPERTY_METADATA_KEY,
    define_metadata,
    get_metadata,
    get_own_metadata,
)


LOG = logging.getLogger(__name__)

C = TypeVar("C", bound=type)

_MISSING = object()


def infer_property_type(target: type, name: str) -> Optional[str]:
    """
    Infer the type name of a field from the class's annotations.

    `Optional[X]` and `X | None` resolve to `X`, parametrized generics resolve
    to their origin (e.g. `List[str]` -> "list"), and string annotations are
    lowercased as-is.

    Args:
        target: The class that declares the field.
        name: The field name.

    Returns:
        The lowercased type name, or None if the field has no annotation.
    """
    annotation = inspect.get_annotations(target).get(name)
    if annotation is None:
        return None
    if isinstance(annotation, str):
        return annotation.lower()

    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) != 1:
            return None
        annotation = args[0]

    annotation = get_origin(annotation) or annotation
    type_name = getattr(annotation, "__name__", None)
    return type_name.lower() if type_name else None


def declare_entity(target: C, table: Optional[str] = None) -> C:
    """
    Register `target` as an entity stored in `table`.

    Args:
        target: The entity class.
        table: The table name. Defaults to the lowercased class name.

    Returns:
        The class itself, so this can be used as a decorator body.
    """
    table_name = table or target.__name__.lower()
    define_metadata(ENTITY_METADATA_KEY, {"table": table_name}, target)
    LOG.debug(f"Declared entity {target.__name__} with table '{table_name}'.")
    return target


def entity(target: Optional[C] = None, *, table: Optional[str] = None) -> Union[C, Callable[[C], C]]:
    """
    Class decorator marking a class as a SurrealDB entity.

    Can be used bare (`@entity`) or with options (`@entity(table="users")`).

    Args:
        target: The decorated class when used without parentheses.
        table: Optional custom table name.

    Returns:
        The decorated class, or a decorator when called with options.
    """
    if target is not None:
        return declare_entity(target)

    def decorator(cls: C) -> C:
        return declare_entity(cls, table=table)

    return decorator


def declare_property(
    target: type,
    name: str,
    type: Optional[str] = None,  # pylint: disable=redefined-builtin
    required: bool = False,
    unique: bool = False,
    index: bool = False,
) -> Dict[str, Any]:
    """
    Merge the metadata of field `name` into the property map of `target`.

    The first property declared on a class starts from a copy of the map it
    inherits, so subclasses extend their parents' fields without changing them.

    Args:
        target: The entity class.
        name: The field name.
        type: The field type name. Inferred from annotations when omitted.
        required: Whether the field is required.
        unique: Whether the field holds unique values.
        index: Whether the field should be indexed.

    Returns:
        The metadata recorded for the field.
    """
    properties = get_own_metadata(PROPERTY_METADATA_KEY, target)
    if properties is None:
        properties = dict(get_metadata(PROPERTY_METADATA_KEY, target) or {})
        define_metadata(PROPERTY_METADATA_KEY, properties, target)

    properties[name] = {
        "type": type if type is not None else infer_property_type(target, name),
        "required": required,
        "unique": unique,
        "index": index,
    }
    LOG.debug(f"Declared property {target.__name__}.{name}: {properties[name]}")
    return properties[name]


class Property:
    """
    Descriptor declaring a persisted field on an entity class.

    The field is registered when the owning class is created. Values live in
    the instance's `__dict__`, so fields that were never assigned don't show up
    in `BaseEntity.serialize()`.

    Attributes:
        name (str): The field name, set when the owning class is created.
        type (Optional[str]): Explicit type name, or None to infer it.
        required (bool): Whether the field is required.
        unique (bool): Whether the field holds unique values.
        index (bool): Whether the field should be indexed.
    """

    def __init__(
        self,
        type: Optional[str] = None,  # pylint: disable=redefined-builtin
        *,
        required: bool = False,
        unique: bool = False,
        index: bool = False,
        default: Any = None,
        default_factory: Optional[Callable[[], Any]] = None,
    ):
        if default is not None and default_factory is not None:
            raise ValueError("Cannot specify both default and default_factory")
        self.name: Optional[str] = None
        self.type = type
        self.required = required
        self.unique = unique
        self.index = index
        self.default = default
        self.default_factory = default_factory

    def __set_name__(self, owner: type, name: str):
        self.name = name
        declare_property(
            owner, name, type=self.type, required=self.required, unique=self.unique, index=self.index
        )

    def __get__(self, instance: Any, owner: Optional[Type] = None) -> Any:
        if instance is None:
            return self
        value = instance.__dict__.get(self.name, _MISSING)
        if value is not _MISSING:
            return value
        if self.default_factory is not None:
            # Materialize so in-place mutation sticks to this instance
            value = self.default_factory()
            instance.__dict__[self.name] = value
            return value
        return self.default

    def __set__(self, instance: Any, value: Any):
        instance.__dict__[self.name] = value

    def __delete__(self, instance: Any):
        instance.__dict__.pop(self.name, None)

    def __repr__(self) -> str:
        return (
            f"Property(name={self.name!r}, type={self.type!r}, required={self.required}, "
            f"unique={self.unique}, index={self.index})"
        )
