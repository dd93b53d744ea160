from __future__ import annotations

import inspect
import operator
import typing
from functools import reduce
from typing import Annotated, ClassVar, Literal

from pydantic import Field

from .pretty import PrettyModel


class ComponentConfig(PrettyModel, extra="forbid"):
    """
    Base class for configurable components.

    Each family of components (trip constraints, tour constraints, selectors)
    has an abstract base class deriving from this one, which owns a
    `_components` registry.  Every non-abstract derived class must have a
    `kind` field annotated with a `Literal` value type, and is registered
    with its family under that value when the class is defined.

    See `VehicleTripConstraintConfig` for an example.
    """

    _components: ClassVar[dict[str, type[ComponentConfig]]] = {}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs):
        """Register concrete subclasses with their family."""
        super().__pydantic_init_subclass__(**kwargs)

        if inspect.isabstract(cls):
            return  # families and intermediate bases are not components

        assert "kind" in cls.model_fields, f"`{cls.__name__}.kind` is not defined"
        annotation = cls.model_fields["kind"].annotation
        assert typing.get_origin(annotation) == Literal, (
            f"annotation {annotation} for `{cls.__name__}.kind` "
            f"is not Literal but {typing.get_origin(annotation)}"
        )
        kind = typing.get_args(annotation)[0]
        registered = cls._components.get(kind)
        if registered is not None and registered.__qualname__ != cls.__qualname__:
            raise TypeError(
                f"{cls.__name__} uses kind {kind!r}, "
                f"already taken by {registered.__name__}"
            )
        cls._components[kind] = cls

    @classmethod
    def kinds(cls) -> list[str]:
        """The registered component kinds of this family."""
        return list(cls._components)

    @classmethod
    def as_pydantic_field(cls):
        """Pydantic field type as a union of the family, discriminated on kind."""
        members = list(cls._components.values())
        if len(members) > 1:
            return Annotated[
                reduce(operator.__or__, members),
                Field(discriminator="kind"),
            ]
        else:
            return Annotated[members[0], Field()]
