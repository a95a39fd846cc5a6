"""Field classification — which attributes participate in history and how."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from pydantic.fields import FieldInfo


class FieldDescriptor(BaseModel):
    """Versioning flags for a single field."""

    model_config = ConfigDict(frozen=True)

    versioned: bool = True
    localized: bool = False


# Undeclared (dynamic) attributes are always kept in history.
UNDECLARED = FieldDescriptor()


@runtime_checkable
class FieldClassifier(Protocol):
    """Read-only view of a schema's versioning flags."""

    def classify(self, name: str) -> FieldDescriptor:
        """Return the descriptor for ``name``; unknown names yield :data:`UNDECLARED`."""
        ...


def versioning_field(
    default: Any = ...,
    *,
    versioned: bool = True,
    localized: bool = False,
    **kwargs: Any,
) -> Any:
    """Declare a pydantic field together with its versioning flags.

    >>> class Page(VersionedDocument):
    ...     title: dict[str, str] = versioning_field(default_factory=dict, localized=True)
    ...     views: int = versioning_field(0, versioned=False)
    """
    flags = {"versioned": versioned, "localized": localized}
    if "default_factory" in kwargs:
        return Field(json_schema_extra=flags, **kwargs)
    return Field(default, json_schema_extra=flags, **kwargs)


def _descriptor_from(info: FieldInfo) -> FieldDescriptor:
    extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
    return FieldDescriptor(
        versioned=bool(extra.get("versioned", True)),
        localized=bool(extra.get("localized", False)),
    )


class ModelFieldClassifier:
    """Classify fields from the declarations on a pydantic model class."""

    def __init__(self, model_class: type[BaseModel]) -> None:
        self._model_class = model_class

    def classify(self, name: str) -> FieldDescriptor:
        info = self._model_class.model_fields.get(name)
        if info is None:
            return UNDECLARED
        return _descriptor_from(info)


class StaticFieldClassifier:
    """Classify fields from a fixed mapping of descriptors."""

    def __init__(self, descriptors: Mapping[str, FieldDescriptor] | None = None) -> None:
        self._descriptors = dict(descriptors or {})

    def classify(self, name: str) -> FieldDescriptor:
        return self._descriptors.get(name, UNDECLARED)


@lru_cache(maxsize=64)
def classifier_for(model_class: type[BaseModel]) -> ModelFieldClassifier:
    """Return the shared classifier for a model class."""
    return ModelFieldClassifier(model_class)
