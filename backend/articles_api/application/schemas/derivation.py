"""Helpers that derive input shapes from one canonical pydantic model.

Request bodies are built from the record shape instead of being redeclared,
so a field added to the record shows up in the create and update bodies
with the same type, constraints and JSON alias.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.fields import FieldInfo


def omit_fields(
    model: type[BaseModel],
    *names: str,
    model_name: str | None = None,
    forbid_extra: bool = True,
) -> type[BaseModel]:
    """Return a copy of ``model`` without the named fields.

    With ``forbid_extra`` the derived model rejects unknown keys, so a client
    sending one of the omitted fields gets a validation error rather than a
    silently ignored value.
    """
    unknown = set(names) - set(model.model_fields)
    if unknown:
        raise ValueError(f"{model.__name__} has no field(s): {', '.join(sorted(unknown))}")

    fields = {
        field_name: _field_definition(info)
        for field_name, info in model.model_fields.items()
        if field_name not in names
    }
    return create_model(
        model_name or f"{model.__name__}Omit",
        __config__=_derived_config(model, forbid_extra),
        __doc__=model.__doc__,
        **fields,
    )


def partial_model(
    model: type[BaseModel],
    *,
    model_name: str | None = None,
    forbid_extra: bool = True,
) -> type[BaseModel]:
    """Return a copy of ``model`` where every field may be left out.

    Omitted fields stay unset (see ``model_dump(exclude_unset=True)``). The
    field types are kept as-is, so an explicit ``null`` is only accepted when
    the original field already allowed it.
    """
    fields = {
        field_name: _field_definition(info, optional=True)
        for field_name, info in model.model_fields.items()
    }
    return create_model(
        model_name or f"{model.__name__}Partial",
        __config__=_derived_config(model, forbid_extra),
        __doc__=model.__doc__,
        **fields,
    )


def _derived_config(model: type[BaseModel], forbid_extra: bool) -> ConfigDict:
    config = ConfigDict(**model.model_config)
    if forbid_extra:
        config["extra"] = "forbid"
    return config


def _field_definition(info: FieldInfo, *, optional: bool = False) -> tuple[Any, Any]:
    """Rebuild a (annotation, Field) pair, keeping constraints and docs."""
    annotation: Any = info.annotation
    if info.metadata:
        annotation = Annotated[(annotation, *info.metadata)]

    docs = {"description": info.description, "examples": info.examples}
    if optional:
        return annotation, Field(None, **docs)
    if info.default_factory is not None:
        return annotation, Field(default_factory=info.default_factory, **docs)
    return annotation, Field(info.default, **docs)
