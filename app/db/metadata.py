"""Metadata extraction helpers for dynamic model discovery."""

import inspect

from pydantic import BaseModel

from .utils import get_all_subclasses

# Cache for dynamically discovered field names
_ALLOWED_FIELDS: set[str] | None = None


def _get_table_name(model: type[BaseModel]) -> str:
    """Get the table name for a model."""

    return model._get_table_name()


def _get_fulltext_fields(model: type[BaseModel]) -> list[str]:
    """Get the fields flagged for fulltext search, in definition order."""
    if not hasattr(model, "model_fields"):
        return []
    return [
        field_name
        for field_name, field_info in model.model_fields.items()
        if isinstance(field_info.json_schema_extra, dict)
        and field_info.json_schema_extra.get("surreal_fulltext_field")
    ]


def _model_classes() -> list[type[BaseModel]]:
    """Get all concrete model classes registered under the entity base."""
    from .models import AbstractBaseSurrealEntity

    return [
        model
        for model in get_all_subclasses(AbstractBaseSurrealEntity)
        if not (
            "Settings" in model.__dict__
            and getattr(model.Settings, "__abstract__", False)
        )
    ]


def _get_model_for_table(table: str) -> type[BaseModel] | None:
    """Find the model class stored in ``table``."""
    for model_class in _model_classes():
        if _get_table_name(model_class) == table:
            return model_class
    return None


def _get_allowed_fields() -> set[str]:
    """Dynamically get all field names from the registered models."""
    global _ALLOWED_FIELDS

    if _ALLOWED_FIELDS is not None:
        return _ALLOWED_FIELDS

    allowed_fields: set[str] = set()

    for model_class in _model_classes():
        # Walk through MRO to get all fields (including inherited)
        for base in inspect.getmro(model_class):
            if issubclass(base, BaseModel) and hasattr(base, "model_fields"):
                allowed_fields.update(base.model_fields)

    # Models imported later must still be discoverable
    if allowed_fields:
        _ALLOWED_FIELDS = allowed_fields
    return allowed_fields
