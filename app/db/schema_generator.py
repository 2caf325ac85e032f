"""Generate SurrealDB schema definitions from Pydantic models."""

import inspect
import logging

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from .metadata import _get_fulltext_fields, _model_classes
from .models import AbstractBaseSurrealEntity

logger = logging.getLogger(__name__)

TEXT_ANALYZER = "catalog_text"
TEXT_ANALYZER_DEFINITION = (
    f"DEFINE ANALYZER IF NOT EXISTS {TEXT_ANALYZER} "
    "TOKENIZERS class FILTERS lowercase, ascii, snowball(english);"
)


def _quote_identifier(identifier: str) -> str:
    """Quote identifier if it contains special characters (hyphens, etc.)."""
    if "-" in identifier or " " in identifier or identifier[0].isdigit():
        return f"`{identifier}`"
    return identifier


def get_all_fields(model: type[BaseModel]) -> dict[str, FieldInfo]:
    """Get all fields from a model including inherited fields."""
    fields: dict[str, FieldInfo] = {}

    for base in inspect.getmro(model):
        if not issubclass(base, BaseModel) or not hasattr(base, "model_fields"):
            continue

        for field_name, field_info in base.model_fields.items():
            fields.setdefault(field_name, field_info)

    return fields


def extract_indexes_from_model(model: type[BaseModel]) -> dict[str, list[str]]:
    """Group fields by their ``surreal_index`` name, in definition order."""
    fields = get_all_fields(model)

    index_fields: dict[str, list[str]] = {}
    for field_name in model.model_fields:
        field_info = fields.get(field_name)
        json_schema_extra = getattr(field_info, "json_schema_extra", None)
        if not isinstance(json_schema_extra, dict):
            continue

        index_name = json_schema_extra.get("surreal_index")
        if not index_name:
            continue

        columns = index_fields.setdefault(index_name, [])
        if field_name not in columns:
            columns.append(field_name)

    return index_fields


def generate_table_schema(
    model: type[AbstractBaseSurrealEntity],
    table_name: str,
    indexes: dict[str, list[str]] | None = None,
) -> str:
    """Generate the table, index and fulltext index definitions of a model."""
    quoted_table = _quote_identifier(table_name)

    lines = [f"DEFINE TABLE IF NOT EXISTS {quoted_table} SCHEMALESS;"]

    for index_name, index_fields in (indexes or {}).items():
        quoted_index = _quote_identifier(index_name)
        quoted_fields = ", ".join(_quote_identifier(f) for f in index_fields)
        lines.append(
            " ".join([
                f"DEFINE INDEX IF NOT EXISTS {quoted_index}",
                f"ON {quoted_table}",
                f"FIELDS {quoted_fields};",
            ])
        )

    for field_name in _get_fulltext_fields(model):
        quoted_index = _quote_identifier(f"idx_{table_name}_{field_name}_search")
        lines.append(
            " ".join([
                f"DEFINE INDEX IF NOT EXISTS {quoted_index}",
                f"ON {quoted_table}",
                f"FIELDS {_quote_identifier(field_name)}",
                f"SEARCH ANALYZER {TEXT_ANALYZER} BM25;",
            ])
        )

    return "\n".join(lines)


def get_models_and_indexes() -> tuple[
    dict[str, type[AbstractBaseSurrealEntity]], dict[str, dict[str, list[str]]]
]:
    """Get models and indexes configuration dynamically from Field metadata."""
    concrete_models = {model._get_table_name(): model for model in _model_classes()}

    indexes = {
        table_name: extract_indexes_from_model(model)
        for table_name, model in concrete_models.items()
    }
    return concrete_models, indexes


def generate_schema() -> str:
    """Generate the full schema script for every registered model."""
    models, indexes = get_models_and_indexes()

    statements = []
    if any(_get_fulltext_fields(model) for model in models.values()):
        statements.append(TEXT_ANALYZER_DEFINITION)
    for table_name, model in models.items():
        statements.append(
            generate_table_schema(model, table_name, indexes.get(table_name))
        )
    return "\n".join(statements)


async def init_schema(surreal_db: object) -> None:
    """Initialize SurrealDB schema with all required tables and indexes."""
    models, _indexes = get_models_and_indexes()
    schema_query = generate_schema()

    logger.debug("Defining tables: %s", sorted(models))
    await surreal_db.query(schema_query)

    logger.info("SurrealDB schema initialized for %d tables", len(models))
