"""Field name validation and sanitization for safe queries."""

import logging
import re

from .metadata import _get_allowed_fields

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def validate_field_name(field: str) -> bool:
    """
    Check that a field name can be placed in a query verbatim.

    Known model fields are accepted directly; anything else has to look like
    a plain identifier.

    Args:
        field: Field name to validate

    Returns:
        True if field is safe, False otherwise

    """
    if not isinstance(field, str):
        return False
    if field in _get_allowed_fields():
        return True

    if _IDENTIFIER.match(field):
        logger.debug("Field '%s' is not declared on any model", field)
        return True

    logger.error("Unsafe field name detected: %s", field)
    return False


def sanitize_field_name(field: str) -> str:
    """
    Return a field name ready for interpolation into SurrealQL.

    Raises:
        ValueError: If the field name is unsafe

    """
    if not validate_field_name(field):
        raise ValueError(f"Unsafe field name: {field}")

    return field.replace("`", "``")
