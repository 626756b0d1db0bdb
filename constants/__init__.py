"""
Constants Package

Unit tables and validation limits shared across the application.
"""

from .units import (
    UnitRule,
    UNIT_RULES,
    UNICODE_FRACTIONS,
    QUANTITY_TOKEN,
    CANONICAL_UNITS,
    SPOON_UNITS,
    THIRDS_ARTIFACTS,
)

from .validation import (
    RECIPE_FIELDS,
    URL_FIELDS,
    NUMBER_BOUNDS,
    BOOLEAN_FIELDS,
    MACRO_KEYS,
    MAX_LENGTHS,
    DEFAULT_PAGE_SIZE,
)

__all__ = [
    # Units
    'UnitRule',
    'UNIT_RULES',
    'UNICODE_FRACTIONS',
    'QUANTITY_TOKEN',
    'CANONICAL_UNITS',
    'SPOON_UNITS',
    'THIRDS_ARTIFACTS',
    # Validation
    'RECIPE_FIELDS',
    'URL_FIELDS',
    'NUMBER_BOUNDS',
    'BOOLEAN_FIELDS',
    'MACRO_KEYS',
    'MAX_LENGTHS',
    'DEFAULT_PAGE_SIZE',
]
