"""
Services Package

Business logic modules for the recipe application.
"""

from .parsing import (
    InvalidQuantity,
    QuantityRangeError,
    UnparsableIngredientLine,
    string_to_number,
    number_to_fraction,
    parse_metric_to_non_metric,
    parse_ingredients,
)

from .recipes import (
    split_tags,
    process_recipe,
    apply_recipe_fields,
    serialize_ingredient,
    serialize_recipe,
    find_recipe_by_url,
    search_recipes,
)

from .shopping import (
    update_list_items,
    serialize_item,
    build_list_object,
    build_recipes_array,
)

__all__ = [
    # Parsing
    'InvalidQuantity',
    'QuantityRangeError',
    'UnparsableIngredientLine',
    'string_to_number',
    'number_to_fraction',
    'parse_metric_to_non_metric',
    'parse_ingredients',
    # Recipes
    'split_tags',
    'process_recipe',
    'apply_recipe_fields',
    'serialize_ingredient',
    'serialize_recipe',
    'find_recipe_by_url',
    'search_recipes',
    # Shopping
    'update_list_items',
    'serialize_item',
    'build_list_object',
    'build_recipes_array',
]
