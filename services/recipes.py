"""
Recipe Service

Turns submitted recipe payloads into stored recipes: parses the free-text
ingredient list and tags, copies whitelisted fields onto the model, and
serializes and searches stored recipes.
"""

import logging

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import selectinload

from constants import (
    RECIPE_FIELDS, URL_FIELDS, NUMBER_BOUNDS, BOOLEAN_FIELDS,
    MACRO_KEYS, MAX_LENGTHS, CANONICAL_UNITS, DEFAULT_PAGE_SIZE,
)
from models import Recipe, RecipeIngredient
from utils.sanitizer import (
    sanitize_text, sanitize_url, sanitize_title, sanitize_instructions,
    safe_int, safe_float, safe_bool,
)
from .parsing import parse_ingredients, parse_metric_to_non_metric

logger = logging.getLogger(__name__)

# Relevance weights for search matches
SEARCH_WEIGHTS = {'title': 10, 'ingredients': 4, 'tags': 2}

LONG_TEXT_FIELDS = {'instructions', 'notes', 'storage', 'equipment'}


def split_tags(tags):
    """Split 'dinner, tasty,good' into ['dinner', 'tasty', 'good']."""
    if isinstance(tags, str):
        tags = tags.split(',')
    elif not isinstance(tags, (list, tuple)):
        return []
    return [tag.strip() for tag in tags if isinstance(tag, str) and tag.strip()]


def process_recipe(data):
    """
    Return a copy of a submitted recipe with its text fields structured.

    A string 'ingredients' value is parsed into ingredient dicts and a
    string 'tags' value is split on commas. Raises UnparsableIngredientLine
    so that no partial recipe gets stored.
    """
    recipe = dict(data)
    if isinstance(recipe.get('ingredients'), str):
        recipe['ingredients'] = parse_ingredients(recipe['ingredients'])
    if recipe.get('tags'):
        recipe['tags'] = split_tags(recipe['tags'])
    return recipe


def _clean_field(field, value):
    max_length = MAX_LENGTHS.get(field, 10000)
    if field == 'title':
        return sanitize_title(value, max_length)
    if field in URL_FIELDS:
        return sanitize_url(value)[:max_length]
    if field in NUMBER_BOUNDS:
        min_val, max_val = NUMBER_BOUNDS[field]
        if field == 'servings':
            return safe_int(value, default=None, min_val=min_val, max_val=max_val)
        return safe_float(value, default=None, min_val=min_val, max_val=max_val)
    if field in BOOLEAN_FIELDS:
        return safe_bool(value)
    if field == 'macros':
        if not isinstance(value, dict):
            return None
        return {key: safe_float(value.get(key), default=None) for key in MACRO_KEYS}
    if field in LONG_TEXT_FIELDS:
        return sanitize_instructions(value, max_length)
    return sanitize_text(value, max_length)


def _build_ingredient(position, ingredient):
    quantity = ingredient.get('quantity')
    unit = ingredient.get('unit')
    return RecipeIngredient(
        position=position,
        quantity=safe_float(quantity, default=None) if quantity is not None else None,
        unit=unit if unit in CANONICAL_UNITS else None,
        name=str(ingredient['name'])[:MAX_LENGTHS['ingredient_name']],
        group_name=ingredient.get('group') or None,
    )


def apply_recipe_fields(recipe, data):
    """
    Copy the fields of a processed payload onto a Recipe.

    Only whitelisted fields are copied. When 'ingredients' is present the
    recipe's ingredient rows are replaced, keeping their order.
    """
    for field, attribute in RECIPE_FIELDS.items():
        if field in data:
            setattr(recipe, attribute, _clean_field(field, data[field]))

    if 'tags' in data:
        recipe.tags = [sanitize_text(tag, MAX_LENGTHS['tag']) for tag in split_tags(data['tags'] or [])]

    ingredients = data.get('ingredients')
    if isinstance(ingredients, list):
        recipe.ingredients = [
            _build_ingredient(position, ingredient)
            for position, ingredient in enumerate(ingredients)
            if isinstance(ingredient, dict) and ingredient.get('name')
        ]
    return recipe


def serialize_ingredient(ri):
    """Ingredient as stored, plus a fraction display for cup/spoon units."""
    ingredient = {}
    if ri.quantity is not None:
        ingredient['quantity'] = ri.quantity
        ingredient['displayQuantity'] = parse_metric_to_non_metric(ri.unit, ri.quantity)
    if ri.unit:
        ingredient['unit'] = ri.unit
    ingredient['name'] = ri.name
    if ri.group_name:
        ingredient['group'] = ri.group_name
    return ingredient


def _isoformat(value):
    return value.isoformat() if value else None


def serialize_recipe(recipe):
    """Recipe as the JSON object returned by the API."""
    data = {
        'id': recipe.id,
        'userId': recipe.user_id,
        'dateCreated': _isoformat(recipe.date_created),
        'dateLastEdited': _isoformat(recipe.date_last_edited),
    }
    for field, attribute in RECIPE_FIELDS.items():
        data[field] = getattr(recipe, attribute)
    data['tags'] = list(recipe.tags or [])
    data['ingredients'] = [serialize_ingredient(ri) for ri in recipe.ingredients]
    return data


def find_recipe_by_url(user_id, url):
    """Return the user's recipe saved from this URL, or None."""
    return Recipe.query.filter_by(user_id=user_id, url=url).first()


def _like(term):
    escaped = term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'


def _term_scores(recipe, terms):
    """Weighted number of occurrences of each term in the recipe."""
    title = (recipe.title or '').lower()
    names = [ri.name.lower() for ri in recipe.ingredients]
    tags = [tag.lower() for tag in (recipe.tags or [])]
    return [
        title.count(term) * SEARCH_WEIGHTS['title']
        + sum(name.count(term) for name in names) * SEARCH_WEIGHTS['ingredients']
        + sum(tag.count(term) for tag in tags) * SEARCH_WEIGHTS['tags']
        for term in terms
    ]


def search_recipes(user_id, search_string, skip=0, limit=DEFAULT_PAGE_SIZE):
    """
    Search a user's recipes by title, ingredient names and tags.

    Every word of the search string must appear somewhere in the recipe.
    Results are ordered by weighted relevance, then newest first.

    Returns (count, recipes) where recipes is the requested page.
    """
    terms = [term.lower() for term in search_string.split()]
    if not terms:
        return 0, []

    query = Recipe.query.options(selectinload(Recipe.ingredients)).filter_by(user_id=user_id)
    for term in terms:
        pattern = _like(term)
        query = query.filter(or_(
            Recipe.title.ilike(pattern, escape='\\'),
            Recipe.ingredients.any(RecipeIngredient.name.ilike(pattern, escape='\\')),
            cast(Recipe.tags, String).ilike(pattern, escape='\\'),
        ))

    scored = []
    for recipe in query.all():
        scores = _term_scores(recipe, terms)
        # Tags are filtered on their JSON text, so recheck each term on the real values
        if all(scores):
            scored.append((sum(scores), recipe))
    scored.sort(key=lambda pair: (pair[0], pair[1].date_created, pair[1].id), reverse=True)
    matches = [recipe for _, recipe in scored]
    logger.debug("Search %r for user %s matched %d recipes", search_string, user_id, len(matches))
    return len(matches), matches[skip:skip + limit]
