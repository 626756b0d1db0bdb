"""
Shopping List Service

Functions for adding recipe ingredients to shopping lists and for
building the list objects returned by the API.
"""

from models import Recipe
from .parsing import parse_metric_to_non_metric

LISTS_URL = '/api/v1/lists/'


def _is_positive_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def update_list_items(list_items, recipe_ingredients, recipe_id, recipe_servings, servings_to_add):
    """
    Return the list items followed by one new item per recipe ingredient.

    Quantities are scaled to the number of servings being added when both
    the recipe servings and the servings to add are known; otherwise they
    are copied as they are. Items are plain dicts; the input list is not
    modified.
    """
    new_items = list(list_items)
    scale = _is_positive_number(recipe_servings) and _is_positive_number(servings_to_add)

    for ingredient in recipe_ingredients:
        item = {'name': ingredient['name']}
        quantity = ingredient.get('quantity')
        if quantity:
            if scale:
                item['quantity'] = round(quantity * servings_to_add / recipe_servings, 2)
                item['servings'] = servings_to_add
            else:
                item['quantity'] = quantity
        if ingredient.get('unit'):
            item['unit'] = ingredient['unit']
        item['recipe_id'] = recipe_id
        new_items.append(item)

    return new_items


def serialize_item(item):
    """List item as returned by the API."""
    data = {'id': item.id, 'name': item.name}
    if item.quantity is not None:
        data['quantity'] = item.quantity
        data['displayQuantity'] = parse_metric_to_non_metric(item.unit, item.quantity)
    if item.unit:
        data['unit'] = item.unit
    if item.recipe_id is not None:
        data['recipeId'] = item.recipe_id
    if item.servings is not None:
        data['servings'] = item.servings
    return data


def build_list_object(shopping_list):
    """List with its items and a link to the recipes it was built from."""
    return {
        'id': shopping_list.id,
        'userId': shopping_list.user_id,
        'title': shopping_list.title,
        'dateCreated': shopping_list.date_created.isoformat() if shopping_list.date_created else None,
        'dateLastEdited': shopping_list.date_last_edited.isoformat() if shopping_list.date_last_edited else None,
        'items': [serialize_item(item) for item in shopping_list.items],
        'recipes': {
            'href': f'{LISTS_URL}{shopping_list.id}/recipes'
        },
    }


def build_recipes_array(list_id, items, user_id):
    """
    Summaries of the recipes whose ingredients are in a list.

    One entry per recipe (title, image, servings added and API link), in
    the order the recipes were first added. Recipes that have since been
    deleted are left out.
    """
    recipes_url = f'{LISTS_URL}{list_id}/recipes'
    servings_by_recipe = {}
    for item in items:
        if item.recipe_id is not None and item.recipe_id not in servings_by_recipe:
            servings_by_recipe[item.recipe_id] = item.servings

    if not servings_by_recipe:
        return []

    recipes = Recipe.query.filter(
        Recipe.id.in_(servings_by_recipe), Recipe.user_id == user_id
    ).all()
    recipes_by_id = {recipe.id: recipe for recipe in recipes}

    recipes_data = []
    for recipe_id, servings in servings_by_recipe.items():
        recipe = recipes_by_id.get(recipe_id)
        if recipe:
            recipes_data.append({
                'id': recipe.id,
                'title': recipe.title,
                'image': recipe.image,
                'servings': servings,
                'href': f'{recipes_url}/{recipe.id}',
            })
    return recipes_data
