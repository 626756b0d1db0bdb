"""
Shopping List Routes

Manage the caller's shopping lists and add recipe ingredients to them.
"""

import logging

from flask import Blueprint, abort, g, jsonify, request

from constants import MAX_LENGTHS
from models import db, utcnow, Recipe, ShoppingList, ListItem
from services import (
    serialize_ingredient, serialize_item, update_list_items,
    build_list_object, build_recipes_array,
)
from utils import login_required, sanitize_title, safe_int

logger = logging.getLogger(__name__)

lists_bp = Blueprint('lists', __name__, url_prefix='/api/v1/lists')


def _get_list_or_404(id):
    shopping_list = ShoppingList.query.filter_by(id=id, user_id=g.user_id).first()
    if shopping_list is None:
        abort(404, description='list does not exist')
    return shopping_list


@lists_bp.route('')
@login_required
def lists_all():
    lists = ShoppingList.query.filter_by(user_id=g.user_id).order_by(ShoppingList.id).all()
    return jsonify([build_list_object(shopping_list) for shopping_list in lists])


@lists_bp.route('', methods=['POST'])
@login_required
def list_create():
    data = request.get_json(silent=True) or {}
    title = sanitize_title(data.get('title') if isinstance(data, dict) else None, MAX_LENGTHS['list_title'])
    if not title:
        return jsonify({'error': 'missing list title'}), 400

    shopping_list = ShoppingList(user_id=g.user_id, title=title)
    db.session.add(shopping_list)
    db.session.commit()
    logger.info("Created list %s for user %s", shopping_list.id, g.user_id)
    return jsonify(build_list_object(shopping_list)), 201


@lists_bp.route('/<int:id>')
@login_required
def list_get(id):
    shopping_list = _get_list_or_404(id)
    list_object = build_list_object(shopping_list)
    if shopping_list.items:
        list_object['recipes']['recipesData'] = build_recipes_array(
            shopping_list.id, shopping_list.items, g.user_id
        )
    return jsonify(list_object)


@lists_bp.route('/<int:id>', methods=['DELETE'])
@login_required
def list_delete(id):
    shopping_list = ShoppingList.query.filter_by(id=id, user_id=g.user_id).first()
    if shopping_list is not None:
        db.session.delete(shopping_list)
        db.session.commit()
        logger.info("Deleted list %s for user %s", id, g.user_id)
    return '', 204


@lists_bp.route('/<int:id>/recipes', methods=['POST'])
@login_required
def list_add_recipe(id):
    data = request.get_json(silent=True) or {}
    recipe_id = safe_int(data.get('recipeId') if isinstance(data, dict) else None, default=None)
    if recipe_id is None:
        return jsonify({'error': 'missing recipe ID'}), 400

    recipe = Recipe.query.filter_by(id=recipe_id, user_id=g.user_id).first()
    if recipe is None:
        abort(404, description='recipe does not exist')
    shopping_list = _get_list_or_404(id)

    servings_to_add = safe_int(data.get('recipeServings'), default=None)
    current_items = [serialize_item(item) for item in shopping_list.items]
    items = update_list_items(
        current_items,
        [serialize_ingredient(ri) for ri in recipe.ingredients],
        recipe.id,
        recipe.servings,
        servings_to_add,
    )
    for item in items[len(current_items):]:
        shopping_list.items.append(ListItem(
            name=item['name'],
            quantity=item.get('quantity'),
            unit=item.get('unit'),
            recipe_id=item['recipe_id'],
            servings=item.get('servings'),
        ))
    shopping_list.date_last_edited = utcnow()
    db.session.commit()

    logger.info("Added recipe %s to list %s for user %s", recipe.id, id, g.user_id)
    return '', 204


@lists_bp.route('/<int:id>/recipes/<int:recipe_id>', methods=['DELETE'])
@login_required
def list_remove_recipe(id, recipe_id):
    shopping_list = _get_list_or_404(id)
    ListItem.query.filter_by(list_id=shopping_list.id, recipe_id=recipe_id).delete()
    shopping_list.date_last_edited = utcnow()
    db.session.commit()
    return '', 204


@lists_bp.route('/<int:id>/items/<int:item_id>', methods=['DELETE'])
@login_required
def list_remove_item(id, item_id):
    shopping_list = _get_list_or_404(id)
    ListItem.query.filter_by(list_id=shopping_list.id, id=item_id).delete()
    shopping_list.date_last_edited = utcnow()
    db.session.commit()
    return '', 204
