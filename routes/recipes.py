"""
Recipe Routes

Create, read, update, delete and search the caller's recipes.
"""

import logging

from flask import Blueprint, abort, current_app, g, jsonify, request

from constants import MAX_LENGTHS
from models import db, utcnow, Recipe
from services import (
    process_recipe, apply_recipe_fields, serialize_recipe,
    find_recipe_by_url, search_recipes,
)
from utils import login_required, sanitize_title, sanitize_ingredients_text, safe_int

logger = logging.getLogger(__name__)

recipes_bp = Blueprint('recipes', __name__, url_prefix='/api/v1/recipes')


def _bad_request(message):
    return jsonify({'error': message}), 400


def _get_recipe_or_404(id):
    recipe = Recipe.query.filter_by(id=id, user_id=g.user_id).first()
    if recipe is None:
        abort(404, description='recipe does not exist')
    return recipe


def _clean_ingredients(data):
    """Sanitize a text ingredient list in place; returns False if it is too long."""
    if isinstance(data.get('ingredients'), str):
        text = sanitize_ingredients_text(data['ingredients'], MAX_LENGTHS['ingredients'])
        if text is None:
            return False
        data['ingredients'] = text
    return True


@recipes_bp.route('', methods=['POST'])
@login_required
def recipe_create():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _bad_request('missing recipe data')
    data = dict(data)

    if not sanitize_title(data.get('title')):
        return _bad_request('missing recipe title')
    if not data.get('ingredients'):
        return _bad_request('missing recipe ingredients')
    if not _clean_ingredients(data):
        return _bad_request('ingredient list is too long')

    # UnparsableIngredientLine is turned into a 400 by the app error handler
    processed = process_recipe(data)

    recipe = Recipe(user_id=g.user_id)
    apply_recipe_fields(recipe, processed)
    db.session.add(recipe)
    db.session.commit()

    logger.info("Created recipe %s with %d ingredients for user %s",
                recipe.id, len(recipe.ingredients), g.user_id)
    return jsonify(serialize_recipe(recipe)), 201


@recipes_bp.route('/search')
@login_required
def recipe_search():
    url = request.args.get('url', '').strip()
    search_string = request.args.get('searchString', '').strip()

    if url:
        recipe = find_recipe_by_url(g.user_id, url)
        if recipe is None:
            abort(404, description='recipe does not exist')
        return jsonify(serialize_recipe(recipe))

    if search_string:
        skip = safe_int(request.args.get('skip'), default=0, min_val=0)
        limit = current_app.config['SEARCH_PAGE_SIZE']
        count, recipes = search_recipes(g.user_id, search_string[:MAX_LENGTHS['search']], skip, limit)
        return jsonify({
            'count': count,
            'recipes': [serialize_recipe(recipe) for recipe in recipes],
        })

    return jsonify({'error': 'search needs a url or a searchString'}), 501


@recipes_bp.route('/<int:id>')
@login_required
def recipe_get(id):
    return jsonify(serialize_recipe(_get_recipe_or_404(id)))


@recipes_bp.route('/<int:id>', methods=['PUT'])
@login_required
def recipe_update(id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return _bad_request('missing recipe data')
    data = dict(data)

    recipe = _get_recipe_or_404(id)

    if 'title' in data and not sanitize_title(data['title']):
        return _bad_request('missing recipe title')
    if not _clean_ingredients(data):
        return _bad_request('ingredient list is too long')

    processed = process_recipe(data)
    apply_recipe_fields(recipe, processed)
    recipe.date_last_edited = utcnow()
    db.session.commit()

    logger.info("Updated recipe %s for user %s", recipe.id, g.user_id)
    return jsonify(serialize_recipe(recipe))


@recipes_bp.route('/<int:id>', methods=['DELETE'])
@login_required
def recipe_delete(id):
    recipe = _get_recipe_or_404(id)
    db.session.delete(recipe)
    db.session.commit()
    logger.info("Deleted recipe %s for user %s", id, g.user_id)
    return '', 204
