"""
Recipe Models

Contains the Recipe and RecipeIngredient models for storing recipes
and the structured ingredients parsed from their ingredient text.
"""

from .base import db, utcnow


class Recipe(db.Model):
    """Recipe owned by one user, with its parsed ingredients in order."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    image = db.Column(db.String(500), default='')
    url = db.Column(db.String(500), default='', index=True)
    source = db.Column(db.String(200), default='')
    instructions = db.Column(db.Text, default='')
    tags = db.Column(db.JSON, default=list)
    rating = db.Column(db.Float, nullable=True)
    want_to_try = db.Column(db.Boolean, default=False)
    servings = db.Column(db.Integer, nullable=True)
    cooking_time = db.Column(db.String(50), default='')
    prep_time = db.Column(db.String(50), default='')
    notes = db.Column(db.Text, default='')
    author = db.Column(db.String(200), default='')
    storage = db.Column(db.Text, default='')
    freezes = db.Column(db.Boolean, nullable=True)
    equipment = db.Column(db.Text, default='')
    macros = db.Column(db.JSON, nullable=True)  # {carbs, protein, fat, calories}
    date_created = db.Column(db.DateTime(timezone=True), default=utcnow)
    date_last_edited = db.Column(db.DateTime(timezone=True), nullable=True)
    ingredients = db.relationship(
        'RecipeIngredient', backref='recipe', lazy=True,
        cascade='all, delete-orphan', order_by='RecipeIngredient.position'
    )


class RecipeIngredient(db.Model):
    """One parsed ingredient line: quantity and unit are optional, name is not."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    quantity = db.Column(db.Float, nullable=True)
    unit = db.Column(db.String(10), nullable=True)
    name = db.Column(db.String(200), nullable=False)
    group_name = db.Column(db.String(200), nullable=True)  # section header, e.g. 'glaze'
