"""
Shopping Models

Contains the ShoppingList and ListItem models for shopping lists built
from recipe ingredients.
"""

from .base import db, utcnow


class ShoppingList(db.Model):
    """Named shopping list owned by one user."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    date_created = db.Column(db.DateTime(timezone=True), default=utcnow)
    date_last_edited = db.Column(db.DateTime(timezone=True), nullable=True)
    items = db.relationship(
        'ListItem', backref='shopping_list', lazy=True,
        cascade='all, delete-orphan', order_by='ListItem.id'
    )


class ListItem(db.Model):
    """Shopping list item, scaled from a recipe ingredient or added by hand."""
    id = db.Column(db.Integer, primary_key=True)
    list_id = db.Column(db.Integer, db.ForeignKey('shopping_list.id', ondelete='CASCADE'), nullable=False, index=True)
    quantity = db.Column(db.Float, nullable=True)
    unit = db.Column(db.String(10), nullable=True)
    name = db.Column(db.String(200), nullable=False)
    # Source recipe (no FK: deleting a recipe leaves its list items in place)
    recipe_id = db.Column(db.Integer, nullable=True, index=True)
    servings = db.Column(db.Integer, nullable=True)
