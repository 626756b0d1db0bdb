"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db, utcnow

from .recipe import Recipe, RecipeIngredient
from .shopping import ShoppingList, ListItem

__all__ = [
    'db',
    'utcnow',
    'Recipe',
    'RecipeIngredient',
    'ShoppingList',
    'ListItem',
]
