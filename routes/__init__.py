"""
Routes Package

Blueprints for the JSON API. Every route requires a bearer token.
"""

from .recipes import recipes_bp
from .lists import lists_bp

__all__ = [
    'recipes_bp',
    'lists_bp',
]
