"""
Validation Constants

Contains whitelist values and limits for validating user input to
prevent injection attacks and ensure data integrity.
"""

# Recipe fields a client may set (JSON name -> model attribute)
RECIPE_FIELDS = {
    'title': 'title',
    'image': 'image',
    'url': 'url',
    'source': 'source',
    'instructions': 'instructions',
    'rating': 'rating',
    'wantToTry': 'want_to_try',
    'servings': 'servings',
    'cookingTime': 'cooking_time',
    'prepTime': 'prep_time',
    'notes': 'notes',
    'author': 'author',
    'storage': 'storage',
    'freezes': 'freezes',
    'equipment': 'equipment',
    'macros': 'macros',
}

# Fields holding URLs (scheme whitelisted)
URL_FIELDS = {'image', 'url'}

# Fields holding numbers (value bounds)
NUMBER_BOUNDS = {
    'rating': (0, 5),
    'servings': (1, 100),
}

BOOLEAN_FIELDS = {'wantToTry', 'freezes'}

# Nutrition keys kept from a macros object
MACRO_KEYS = ('carbs', 'protein', 'fat', 'calories')

# Maximum field lengths for security
MAX_LENGTHS = {
    'title': 200,
    'list_title': 200,
    'image': 500,
    'url': 500,
    'source': 200,
    'instructions': 50000,
    'notes': 10000,
    'author': 200,
    'storage': 1000,
    'equipment': 1000,
    'cookingTime': 50,
    'prepTime': 50,
    'ingredients': 20000,
    'ingredient_name': 200,
    'tag': 50,
    'search': 200,
}

# Search results per page
DEFAULT_PAGE_SIZE = 12
