"""
Unit Constants and Matching Tables

Contains the ordered unit rule table used by the ingredient parser,
the vulgar fraction glyphs it understands, and display constants.
"""

import re
from collections import namedtuple

# A unit rule: canonical unit name, the pattern that selects it and an
# optional pattern that locates the exact unit token to split the line on.
UnitRule = namedtuple('UnitRule', ['name', 'pattern', 'extract'])

# Unicode fraction characters mapping (checked in this order)
UNICODE_FRACTIONS = {
    '½': 0.5,    # ½
    '¼': 0.25,   # ¼
    '¾': 0.75,   # ¾
    '⅔': 0.666,  # ⅔
    '⅓': 0.333,  # ⅓
    '⅛': 0.125,  # ⅛
}

# A digit or fraction glyph, optionally followed by one space
QUANTITY_TOKEN = r'(?:\d|[' + ''.join(UNICODE_FRACTIONS) + r'])\s?'


def _rule(name, pattern):
    return UnitRule(name, re.compile(pattern), None)


def _rule_after_quantity(name, token):
    """Rule for a short abbreviation that only counts right after a quantity."""
    return UnitRule(
        name,
        re.compile(QUANTITY_TOKEN + token + r'\s'),
        re.compile(token + r'\s'),
    )


# Scanned top to bottom, first match wins. Longer spellings must stay above
# the ambiguous abbreviations of the same family. Spelled-out units end at a
# word boundary so 'cupcakes' is not a cup.
UNIT_RULES = (
    _rule('cup', r'cups?\b'),
    _rule_after_quantity('cup', r'[cC]s?\.?'),
    _rule('tsp', r'tsps?\b\.?'),
    _rule('tsp', r'teaspoons?\b\.?'),
    _rule_after_quantity('tsp', r'ts?\.?'),
    _rule('tbsp', r'[Tt]bsps?\b\.?'),
    _rule_after_quantity('tbsp', r'TB?s?\.?'),
    _rule('tbsp', r'[Tt]bl?s?\.?\s'),
    _rule('tbsp', r'tablespoons?\b\.?'),
    _rule_after_quantity('kg', r'[Kk]gs?\.?'),
    _rule('kg', r'kilograms?\b'),
    _rule('kg', r'kilos?\b'),
    _rule('g', r'grams?\b'),
    _rule_after_quantity('g', r'gr?s?\.?'),
    _rule_after_quantity('ml', r'm[Ll]s?\.?'),
    _rule('ml', r'millilit(?:er|re)s?\b'),
    _rule_after_quantity('ml', r'mils?\.?'),
    _rule_after_quantity('oz', r'ozs?\.?'),
    _rule('oz', r'ounces?\b\.?'),
    _rule_after_quantity('lb', r'lbs?\.?'),
    _rule('lb', r'pounds?\b'),
    _rule_after_quantity('l', r'[Ll]s?\.?'),
    _rule('l', r'lit(?:er|re)s?\b'),
)

CANONICAL_UNITS = ('cup', 'tsp', 'tbsp', 'kg', 'g', 'ml', 'oz', 'lb', 'l')

# Units conventionally written as fractions (1/2 cup, not 0.5 cup)
SPOON_UNITS = {'cup', 'tbsp', 'tsp'}

# Decimal artifacts of stored thirds, rendered back as thirds
THIRDS_ARTIFACTS = {
    '333/1000': '1/3',
    '333/500': '2/3',
    '667/1000': '2/3',
}
