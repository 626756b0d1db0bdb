"""
Parsing Service

Functions for parsing free-text ingredient lists and quantities from
recipe data, and for rendering stored quantities back as fractions.
"""

import logging
import math
import re
from fractions import Fraction

from constants import UNIT_RULES, UNICODE_FRACTIONS, SPOON_UNITS, THIRDS_ARTIFACTS

logger = logging.getLogger(__name__)

MIXED_NUMBER = re.compile(r'^(\d+)\s+(\d+\s*/\s*\d+)$')
LINE_BREAK = re.compile(r'\r?\n')


class InvalidQuantity(ValueError):
    """Raised when a quantity string cannot be read as a number."""

    def __init__(self, text, message=None):
        self.text = text
        super().__init__(message or f'Quantity {text} is not a valid number')


class QuantityRangeError(InvalidQuantity):
    """Raised for ranges like '3-4', which are never averaged."""

    def __init__(self, text):
        super().__init__(text, 'Quantity is a range, not accepted')


class UnparsableIngredientLine(ValueError):
    """Raised when a line with a recognised unit has no usable quantity."""

    def __init__(self, line):
        self.line = line
        super().__init__(f'Could not parse ingredient: {line}')


def _round_half_up(value, places=3):
    factor = 10 ** places
    return math.floor(value * factor + Fraction(1, 2)) / factor


def string_to_number(text):
    """
    Parse a quantity like '2', '0.5', '1/2', '1 3/4', '½' or '2½' into a number.

    Raises InvalidQuantity when the text is not a quantity. Ranges ('3-4')
    raise QuantityRangeError.
    """
    for glyph, fraction_value in UNICODE_FRACTIONS.items():
        index = text.find(glyph)
        if index > -1:
            whole = text[:index].strip()
            try:
                quantity = (int(whole) if whole else 0) + fraction_value
            except ValueError:
                raise InvalidQuantity(text)
            break
    else:
        if '-' in text or '–' in text:
            raise QuantityRangeError(text)
        value = text.strip()
        try:
            mixed_match = MIXED_NUMBER.match(value)
            if mixed_match:
                exact = Fraction(int(mixed_match.group(1))) + Fraction(mixed_match.group(2).replace(' ', ''))
            else:
                exact = Fraction(value)
            quantity = _round_half_up(exact)
        except (ValueError, ZeroDivisionError, OverflowError):
            raise InvalidQuantity(text)

    if not math.isfinite(quantity):
        raise InvalidQuantity(text)
    return quantity


def number_to_fraction(value):
    """Convert a number to a fraction string for display ('1 1/2', '2/3')."""
    if not value:
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return value
    if not math.isfinite(number):
        return value
    # Whole numbers don't need a fraction
    if number == int(number):
        return str(int(number))

    # Fraction of the shortest decimal repr, e.g. 0.333 -> 333/1000
    exact = Fraction(repr(number))
    numerator, denominator = exact.numerator, exact.denominator
    base = 0
    # 3/2 becomes 1 1/2
    if numerator > denominator:
        base = numerator // denominator
        numerator -= base * denominator

    fraction = f'{numerator}/{denominator}'
    fraction = THIRDS_ARTIFACTS.get(fraction, fraction)
    if base:
        return f'{base} {fraction}'
    return fraction


def parse_metric_to_non_metric(unit, quantity):
    """Spoon and cup measures are shown as fractions, everything else as is."""
    if unit in SPOON_UNITS:
        return number_to_fraction(quantity)
    return quantity


def _match_unit(line):
    """Return (rule, match) for the first rule found in the line, in table order."""
    for rule in UNIT_RULES:
        match = rule.pattern.search(line)
        if match:
            if rule.extract is not None:
                match = rule.extract.search(line, match.start())
            return rule, match
    return None, None


def _parse_line(line):
    rule, match = _match_unit(line)
    if rule is not None:
        quantity_text = line[:match.start()].strip()
        name = line[match.end():].strip()
        try:
            quantity = string_to_number(quantity_text)
        except InvalidQuantity as e:
            logger.warning("Rejected ingredient line %r: %s", line, e)
            raise UnparsableIngredientLine(line) from e
        if not name:
            logger.warning("Rejected ingredient line %r: no ingredient name", line)
            raise UnparsableIngredientLine(line)
        return {'quantity': quantity, 'unit': rule.name, 'name': name}

    # No unit: this is either <quantity> <name> or just <name>
    quantity_text, _, name = line.partition(' ')
    if name:
        try:
            return {'quantity': string_to_number(quantity_text), 'name': name.strip()}
        except InvalidQuantity:
            pass
    return {'name': line}


def parse_ingredients(text):
    """
    Parse a multi-line ingredient list into ingredient dicts.

    Each line becomes {'quantity', 'unit', 'name', 'group'}, with keys left
    out when they don't apply. Lines containing '#' start a group named by
    the text after the '#'. Blank lines are skipped.

    Raises UnparsableIngredientLine if a line has a unit but its quantity
    cannot be read; nothing is returned for the other lines in that case.
    """
    ingredients = []
    group = None
    for raw_line in LINE_BREAK.split(text):
        line = raw_line.strip()
        if not line:
            continue
        if '#' in line:
            group = line.split('#', 1)[1].strip()
            continue

        ingredient = _parse_line(line)
        if group:
            ingredient['group'] = group
        ingredients.append(ingredient)
    return ingredients
