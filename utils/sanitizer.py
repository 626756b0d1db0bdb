"""
XSS Prevention / Input Sanitization Module

Sanitizes and coerces client-supplied recipe and list data before it is
parsed or stored.
"""

import html
import re
from urllib.parse import urlparse

CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')
# Control characters other than tab and line breaks
CONTROL_CHARS_EXCEPT_LINES = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize text by HTML-escaping special characters.

    This prevents XSS by ensuring that any HTML/JS in the text
    is displayed as literal text rather than being executed.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Strip leading/trailing whitespace
    text = text.strip()

    # HTML escape special characters
    text = html.escape(text)

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length] + '...'

    return text


def sanitize_url(url):
    """
    Sanitize a URL by rejecting dangerous schemes.

    Prevents javascript:, data:, vbscript:, and other dangerous URL schemes
    that could execute code when used in href or src attributes.

    Args:
        url: The URL to validate (can be None)

    Returns:
        The URL if safe, empty string if unsafe or invalid
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()

    dangerous_schemes = {
        'javascript', 'data', 'vbscript', 'file',
        'blob', 'about', 'chrome', 'moz-extension'
    }

    try:
        parsed = urlparse(url)
    except ValueError:
        return ''

    # Only allow http and https
    if parsed.scheme.lower() not in ('http', 'https', ''):
        return ''

    # Encoded or embedded schemes, e.g. 'http://x/?javascript:...'
    url_lower = url.lower()
    for dangerous in dangerous_schemes:
        if dangerous + ':' in url_lower:
            return ''
        encoded = dangerous.replace('a', '%61')
        if encoded != dangerous and encoded in url_lower:
            return ''

    return url


def sanitize_title(title, max_length=200):
    """
    Sanitize a recipe or list title for safe storage and display.

    Returns an empty string when nothing is left after cleaning, so
    callers can reject the request.
    """
    if not title:
        return ''

    if not isinstance(title, str):
        title = str(title)

    # Remove control characters and null bytes
    title = CONTROL_CHARS.sub('', title.strip())

    title = html.escape(title)

    # Collapse multiple spaces
    title = re.sub(r'\s+', ' ', title)

    if len(title) > max_length:
        title = title[:max_length-3] + '...'

    return title


def sanitize_instructions(instructions, max_length=50000):
    """
    Sanitize recipe instructions.

    Preserves newlines for formatting but escapes HTML.
    """
    if not instructions:
        return ''

    if not isinstance(instructions, str):
        instructions = str(instructions)

    instructions = html.escape(instructions.strip())

    if len(instructions) > max_length:
        instructions = instructions[:max_length] + '\n...(truncated)'

    return instructions


def sanitize_ingredients_text(text, max_length=20000):
    """
    Clean a multi-line ingredient list before it is parsed.

    Line breaks are kept since each line is one ingredient. Text is not
    HTML-escaped here: the parser needs the raw characters ('#', '½').

    Returns None if the text is longer than max_length, rather than
    truncating and losing ingredients.
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = CONTROL_CHARS_EXCEPT_LINES.sub('', text)

    if len(text) > max_length:
        return None

    return text


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value not in (None, '') else default
        if result is None:
            return None
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value not in (None, '') else default
        if result is None:
            return None
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def safe_bool(value):
    """Read JSON booleans and common form spellings ('true', '1', 'on')."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)
