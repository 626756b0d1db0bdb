# Utility modules for the Recipe Box API
from .auth import login_required, verify_token, AuthError
from .sanitizer import (
    sanitize_text, sanitize_url, sanitize_title,
    sanitize_instructions, sanitize_ingredients_text,
    safe_int, safe_float, safe_bool
)
