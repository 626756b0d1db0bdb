"""
Authentication Module

Verifies Google OAuth2 bearer tokens and resolves them to a user id.
Every API route is wrapped in login_required; the caller's id is then
available as flask.g.user_id.
"""

import logging
from functools import wraps

import requests
from flask import current_app, g, jsonify, request

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised when a token cannot be resolved to a user id."""
    pass


def _tokeninfo(params):
    """Query the tokeninfo endpoint, returning the payload or raising AuthError."""
    try:
        response = requests.get(
            current_app.config['GOOGLE_TOKENINFO_URL'],
            params=params,
            timeout=current_app.config['AUTH_TIMEOUT'],
        )
    except requests.RequestException as e:
        raise AuthError(f"Token verification request failed: {e}")

    if response.status_code != 200:
        raise AuthError(f"Token rejected with status {response.status_code}")

    try:
        return response.json()
    except ValueError:
        raise AuthError("Token verification returned invalid JSON")


def verify_id_token(token):
    """Verify an ID token issued to the web client and return its subject."""
    payload = _tokeninfo({'id_token': token})
    audience = current_app.config['GOOGLE_WEBCLIENT_ID']
    if audience and payload.get('aud') != audience:
        raise AuthError("ID token issued for another client")
    return payload.get('sub')


def get_user_id_from_token_info(token):
    """Look up the subject of an OAuth2 access token issued to the mobile client."""
    payload = _tokeninfo({'access_token': token})
    audience = current_app.config['GOOGLE_CLIENT_ID']
    if audience and audience not in (payload.get('aud'), payload.get('azp')):
        raise AuthError("Access token issued for another client")
    return payload.get('sub')


def verify_token(token):
    """
    Resolve a bearer token to a user id.

    Tries the token as an ID token first; mobile clients send access
    tokens instead, so fall back to the access token lookup.

    Raises:
        AuthError: If neither lookup yields a user id
    """
    try:
        user_id = verify_id_token(token)
    except AuthError as e:
        logger.debug("Not a valid ID token (%s), trying access token", e)
        user_id = get_user_id_from_token_info(token)

    if not user_id:
        raise AuthError("Token has no subject")
    return user_id


def _unauthorized(message):
    return jsonify({'error': message}), 401


def login_required(view):
    """Reject requests without a verifiable bearer token (401)."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        header = request.headers.get('Authorization')
        if not header:
            return _unauthorized('Missing authorization header')

        parts = header.split(' ')
        token = parts[1] if len(parts) > 1 else ''
        if not token:
            return _unauthorized('Missing oauth2 token in authorization header')

        try:
            g.user_id = verify_token(token)
        except AuthError as e:
            logger.warning("Failed to verify oauth2 token: %s", e)
            return _unauthorized('Failed to verify oauth2 token')

        return view(*args, **kwargs)

    return wrapped
