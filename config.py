"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///recipes.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Request settings
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB max JSON body

    # Google OAuth2 token verification: ID tokens come from the web client,
    # access tokens from the mobile client
    GOOGLE_CLIENT_ID = os.environ.get('CLIENT_ID', '')
    GOOGLE_WEBCLIENT_ID = os.environ.get('WEBCLIENT_ID', '')
    GOOGLE_TOKENINFO_URL = os.environ.get('GOOGLE_TOKENINFO_URL', 'https://oauth2.googleapis.com/tokeninfo')
    AUTH_TIMEOUT = float(os.environ.get('AUTH_TIMEOUT', '5'))

    # Search settings
    SEARCH_PAGE_SIZE = int(os.environ.get('SEARCH_PAGE_SIZE', '12'))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    GOOGLE_CLIENT_ID = ''
    GOOGLE_WEBCLIENT_ID = 'test-web-client'
    LOG_LEVEL = 'WARNING'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
