import os
from datetime import timedelta

class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if not _database_url:
        # Hosted Postgres providers often expose the parts instead of a URL
        pg_user = os.environ.get('PGUSER')
        pg_pass = os.environ.get('PGPASSWORD')
        pg_host = os.environ.get('PGHOST')
        pg_port = os.environ.get('PGPORT')
        pg_db = os.environ.get('PGDATABASE')
        if all([pg_user, pg_pass, pg_host, pg_port, pg_db]):
            _database_url = f"postgresql://{pg_user}:{pg_pass}@{pg_host}:{pg_port}/{pg_db}"

    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JSON Settings
    JSON_AS_ASCII = False

    # Site Profile
    SITE_OWNER = os.environ.get('SITE_OWNER', 'Aravind Sathesh')
    SITE_SHORT_NAME = os.environ.get('SITE_SHORT_NAME', 'Aravind')
    SITE_ROLE = os.environ.get('SITE_ROLE', 'Full-Stack Developer')
    SITE_TAGLINE = os.environ.get(
        'SITE_TAGLINE', 'Building scalable, reliable systems that power seamless experiences.')
    SITE_URL = os.environ.get('SITE_URL', 'https://aravindsathesh.com')
    SITE_DESCRIPTION = os.environ.get(
        'SITE_DESCRIPTION', 'Aravind Sathesh - Professional Portfolio, Full Stack Developer')
    PROFILE_IMAGE = 'profile.jpg'
    OG_IMAGE = 'og-image.png'

    # Contact Links
    CONTACT_EMAIL = os.environ.get('CONTACT_EMAIL', 'aravind.sathesh@gmail.com')
    LINKEDIN_URL = os.environ.get('LINKEDIN_URL', 'https://linkedin.com/in/aravind-sathesh')
    GITHUB_URL = os.environ.get('GITHUB_URL', 'https://github.com/Aravind-Sathesh')

    # Theme & Animation Settings
    DEFAULT_THEME = os.environ.get('DEFAULT_THEME', 'dark')
    PAGE_TRANSITION_MS = 1100
    SKILL_ICON_CDN = os.environ.get('SKILL_ICON_CDN', 'https://cdn.simpleicons.org')
    PARTICLE_SPACING = 80
    PARTICLE_SEED = None
    PARTICLE_REGENERATE_ON_RESIZE = os.environ.get('PARTICLE_REGENERATE_ON_RESIZE', '').lower() in ('1', 'true', 'yes')
    BACKGROUND_DEFAULT_WIDTH = 1920
    BACKGROUND_DEFAULT_HEIGHT = 1080
    BACKGROUND_MAX_WIDTH = 3840
    BACKGROUND_MAX_HEIGHT = 2160
    BACKGROUND_MAX_FRAMES = 600


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing invalid pool settings like pool_size to SQLite's StaticPool.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    PARTICLE_SEED = 7


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
