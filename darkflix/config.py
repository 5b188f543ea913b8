import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'super-secret-darkflix'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///darkflix.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    TMDB_API_KEY = os.environ.get('TMDB_API_KEY', '')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Watch party
    WATCH_PARTY_TICK_SECONDS = int(os.environ.get('WATCH_PARTY_TICK_SECONDS', 5))
    WATCH_PARTY_REAP_INTERVAL_SECONDS = int(os.environ.get('WATCH_PARTY_REAP_INTERVAL_SECONDS', 5 * 60))
    WATCH_PARTY_INACTIVITY_SECONDS = int(os.environ.get('WATCH_PARTY_INACTIVITY_SECONDS', 30 * 60))
    WATCH_PARTY_RATE_LIMIT_MS = int(os.environ.get('WATCH_PARTY_RATE_LIMIT_MS', 5000))
    WATCH_PARTY_RATE_LIMIT_PER_ROOM = _env_bool('WATCH_PARTY_RATE_LIMIT_PER_ROOM')
    WATCH_PARTY_CODE_LENGTH = int(os.environ.get('WATCH_PARTY_CODE_LENGTH', 5))
    WATCH_PARTY_LOGIN_REQUIRED_FOR_WRITES = _env_bool('WATCH_PARTY_LOGIN_REQUIRED_FOR_WRITES')
    WATCH_PARTY_LOGIN_REQUIRED_FOR_READS = _env_bool('WATCH_PARTY_LOGIN_REQUIRED_FOR_READS')
    WATCH_PARTY_BACKGROUND_TASKS = _env_bool('WATCH_PARTY_BACKGROUND_TASKS', True)


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    BCRYPT_LOG_ROUNDS = 4
    WATCH_PARTY_BACKGROUND_TASKS = False
    WATCH_PARTY_LOGIN_REQUIRED_FOR_WRITES = False
    WATCH_PARTY_LOGIN_REQUIRED_FOR_READS = False
    WATCH_PARTY_RATE_LIMIT_PER_ROOM = False
