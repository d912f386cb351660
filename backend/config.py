import os

BACKEND_ROOT = os.path.abspath(os.path.dirname(__file__))

def _parse_origins(raw):
    origins = [o.strip() for o in raw.split(',') if o.strip()]
    if not origins or '*' in origins:
        return '*'
    return origins

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated; '*' allows any origin
    CORS_ORIGINS = _parse_origins(os.environ.get('CORS_ORIGINS', '*'))
    # Prebuilt browser client served for non-API paths (optional)
    CLIENT_BUILD_DIR = os.environ.get('CLIENT_BUILD_DIR') or os.path.join(BACKEND_ROOT, '..', 'client', 'build')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    # Redraws allowed when a generated game code is already taken
    GAME_CODE_MAX_ATTEMPTS = int(os.environ.get('GAME_CODE_MAX_ATTEMPTS', '100'))
