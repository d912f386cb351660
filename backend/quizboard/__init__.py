from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config
from quizboard.errors import GameError

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__, static_folder=None)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or '*'
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry per app so tests get isolated games
    from quizboard.store import GameStore
    flask_app.extensions['game_store'] = GameStore()

    from quizboard.api.games import games
    # Mount game routes under /api to match frontend API client
    flask_app.register_blueprint(games, url_prefix='/api/games')

    # Registered last so its catch-all never shadows the API
    from quizboard.main import main
    flask_app.register_blueprint(main)

    @flask_app.errorhandler(GameError)
    def handle_game_error(exc):
        flask_app.logger.warning(f"[rejected] {type(exc).__name__}: {exc.message}")
        return jsonify(exc.to_dict()), exc.status_code

    from quizboard.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    return flask_app
