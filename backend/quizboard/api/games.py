from flask import Blueprint, jsonify, request, current_app
from quizboard import socketio
from quizboard.errors import InvalidInput, NotFound
from quizboard.models import GAME_CODE_LENGTH, Game, generate_game_code
from quizboard.services.games.scoring import (
    apply_points as svc_apply_points,
    create_teams as svc_create_teams,
    reset as svc_reset,
    scoreboard,
)
from quizboard.store import get_store


games = Blueprint('games', __name__)


def _state(game: Game) -> dict:
    return dict(game.to_dict(), scoreboard=scoreboard(game.teams))


def _broadcast_state(game_code: str, state: dict) -> None:
    # Called with the game's lock held so viewers see updates in apply order
    socketio.emit('state_update', state, to=f"game:{game_code}", namespace='/ws')


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _parse_points(data: dict) -> int:
    points = data.get('points')
    # bool is an int subclass; zero is treated as missing
    if isinstance(points, bool) or not isinstance(points, (int, float)) or not points:
        raise InvalidInput('Points must be a number')
    if isinstance(points, float):
        if not points.is_integer():
            raise InvalidInput('Points must be a whole number')
        points = int(points)
    return points


def _parse_team_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise NotFound('Team not found') from None


def _parse_team_names(data: dict) -> list:
    names = data.get('teamNames')
    if not isinstance(names, list):
        raise InvalidInput('Team names array is required')
    if any(not isinstance(n, str) for n in names):
        raise InvalidInput('Team names must be strings')
    return names


@games.route('', methods=['POST'])
def create_game():
    store = get_store()
    code = generate_game_code(store, current_app.config.get('GAME_CODE_MAX_ATTEMPTS', 100))
    store.get_or_create(code)
    current_app.logger.info(f"[create] game={code}")
    return jsonify({
        'gameCode': code,
        'message': 'Game created successfully',
    }), 201


@games.route('/join', methods=['POST'])
def join_game():
    data = _json_body()
    game_code = data.get('gameCode')
    if not isinstance(game_code, str) or len(game_code) != GAME_CODE_LENGTH:
        raise InvalidInput('Valid 6-digit game code is required')

    with get_store().locked(game_code) as game:
        state = _state(game)
    return jsonify(dict(state, message='Joined game successfully'))


@games.route('/<string:game_code>', methods=['GET'])
def get_game(game_code):
    with get_store().locked(game_code) as game:
        state = _state(game)
    return jsonify(state)


@games.route('/<string:game_code>/teams', methods=['POST'])
def create_teams(game_code):
    data = _json_body()
    names = _parse_team_names(data)

    with get_store().locked(game_code) as game:
        svc_create_teams(game, names)
        state = _state(game)
        _broadcast_state(game_code, state)
    current_app.logger.info(f"[teams] game={game_code} teams={len(names)}")
    message = 'Teams created successfully' if names else 'Empty game started successfully'
    return jsonify(dict(state, message=message))


@games.route('/<string:game_code>/teams/<team_id>/score', methods=['PATCH'])
def update_team_score(game_code, team_id):
    data = _json_body()
    points = _parse_points(data)
    team_id = _parse_team_id(team_id)

    with get_store().locked(game_code) as game:
        team = svc_apply_points(game, team_id, points)
        state = _state(game)
        updated = team.to_dict()
        _broadcast_state(game_code, state)
    current_app.logger.info(
        f"[score] game={game_code} team={team_id} delta={points} score={updated['score']} total={state['totalScore']}"
    )
    return jsonify(dict(state, updatedTeam=updated))


@games.route('/<string:game_code>/reset', methods=['POST'])
def reset_game(game_code):
    with get_store().locked(game_code) as game:
        svc_reset(game)
        state = _state(game)
        _broadcast_state(game_code, state)
    current_app.logger.info(f"[reset] game={game_code}")
    return jsonify(dict(state, message='Game reset successfully'))
