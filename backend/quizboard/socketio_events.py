from flask_socketio import join_room, leave_room, emit

ROLES = ('host', 'viewer')


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_game(data):
    game_code = (data or {}).get('game_code')
    role = (data or {}).get('role') or 'viewer'
    if not game_code:
        emit('error', {'message': 'game_code is required'})
        return
    if role not in ROLES:
        emit('error', {'message': f'role must be one of {", ".join(ROLES)}'})
        return
    room = f"game:{game_code}"
    join_room(room)
    emit('joined', {'room': room, 'role': role})


def handle_leave_game(data):
    game_code = (data or {}).get('game_code')
    if not game_code:
        emit('error', {'message': 'game_code is required'})
        return
    room = f"game:{game_code}"
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    Room membership is dropped by Socket.IO itself on disconnect.
    """
    from quizboard import socketio

    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('join_game', handle_join_game, namespace=namespace)
        socketio.on_event('leave_game', handle_leave_game, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
