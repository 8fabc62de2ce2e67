from flask_socketio import join_room, leave_room, emit
from keyla import socketio


def _room(profile_id: str) -> str:
    return f"profile:{profile_id}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_profile(data):
    profile_id = (data or {}).get('profile_id')
    if not profile_id:
        emit('error', {'message': 'profile_id is required'})
        return
    room = _room(profile_id)
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_profile(data):
    profile_id = (data or {}).get('profile_id')
    if not profile_id:
        emit('error', {'message': 'profile_id is required'})
        return
    room = _room(profile_id)
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def notify_profile(profile_id: str, event: str, payload: dict) -> None:
    """Push ``event`` to every client subscribed to the profile's room."""
    # Services also run outside a configured Socket.IO server (CLI, unit tests)
    if socketio.server is None:
        return
    socketio.emit(event, {'profileId': profile_id, **payload}, to=_room(profile_id), namespace='/ws')


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'join_profile': handle_join_profile,
        'leave_profile': handle_leave_profile,
        'ping': handle_ping,
    }
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        for event, handler in handlers.items():
            socketio.on_event(event, handler, namespace=namespace)
