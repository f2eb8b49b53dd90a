from flask_socketio import join_room, leave_room, emit
from lightsout import get_stats_tracker

STATS_ROOM = 'stats'


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_subscribe_stats(data=None):
    join_room(STATS_ROOM)
    # Send the current totals right away so the client doesn't wait for the next game
    emit('stats', get_stats_tracker().get_statistics().to_dict())


def handle_unsubscribe_stats(data=None):
    leave_room(STATS_ROOM)
    emit('unsubscribed', {'room': STATS_ROOM})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(socketio, testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('subscribe_stats', handle_subscribe_stats, namespace=namespace)
        socketio.on_event('unsubscribe_stats', handle_unsubscribe_stats, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
