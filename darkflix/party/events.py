from flask_socketio import join_room, leave_room

from ..extensions import socketio


@socketio.on('join')
def handle_join(data):
    room_code = (data or {}).get('room')
    if room_code:
        join_room(room_code)


@socketio.on('leave')
def handle_leave(data):
    room_code = (data or {}).get('room')
    if room_code:
        leave_room(room_code)
