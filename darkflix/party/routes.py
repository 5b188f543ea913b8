from functools import wraps

from flask import Blueprint, current_app, jsonify, request
from flask_login import current_user

from ..extensions import login_manager, socketio
from ..forms import form_fields
from .errors import WatchPartyError
from .registry import get_registry

party_bp = Blueprint('party', __name__)


def login_required_if(config_key):
    """Like ``login_required`` but only when ``config_key`` is enabled."""
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            if current_app.config.get(config_key) and not current_user.is_authenticated:
                return login_manager.unauthorized()
            return view(*args, **kwargs)
        return wrapped
    return decorator


writes_guard = login_required_if('WATCH_PARTY_LOGIN_REQUIRED_FOR_WRITES')
reads_guard = login_required_if('WATCH_PARTY_LOGIN_REQUIRED_FOR_READS')


@party_bp.errorhandler(WatchPartyError)
def handle_watch_party_error(e):
    return jsonify({'error': e.message}), e.status_code


@party_bp.route('/create-room')
@writes_guard
def create_room():
    code = get_registry().create_room(request.args.get('username', ''))
    return jsonify({'roomCode': code})


@party_bp.route('/set-room-details/<room_code>')
@writes_guard
def set_room_details(room_code):
    get_registry().set_room_details(
        room_code,
        request.args.get('url', ''),
        request.args.get('movieTitle', ''),
    )
    return jsonify({'success': True})


@party_bp.route('/time/<room_code>')
@reads_guard
def current_time(room_code):
    return jsonify({'currentTime': get_registry().get_current_time(room_code)})


@party_bp.route('/room-details/<room_code>')
@reads_guard
def room_details(room_code):
    return jsonify(get_registry().get_room_details(room_code))


@party_bp.route('/rooms')
@reads_guard
def list_rooms():
    return jsonify(get_registry().list_configured_rooms())


@party_bp.route('/send-message/<room_code>', methods=['POST'])
@writes_guard
def send_message(room_code):
    data = form_fields('username', 'profilePicture', 'message')
    msg = get_registry().post_message(
        room_code,
        data['username'].strip(),
        data['profilePicture'] or None,
        data['message'].strip(),
    )
    # Push to anyone listening on the room's socket channel
    socketio.emit('message', msg.to_dict(), to=room_code)
    return jsonify({'success': True})
