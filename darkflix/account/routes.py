from flask import Blueprint, jsonify
from flask_login import current_user, login_required

from ..extensions import db
from ..forms import form_fields

account_bp = Blueprint('account', __name__)


@account_bp.route('/profile', methods=['GET'])
@login_required
def profile():
    return jsonify({'user': current_user.to_dict()})


@account_bp.route('/profile', methods=['POST'])
@login_required
def update_profile():
    data = form_fields('name', 'bio')
    name = data['name'].strip()
    if not name:
        return jsonify({'error': 'Name is required.'}), 400

    current_user.name = name
    current_user.bio = data['bio']
    db.session.commit()
    return jsonify({'message': 'Profile updated!', 'user': current_user.to_dict()})
