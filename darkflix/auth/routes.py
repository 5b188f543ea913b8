from flask import Blueprint, current_app, jsonify
from flask_login import current_user, login_user, logout_user
from sqlalchemy.exc import IntegrityError

from ..extensions import db, login_manager
from ..forms import form_fields
from .models import User

auth_bp = Blueprint('auth', __name__)


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'error': 'Login required'}), 401


@auth_bp.route('/signup', methods=['POST'])
def signup():
    data = form_fields('name', 'email', 'password', 'confirmPassword')
    name = data['name'].strip()
    email = data['email'].strip()
    password = data['password']
    confirm_password = data['confirmPassword']

    if not name or not email or not password or not confirm_password:
        return jsonify({'error': 'Please fill in all fields.'}), 400
    if password != confirm_password:
        return jsonify({'error': 'Passwords do not match.'}), 400
    if User.query.filter_by(email=email).first():
        return jsonify({'error': 'An account with that email already exists.'}), 409

    user = User(name=name, email=email)
    user.set_password(password)
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': 'An account with that email already exists.'}), 409

    # Auto-login
    login_user(user)
    current_app.logger.info(f"New account {user.id} for {email}")
    return jsonify({'user': user.to_dict()}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    data = form_fields('email', 'password')
    email = data['email'].strip()
    password = data['password']
    if not email or not password:
        return jsonify({'error': 'Please enter email and password.'}), 400

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        return jsonify({'error': 'Invalid email or password.'}), 401

    login_user(user)
    return jsonify({'user': user.to_dict()})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    logout_user()
    return jsonify({'success': True})


@auth_bp.route('/me')
def me():
    if not current_user.is_authenticated:
        return jsonify({'user': None})
    return jsonify({'user': current_user.to_dict()})
