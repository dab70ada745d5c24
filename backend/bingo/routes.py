from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the bingo server!'})

@main.route('/api/state')
def game_state():
    return jsonify(current_app.extensions['bingo_session'].state())
