from flask import Blueprint, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'name': 'keyla', 'message': 'Typing test API', 'api': '/api'})


@main.route('/healthz')
def healthz():
    return jsonify({'status': 'ok'})
