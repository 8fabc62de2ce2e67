from flask import Blueprint, jsonify, request, current_app

from keyla.errors import ValidationError
from keyla.services import get_services

config_api = Blueprint('config_api', __name__)


@config_api.route('', methods=['GET'])
def list_config():
    return jsonify({'entries': get_services().configuration.list_entries()})


@config_api.route('/current', methods=['GET'])
def current_config():
    return jsonify(get_services().configuration.current())


@config_api.route('/reload', methods=['POST'])
def reload_config():
    values = get_services().configuration.reload()
    current_app.logger.info("[api] configuration reloaded")
    return jsonify({'success': True, 'message': 'Configuration reloaded', 'config': values})


@config_api.route('/reset', methods=['POST'])
def reset_config():
    values = get_services().configuration.reset()
    current_app.logger.info("[api] configuration reset")
    return jsonify({'success': True, 'message': 'Configuration reset to defaults', 'config': values})


@config_api.route('/<string:key>', methods=['GET'])
def get_config(key):
    return jsonify(get_services().configuration.get_entry(key))


@config_api.route('/<string:key>', methods=['PUT'])
def update_config(key):
    data = request.get_json(silent=True) or {}
    if 'value' not in data:
        raise ValidationError('value', 'is required')
    entry = get_services().configuration.update(key, data['value'])
    return jsonify({'success': True, 'message': f"Updated {key}", 'entry': entry})
