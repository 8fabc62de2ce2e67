from flask import Blueprint, jsonify, request

from keyla.services import get_services

stats = Blueprint('stats', __name__)


@stats.route('', methods=['POST'])
def save_statistics():
    data = request.get_json(silent=True) or {}
    saved = get_services().statistics.save(data)
    return jsonify(saved.to_dict()), 201


@stats.route('/<string:profile_id>', methods=['GET'])
def profile_statistics(profile_id):
    items = get_services().statistics.list_by_profile(profile_id)
    return jsonify({'profileId': profile_id, 'statistics': [s.to_dict() for s in items]})
