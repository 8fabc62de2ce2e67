from flask import Blueprint, jsonify, request, current_app

from keyla.services import get_services

profiles = Blueprint('profiles', __name__)


@profiles.route('', methods=['POST'])
def create_profile():
    data = request.get_json(silent=True) or {}
    profile = get_services().profiles.create_profile(data)
    current_app.logger.info(f"[profile-create] id={profile.id}")
    return jsonify(profile.to_dict()), 201


@profiles.route('', methods=['GET'])
def list_profiles():
    items = get_services().profiles.list_profiles()
    return jsonify({'profiles': [p.to_dict() for p in items]})


@profiles.route('/<string:profile_id>', methods=['GET'])
def get_profile(profile_id):
    return jsonify(get_services().profiles.get_profile(profile_id).to_dict())


@profiles.route('/<string:profile_id>', methods=['PUT'])
def update_profile(profile_id):
    data = request.get_json(silent=True) or {}
    return jsonify(get_services().profiles.update_profile(profile_id, data).to_dict())


@profiles.route('/<string:profile_id>', methods=['DELETE'])
def delete_profile(profile_id):
    get_services().profiles.delete_profile(profile_id)
    current_app.logger.info(f"[profile-delete] id={profile_id}")
    return jsonify({'success': True, 'message': f"Profile '{profile_id}' deleted"})


@profiles.route('/<string:profile_id>/tests', methods=['GET'])
def profile_tests(profile_id):
    services = get_services()
    services.profiles.get_profile(profile_id)
    tests = services.typing_tests.tests_by_profile(profile_id, request.args.get('language'))
    return jsonify({'profileId': profile_id, 'tests': [t.to_dict() for t in tests]})


@profiles.route('/<string:profile_id>/last-test', methods=['GET'])
def last_test(profile_id):
    return jsonify(get_services().typing_tests.last_test(profile_id).to_dict())
