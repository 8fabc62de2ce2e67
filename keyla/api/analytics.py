from flask import Blueprint, jsonify

from keyla.services import get_services

analytics = Blueprint('analytics', __name__)


@analytics.route('/<string:profile_id>', methods=['GET'])
def user_analytics(profile_id):
    return jsonify(get_services().analytics.user_analytics(profile_id))
