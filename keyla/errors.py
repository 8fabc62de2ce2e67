"""Application errors and their JSON rendering."""

from flask import jsonify
from werkzeug.exceptions import HTTPException


class AppError(Exception):
    status_code = 500
    code = 'UNEXPECTED_ERROR'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message, 'code': self.code}


class ProfileNotFound(AppError):
    status_code = 404
    code = 'PROFILE_NOT_FOUND'

    def __init__(self, profile_id):
        super().__init__(f"Profile with ID '{profile_id}' not found")


class TestNotFound(AppError):
    status_code = 404
    code = 'TEST_NOT_FOUND'
    __test__ = False

    def __init__(self, test_id):
        super().__init__(f"Test with ID '{test_id}' not found")


class TestAlreadyCompleted(AppError):
    status_code = 409
    code = 'TEST_ALREADY_COMPLETED'
    __test__ = False

    def __init__(self, test_id):
        super().__init__(f"Test '{test_id}' has already been completed")


class DictionaryNotFound(AppError):
    status_code = 404
    code = 'DICTIONARY_NOT_FOUND'

    def __init__(self, name, language=None):
        where = f" for language '{language}'" if language else ''
        super().__init__(f"Dictionary '{name}' not found{where}")


class InvalidModifier(AppError):
    status_code = 400
    code = 'INVALID_MODIFIER'

    def __init__(self, modifier, available):
        super().__init__(f"Invalid modifier '{modifier}'. Available: {', '.join(sorted(available))}")


class InvalidMerger(AppError):
    status_code = 400
    code = 'INVALID_MERGER'

    def __init__(self, merger, available):
        super().__init__(f"Invalid merger '{merger}'. Available: {', '.join(sorted(available))}")


class ValidationError(AppError):
    status_code = 400
    code = 'VALIDATION_ERROR'

    def __init__(self, field, reason):
        super().__init__(f"Validation failed for field '{field}': {reason}")
        self.field = field


class ConfigKeyNotFound(AppError):
    status_code = 404
    code = 'CONFIG_KEY_NOT_FOUND'

    def __init__(self, key):
        super().__init__(f"Configuration key '{key}' not found")


class InvalidConfigValue(AppError):
    status_code = 400
    code = 'INVALID_CONFIG_VALUE'

    def __init__(self, key, value, reason):
        super().__init__(f"Invalid value {value!r} for '{key}': {reason}")


class TestCreationFailed(AppError):
    status_code = 500
    code = 'TEST_CREATION_FAILED'
    __test__ = False

    def __init__(self, reason):
        super().__init__(f"Failed to create test: {reason}")


def register_error_handlers(flask_app):
    @flask_app.errorhandler(AppError)
    def handle_app_error(error):
        if error.status_code >= 500:
            flask_app.logger.error(f"[error] {error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description, 'code': error.name.upper().replace(' ', '_')}), error.code
