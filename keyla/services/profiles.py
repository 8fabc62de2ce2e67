from dataclasses import replace
from typing import List

from keyla.errors import ProfileNotFound, ValidationError
from keyla.records import Profile


def _validated_settings(settings):
    if settings is None:
        return set()
    if not isinstance(settings, (list, tuple, set)) or not all(isinstance(s, str) for s in settings):
        raise ValidationError('settings', 'must be a list of strings')
    return set(settings)


def _validated_text(data, field):
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, 'is required')
    return value.strip()


class ProfileService:
    def __init__(self, repository):
        self.repository = repository

    def create_profile(self, data: dict) -> Profile:
        name = _validated_text(data, 'name')
        email = _validated_text(data, 'email')
        if '@' not in email:
            raise ValidationError('email', 'must be an email address')
        return self.repository.create(Profile(name=name, email=email, settings=_validated_settings(data.get('settings'))))

    def get_profile(self, profile_id: str) -> Profile:
        profile = self.repository.get(profile_id)
        if not profile:
            raise ProfileNotFound(profile_id)
        return profile

    def list_profiles(self) -> List[Profile]:
        return self.repository.list()

    def update_profile(self, profile_id: str, data: dict) -> Profile:
        profile = replace(self.get_profile(profile_id))
        if 'name' in data:
            profile.name = _validated_text(data, 'name')
        if 'email' in data:
            email = _validated_text(data, 'email')
            if '@' not in email:
                raise ValidationError('email', 'must be an email address')
            profile.email = email
        if 'settings' in data:
            profile.settings = _validated_settings(data['settings'])
        updated = self.repository.update(profile)
        if not updated:
            raise ProfileNotFound(profile_id)
        return updated

    def delete_profile(self, profile_id: str) -> None:
        if not self.repository.delete(profile_id):
            raise ProfileNotFound(profile_id)
