from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from keyla import db
from keyla.models import ProfileRow
from keyla.records import Profile


class ProfileRepository:
    def create(self, profile: Profile) -> Profile:
        raise NotImplementedError

    def get(self, profile_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def list(self) -> List[Profile]:
        raise NotImplementedError

    def update(self, profile: Profile) -> Optional[Profile]:
        raise NotImplementedError

    def delete(self, profile_id: str) -> bool:
        raise NotImplementedError

    def delete_all(self) -> bool:
        raise NotImplementedError


class InMemoryProfileRepository(ProfileRepository):
    def __init__(self) -> None:
        self._profiles: Dict[str, Profile] = {}
        self._lock = threading.Lock()

    def create(self, profile: Profile) -> Profile:
        with self._lock:
            profile_id = str(uuid.uuid4())
            while profile_id in self._profiles:
                profile_id = str(uuid.uuid4())
            saved = replace(profile, id=profile_id, settings=set(profile.settings))
            self._profiles[profile_id] = saved
            return saved

    def get(self, profile_id: str) -> Optional[Profile]:
        return self._profiles.get(profile_id)

    def list(self) -> List[Profile]:
        with self._lock:
            return list(self._profiles.values())

    def update(self, profile: Profile) -> Optional[Profile]:
        with self._lock:
            if profile.id not in self._profiles:
                return None
            self._profiles[profile.id] = profile
            return profile

    def delete(self, profile_id: str) -> bool:
        with self._lock:
            return self._profiles.pop(profile_id, None) is not None

    def delete_all(self) -> bool:
        with self._lock:
            had_any = bool(self._profiles)
            self._profiles.clear()
            return had_any


def _to_profile(row: ProfileRow) -> Profile:
    return Profile(id=row.id, name=row.name, email=row.email, settings=set(row.settings or []))


class SqlProfileRepository(ProfileRepository):
    def create(self, profile: Profile) -> Profile:
        row = ProfileRow(id=str(uuid.uuid4()), name=profile.name, email=profile.email,
                         settings=sorted(profile.settings))
        db.session.add(row)
        db.session.commit()
        return _to_profile(row)

    def get(self, profile_id: str) -> Optional[Profile]:
        row = db.session.get(ProfileRow, profile_id)
        return _to_profile(row) if row else None

    def list(self) -> List[Profile]:
        return [_to_profile(row) for row in ProfileRow.query.all()]

    def update(self, profile: Profile) -> Optional[Profile]:
        row = db.session.get(ProfileRow, profile.id) if profile.id else None
        if not row:
            return None
        row.name = profile.name
        row.email = profile.email
        row.settings = sorted(profile.settings)
        db.session.add(row)
        db.session.commit()
        return _to_profile(row)

    def delete(self, profile_id: str) -> bool:
        deleted = ProfileRow.query.filter_by(id=profile_id).delete()
        db.session.commit()
        return deleted > 0

    def delete_all(self) -> bool:
        deleted = ProfileRow.query.delete()
        db.session.commit()
        return deleted > 0
