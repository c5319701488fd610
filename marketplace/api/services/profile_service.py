from __future__ import annotations

from marketplace.api.db_access import DatabaseClient
from marketplace.api.schemas.profile_schemas import ProfileOut
from marketplace.common.models import Profile, is_storable_id


class ProfileService:
    """Profile lookups used by caller identity resolution."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def get_profile(self, profile_id: int) -> ProfileOut | None:
        if not is_storable_id(profile_id):
            return None
        with self.db.session() as session:
            profile = session.get(Profile, profile_id)
            if profile is None:
                return None
            return ProfileOut.model_validate(profile)
