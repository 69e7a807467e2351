"""ProfileRepository — Firebase Firestore 구현.

Firestore 컬렉션: 'profiles'
문서 ID: 사용자 ID
"""

from __future__ import annotations

from odyssey.domain.entities import Profile
from odyssey.domain.value_objects.post_query import ilike
from odyssey.infrastructure.database.firebase_client import run_in_thread
from odyssey.infrastructure.database.repositories.post_repo import to_datetime


def _profile_from_doc(doc) -> Profile:
    d = doc.to_dict()
    return Profile(
        id=doc.id,
        username=d.get("username"),
        full_name=d.get("full_name"),
        avatar_url=d.get("avatar_url"),
        bio=d.get("bio"),
        website=d.get("website"),
        followers_count=d.get("followers_count") or 0,
        following_count=d.get("following_count") or 0,
        updated_at=to_datetime(d.get("updated_at")),
    )


class FirestoreProfileRepository:
    COLLECTION = "profiles"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    async def search(self, text: str, limit: int = 20) -> list[Profile]:
        def _search():
            matches = []
            # 텍스트 검색은 클라이언트에서 필터링
            for doc in self._col().stream():
                profile = _profile_from_doc(doc)
                if ilike(profile.username, text) or ilike(profile.full_name, text):
                    matches.append(profile)
                    if len(matches) >= limit:
                        break
            return matches

        return await run_in_thread("profiles.search", _search)

    async def find_by_username(self, text: str) -> Profile | None:
        def _find():
            candidates = [
                p for p in (_profile_from_doc(d) for d in self._col().stream())
                if ilike(p.username, text)
            ]
            for profile in candidates:
                if profile.username.lower() == text.lower():
                    return profile
            return candidates[0] if candidates else None

        return await run_in_thread("profiles.find_by_username", _find)

    async def top_by_followers(self, limit: int = 10) -> list[Profile]:
        def _top():
            q = self._col().order_by("followers_count", direction="DESCENDING").limit(limit)
            return [_profile_from_doc(doc) for doc in q.stream()]

        return await run_in_thread("profiles.top_by_followers", _top)
