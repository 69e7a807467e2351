"""SearchHistoryRepository — Firebase Firestore 구현.

Firestore 컬렉션: 'search_history'
문서 ID: 자동 생성
"""

from __future__ import annotations

from datetime import datetime

from odyssey.domain.entities import SearchHistoryItem
from odyssey.infrastructure.database.firebase_client import run_in_thread
from odyssey.infrastructure.database.repositories.post_repo import to_datetime


def _item_from_doc(doc) -> SearchHistoryItem:
    d = doc.to_dict()
    return SearchHistoryItem(
        id=doc.id,
        user_id=d.get("user_id", ""),
        query=d.get("query", ""),
        type=d.get("type", "location"),
        timestamp=to_datetime(d.get("timestamp")),
    )


class FirestoreSearchHistoryRepository:
    COLLECTION = "search_history"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    async def find(self, user_id: str, query: str, type: str) -> SearchHistoryItem | None:
        def _find():
            q = (
                self._col()
                .where("user_id", "==", user_id)
                .where("query", "==", query)
                .where("type", "==", type)
                .limit(1)
            )
            docs = list(q.stream())
            return _item_from_doc(docs[0]) if docs else None

        return await run_in_thread("search_history.find", _find)

    async def save(self, item: SearchHistoryItem) -> SearchHistoryItem:
        def _save():
            doc_ref = self._col().document()
            doc_ref.set({
                "user_id": item.user_id,
                "query": item.query,
                "type": item.type,
                "timestamp": item.timestamp,
            })
            item.id = doc_ref.id
            return item

        return await run_in_thread("search_history.save", _save)

    async def touch(self, item_id: str, timestamp: datetime) -> None:
        def _touch():
            self._col().document(item_id).update({"timestamp": timestamp})

        await run_in_thread("search_history.touch", _touch)

    async def list_for_user(self, user_id: str, limit: int = 10) -> list[SearchHistoryItem]:
        def _list():
            q = (
                self._col()
                .where("user_id", "==", user_id)
                .order_by("timestamp", direction="DESCENDING")
                .limit(limit)
            )
            return [_item_from_doc(doc) for doc in q.stream()]

        return await run_in_thread("search_history.list", _list)

    async def delete_for_user(self, user_id: str) -> int:
        def _delete_all():
            batch = self._db.batch()
            count = 0
            for doc in self._col().where("user_id", "==", user_id).stream():
                batch.delete(doc.reference)
                count += 1
                # Firestore batch는 최대 500개
                if count % 400 == 0:
                    batch.commit()
                    batch = self._db.batch()
            if count % 400 != 0:
                batch.commit()
            return count

        return await run_in_thread("search_history.delete_for_user", _delete_all)

    async def delete(self, item_id: str) -> None:
        def _delete():
            self._col().document(item_id).delete()

        await run_in_thread("search_history.delete", _delete)
