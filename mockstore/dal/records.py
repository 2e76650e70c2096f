from __future__ import annotations

import itertools
from typing import Any, Dict, List, Optional


class RecordCollection:
    """Process-lifetime store of JSON records keyed by string id.

    Ids handed out by ``next_id`` come from a counter so a delete never
    frees an id that a later create could collide with.
    """

    def __init__(self, name: str):
        self.name = name
        self._docs: Dict[str, Dict[str, Any]] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> str:
        while True:
            rid = str(next(self._ids))
            if rid not in self._docs:
                return rid

    def insert(self, doc: Dict[str, Any]) -> str:
        rid = self.next_id()
        self._docs[rid] = dict(doc)
        return rid

    def get(self, rid: str) -> Optional[Dict[str, Any]]:
        return self._docs.get(rid)

    def list(self) -> List[Dict[str, Any]]:
        return list(self._docs.values())

    def replace(self, rid: str, doc: Dict[str, Any]) -> Dict[str, Any]:
        self._docs[rid] = dict(doc)
        return self._docs[rid]

    def merge(self, rid: str, patch: Dict[str, Any], *, create: bool = False) -> Optional[Dict[str, Any]]:
        doc = self._docs.get(rid)
        if doc is None:
            if not create:
                return None
            doc = self._docs[rid] = {}
        doc.update(patch)
        return doc

    def delete(self, rid: str) -> bool:
        return self._docs.pop(rid, None) is not None

    def __len__(self) -> int:
        return len(self._docs)
