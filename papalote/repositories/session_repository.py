"""
Session Repository - per-visitor browsing state

Each visitor session holds four lists: cart lines, comparison products,
recently viewed product IDs and search queries.
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store


class SessionRepository:
    """Raw access to a visitor's session lists"""

    def __init__(self, session_id: str, store: Optional[DataStore] = None):
        self.session_id = session_id
        self.store = store or get_store()

    def get_list(self, name: str) -> list:
        """The live list for one bucket ("cart", "comparison", ...)"""
        return self.store.session(self.session_id)[name]

    def set_list(self, name: str, values: List) -> list:
        self.store.session(self.session_id)[name] = list(values)
        return self.store.session(self.session_id)[name]
