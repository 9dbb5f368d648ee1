"""
Message Repository - buyer to seller conversations
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.seller import MessageReply, SellerMessage


class MessageRepository:
    """Repository for SellerMessage data access"""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    @staticmethod
    def _map_row_to_message(row: dict) -> SellerMessage:
        return SellerMessage.model_validate(row)

    def find_by_seller(self, seller_id: str) -> List[SellerMessage]:
        """Messages addressed to a seller, newest first"""
        messages = [
            self._map_row_to_message(row)
            for row in self.store.messages
            if str(row['sellerId']) == str(seller_id)
        ]
        return sorted(messages, key=lambda m: m.date, reverse=True)

    def _find_row(self, message_id: str) -> Optional[dict]:
        for row in self.store.messages:
            if row['id'] == message_id:
                return row
        return None

    def mark_read(self, message_id: str) -> Optional[SellerMessage]:
        row = self._find_row(message_id)
        if row is None:
            return None
        row['status'] = 'read'
        return self._map_row_to_message(row)

    def add_reply(self, message_id: str, reply: MessageReply) -> Optional[SellerMessage]:
        """Append a reply; replying also marks the conversation as read"""
        row = self._find_row(message_id)
        if row is None:
            return None
        row.setdefault('replies', []).append(reply.to_dict())
        row['status'] = 'read'
        return self._map_row_to_message(row)
