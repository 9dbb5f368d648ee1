"""
Verification Repository - seller verification requests
"""
from typing import Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.verification import VerificationRequest


class VerificationRepository:
    """
    Verification requests, one active request per seller email

    Submitting again for the same email replaces the previous request.
    """

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    @staticmethod
    def _map_row_to_request(row: dict) -> VerificationRequest:
        return VerificationRequest.model_validate(row)

    def find_by_email(self, email: str) -> Optional[VerificationRequest]:
        email_lower = email.lower()
        for row in self.store.verification_requests:
            if row['sellerEmail'].lower() == email_lower:
                return self._map_row_to_request(row)
        return None

    def find_by_id(self, request_id: str) -> Optional[VerificationRequest]:
        for row in self.store.verification_requests:
            if row['id'] == request_id:
                return self._map_row_to_request(row)
        return None

    def save(self, request: VerificationRequest) -> VerificationRequest:
        """Insert, or replace the request with the same ID (or else the same seller email)"""
        data = request.to_dict()
        rows = self.store.verification_requests
        email_lower = request.seller_email.lower()
        index = next((i for i, row in enumerate(rows) if row['id'] == request.id), None)
        if index is None:
            index = next((i for i, row in enumerate(rows) if row['sellerEmail'].lower() == email_lower), None)
        if index is not None:
            rows[index] = data
            return request

        rows.append(data)
        return request
