"""
Address Repository - saved shipping addresses per buyer
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.order import SavedAddress


class AddressRepository:
    """Saved addresses keyed by buyer email"""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    def _rows(self, email: str) -> List[dict]:
        return self.store.addresses.setdefault(email.lower(), [])

    def find_by_email(self, email: str) -> List[SavedAddress]:
        return [SavedAddress.model_validate(row) for row in self._rows(email)]

    def save(self, email: str, address: SavedAddress) -> SavedAddress:
        """
        Save an address

        A new default unsets the previous default.
        An address with an existing ID replaces it in place.
        """
        rows = self._rows(email)

        if address.is_default:
            for row in rows:
                row['isDefault'] = False

        data = address.to_dict()
        for index, row in enumerate(rows):
            if row['id'] == address.id:
                rows[index] = data
                break
        else:
            rows.append(data)

        return address

    def delete(self, email: str, address_id: str) -> bool:
        rows = self._rows(email)
        remaining = [row for row in rows if row['id'] != address_id]
        self.store.addresses[email.lower()] = remaining
        return len(remaining) != len(rows)
