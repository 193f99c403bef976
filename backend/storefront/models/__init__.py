from storefront.models.address import Address
from storefront.models.saved_item import SavedItem
from storefront.models.user import User

__all__ = [
    "Address",
    "SavedItem",
    "User",
]
