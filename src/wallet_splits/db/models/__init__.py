"""ORM models mirroring the ledger store's relational schema."""

from wallet_splits.db.models.group import Group, GroupMember
from wallet_splits.db.models.payment import Payment
from wallet_splits.db.models.split import Split, SplitMember, SplitType
from wallet_splits.db.models.user import User

__all__ = [
    "Group",
    "GroupMember",
    "Payment",
    "Split",
    "SplitMember",
    "SplitType",
    "User",
]
