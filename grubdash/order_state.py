"""
Order status state machine. Any status can follow any other, except that
delivered is terminal and only pending orders may be deleted.
"""

PENDING = "pending"
PREPARING = "preparing"
OUT_FOR_DELIVERY = "out-for-delivery"
DELIVERED = "delivered"

VALID_STATUSES: tuple[str, ...] = (PENDING, PREPARING, OUT_FOR_DELIVERY, DELIVERED)

# Statuses after which the record is frozen
TERMINAL_STATUSES: frozenset[str] = frozenset({DELIVERED})


def is_valid_status(status) -> bool:
    return isinstance(status, str) and status in VALID_STATUSES


def can_update(current_status) -> bool:
    """
    True if an order currently in current_status may still be changed.
    current_status is whatever was stored on create, so it may not be a string at all.
    """
    return not (isinstance(current_status, str) and current_status in TERMINAL_STATUSES)


def can_delete(current_status: str | None) -> bool:
    return current_status == PENDING
