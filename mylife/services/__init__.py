from mylife.services.recurrence import is_completed_on, occurs_on, occurrences_between, toggle_completion
from mylife.services.sharing import accessible_items_clause, audit_visibility_clause

__all__ = [
    "is_completed_on",
    "occurs_on",
    "occurrences_between",
    "toggle_completion",
    "accessible_items_clause",
    "audit_visibility_clause",
]
