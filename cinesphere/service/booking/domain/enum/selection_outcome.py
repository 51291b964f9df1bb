from enum import StrEnum


class SelectionOutcome(StrEnum):
    """Result of toggling one seat within a seat selection."""

    SELECTED = 'selected'
    DESELECTED = 'deselected'
    UNAVAILABLE = 'unavailable'
    NOT_FOUND = 'not_found'
