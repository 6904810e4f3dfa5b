"""Event type constants."""


class EventTypes:
    """Event type string constants"""

    # progress
    PROGRESS_CREATED = "progress_created"
    MISSION_COMPLETED = "mission_completed"
    PROGRESS_SAVED = "progress_saved"
    PROGRESS_SAVE_FAILED = "progress_save_failed"

    # achievements / synergies / compass
    ACHIEVEMENT_UNLOCKED = "achievement_unlocked"
    SYNERGY_UNLOCKED = "synergy_unlocked"
    COMPASS_NODE_UPDATED = "compass_node_updated"
