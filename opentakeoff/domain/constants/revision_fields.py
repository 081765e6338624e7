"""Constants for Revision and HistoryCursor field names"""


class RevisionFields:
    """Field name constants for Revision model"""
    ENTITY_TYPE = "entity_type"
    ENTITY_ID = "entity_id"
    PROJECT_ID = "project_id"
    PLAN_ID = "plan_id"
    SEQUENCE = "sequence"
    PARENT_SEQUENCE = "parent_sequence"
    CHANGE_TYPE = "change_type"
    SNAPSHOT = "snapshot"
    SNAPSHOT_DEVICE_ID = "snapshot.device_id"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"


class HistoryCursorFields:
    """Field name constants for HistoryCursor model (keyed by entity id)"""
    ENTITY_TYPE = "entity_type"
    PROJECT_ID = "project_id"
    PLAN_ID = "plan_id"
    SEQUENCE = "sequence"
    LAST_SEQUENCE = "last_sequence"
    LAST_ACTION = "last_action"
    REVISION_CREATED_AT = "revision_created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # entity id
