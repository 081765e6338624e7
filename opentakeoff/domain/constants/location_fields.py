"""Constants for Location model field names"""


class LocationFields:
    """Field name constants for Location model"""
    PLAN_ID = "plan_id"
    NAME = "name"
    TYPE = "type"
    BOUNDS = "bounds"
    VERTICES = "vertices"
    COLOR = "color"
    REVISION = "revision"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
