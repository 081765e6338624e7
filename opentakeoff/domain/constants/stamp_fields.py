"""Constants for Stamp model field names"""


class StampFields:
    """Field name constants for Stamp model"""
    PLAN_ID = "plan_id"
    DEVICE_ID = "device_id"
    LOCATION_ID = "location_id"
    POSITION = "position"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
