"""Constants for Device model field names"""


class DeviceFields:
    """Field name constants for Device model"""
    PROJECT_ID = "project_id"
    NAME = "name"
    DESCRIPTION = "description"
    COLOR = "color"
    ICON_KEY = "icon_key"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
