"""Constants for Project model field names"""


class ProjectFields:
    """Field name constants for Project model"""
    NAME = "name"
    DESCRIPTION = "description"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # Application-generated UUID string
