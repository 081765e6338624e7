"""Constants for Plan model field names"""


class PlanFields:
    """Field name constants for Plan model"""
    PROJECT_ID = "project_id"
    NAME = "name"
    PAGE_NUMBER = "page_number"
    PAGE_COUNT = "page_count"
    FILE_PATH = "file_path"
    FILE_SIZE = "file_size"
    FILE_HASH = "file_hash"
    WIDTH = "width"
    HEIGHT = "height"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
