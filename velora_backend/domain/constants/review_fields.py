"""Constants for Review model field names"""


class ReviewFields:
    """Field name constants for Review model"""
    ID = "id"
    AUTHOR = "author"
    TEXT = "text"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"
