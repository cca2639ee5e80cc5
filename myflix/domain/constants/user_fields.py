"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    PASSWORD = "password"
    EMAIL = "email"
    BIRTHDAY = "birthday"
    FAVORITE_MOVIES = "favorite_movies"
    TO_WATCH = "to_watch"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
