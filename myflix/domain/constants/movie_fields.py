"""Constants for Movie model field names"""


class MovieFields:
    """Field name constants for Movie model"""
    ID = "id"
    TITLE = "title"
    DESCRIPTION = "description"
    GENRE = "genre"
    GENRE_NAME = "genre.name"
    DIRECTOR = "director"
    DIRECTOR_NAME = "director.name"
    IMAGE_URL = "image_url"
    RELEASE = "release"
    FEATURED = "featured"
    ACTORS = "actors"

    # Nested documents
    NAME = "name"
    BIO = "bio"

    # MongoDB specific
    MONGO_ID = "_id"
