"""Constants for Beer and Brewery model field names"""


class BeerFields:
    """Field name constants for Beer model"""
    ID = "id"
    NAME = "name"
    STYLE = "style"
    ABV = "abv"
    CATEGORIES = "categories"
    MALTS = "malts"
    HOPS = "hops"
    FLAVOR_NOTES = "flavor_notes"

    MONGO_ID = "_id"


class BreweryFields:
    """Field name constants for Brewery model"""
    ID = "id"
    COMPANY_NAME = "company_name"
    OWNER = "owner"
    ADMINS = "admins"
    STAFF = "staff"
    BEERS = "beers"
    CATEGORIES = "categories"

    MONGO_ID = "_id"
