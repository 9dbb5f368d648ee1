"""
Service Layer - Business Logic

Services apply marketplace rules on top of the repositories and raise
NotFoundError / ValidationError for the API layer to translate.
"""
