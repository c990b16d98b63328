"""
PhotoShare Backend: Services Layer
===================================

What:  Query logic sitting between routes (HTTP) and the document store.
How:   Stateless service objects; the store is passed in on every call.

Service Inventory:
    - UserService:    list users, fetch one user
    - PhotoService:   photos of a user with commenters joined in
    - SchemaService:  SchemaInfo record and concurrent collection counts
"""
