# Services package init
"""
ArticleHub Backend — Services Layer
=====================================

What:  Business logic between routes (HTTP) and MongoDB (persistence).
How:   Services receive the collection handle and plain inputs, apply the
       business rules, and return response schemas or raise app exceptions.

Service Inventory:
    - query_translator: Query string → QueryDescriptor (filter, sort, skip, limit)
    - ArticleService: CRUD operations over the article collection
"""
