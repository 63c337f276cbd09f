# Routes package init
"""
ArticleHub Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - home.py:      GET    /                    (welcome text)
    - articles.py:  GET    /articles            (list with filter/sort/pagination)
                    POST   /article             (create)
                    GET    /article/{id}        (read)
                    PUT    /article/{id}        (replace)
                    DELETE /article/{id}        (delete)
    - health.py:    GET    /health              (database connectivity check)

Routes stay thin: they pull data out of the request, call the service with
the injected collection, and let global exception handlers shape errors.
"""
