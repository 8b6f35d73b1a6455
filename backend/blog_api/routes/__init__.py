# Routes package init
"""
Blog API Backend: API Routes Package
=====================================

Route Inventory:
    - health.py:      GET /health, GET /api/health
    - categories.py:  GET /api/categories
    - posts.py:       /api/posts, /api/posts/{id}
    - engagement.py:  /api/posts/{post_id}/comments, /api/posts/{post_id}/likes
    - users.py:       /api/users/{id}, /api/notifications
    - dev.py:         POST /api/dev/publish-drafts

Routes are thin: extract parameters, call the service with the backend
client, wrap the result in the response envelope. Errors are raised as
exceptions and shaped by the global handlers in main.py.
"""
