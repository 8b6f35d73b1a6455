# Services package init
"""
Blog API Backend: Services Package
===================================

What:  One stateless service per resource. Each method receives the backend
       client as an argument, issues its query and returns plain rows.

Service Inventory:
    - category_service.py:      categories listing
    - article_service.py:       posts listing, detail, writes, draft publishing
    - comment_service.py:       comments on a post
    - like_service.py:          like counts and toggles
    - user_service.py:          user profiles and notifications
"""
