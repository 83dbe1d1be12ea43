# Schemas package init
"""
Portfolio API — Request/Response Schemas
=========================================

What:  Pydantic models defining the API contract with the frontend.

Schema Inventory:
    - common.py:   response envelopes, error and health responses
    - project.py:  ProjectCreate / ProjectUpdate / ProjectDocument
    - blog.py:     BlogCreate / BlogUpdate / BlogDocument
    - message.py:  MessageCreate / MessageDocument

Per resource, the create and update models list the same optional fields.
The update model is applied as a partial: only the fields the client
actually sent (`exclude_unset`) reach the storage layer.
"""
