# Routes package init
"""
Portfolio API — Routes Package
===============================

Route Inventory:
    - projects.py:  POST/GET   /api/projects
                    PATCH/DELETE /api/projects/{project_id}
    - blog.py:      POST/GET   /api/blog
                    PATCH/DELETE /api/blog/{blog_id}
    - messages.py:  POST/GET   /api/message
    - health.py:    GET /  (greeting), GET /health

Routes stay thin: they pull the body or path id out of the request, hand it
to the resource's ResourceService together with the injected DocumentStore,
and return the envelope. Failure status codes come from the exception
handlers registered in main.py.
"""
