# Services package init
"""
Portfolio API — Services Layer
===============================

Service Inventory:
    - DocumentStore (abstract): storage primitives the CRUD layer needs
    - MongoDocumentStore: DocumentStore over pymongo's async client
    - ResourceService: generic create/list/update/delete for one collection,
      instantiated as project_service, blog_service and message_service
"""
