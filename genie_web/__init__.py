"""
HTTP layer for Assessment Genie.

create_app() in genie_web.main builds the FastAPI app and mounts:
- genie_web.auth_routes.router      (/api/auth)
- genie_web.blueprint_routes.router (/api/blueprints)
- genie_web.topic_routes.router     (/api/topic-requests)
"""
