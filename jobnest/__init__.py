"""
JobNest job board backend.

Core components:
- services: Jobs, applications, saved jobs, messaging, identity store
- api: FastAPI application, routers and schemas
- db: SQLAlchemy tables and session management
"""
