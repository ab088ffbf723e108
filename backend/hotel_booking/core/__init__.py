# hotel_booking/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Startup probe of the relational store
- db: Database configuration and connection pool lifecycle
- security: Password hashing and signed token issue/verify
- store: Scoped transactional sessions with store fault mapping
"""
