"""
Service layer abstraction.

Each service encapsulates business logic for a domain and owns the
transaction boundary of its operations.  API handlers only translate
HTTP requests into service calls.
"""
