"""
Service layer abstraction.

Each service encapsulates business logic for a domain and validates
input against the directory before writing to it.  The directory
itself stays permissive; the services are where unknown postal codes
and missing references are turned into errors.
"""
