"""
Service layer abstraction.

Each service encapsulates the business logic for a domain.  API
handlers call services; services call repositories.  Services hold no
state between requests.
"""
