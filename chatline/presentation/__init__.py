"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: bearer authentication and upload adapters
- errors: domain exception to HTTP response mapping
"""
