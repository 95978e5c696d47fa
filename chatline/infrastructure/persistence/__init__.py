"""
Persistence Layer - Database implementations.

Two interchangeable adapters implement the repository ports:
- memory/   → process-local tables, used for development and tests
- prisma_*  → PostgreSQL through the generated Prisma client

The Prisma adapters are imported from their own modules so that importing
this package never requires a generated client.
"""
