"""
INFRASTRUCTURE LAYER - Adapters for domain ports

- persistence/  → Prisma (PostgreSQL) and in-memory repositories
- storage/      → Disk-backed media storage for photos and gifs
"""
