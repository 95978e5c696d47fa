"""
PORTS - Interfaces that infrastructure implements

Subfolders:
- repositories/   → Data persistence interfaces (Prisma or in-memory)
- media_storage   → Where uploaded photos and gifs are written
"""
