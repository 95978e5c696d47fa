"""
DOMAIN LAYER - Messaging model and its rules

This layer contains:
- Entities: User, Conversation, Message, Comment
- Value Objects: identifiers, user names, closed content/status variants
- Ports: repository and media storage interfaces implemented by infrastructure
- Exceptions: tagged business errors mapped to responses by presentation

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
