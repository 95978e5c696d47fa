"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- dto/       → Response models shared with the presentation layer
- common/    → CQRS base classes, request context, authorization guard

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories and media storage
"""
