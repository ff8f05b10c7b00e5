"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Holds the option service that enforces the soft/hard delete lifecycle:
name uniqueness on create, soft-deleted rows treated as missing, and the
upsert semantics of the "hard" updates. Services never commit and never call
each other; each option type owns one service instance.
"""
