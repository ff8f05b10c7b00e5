"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
BaseRepository provides generic id-keyed CRUD that only flushes; the option
repository adds name lookups, active-row queries and upserts. One repository
instance is bound to each option table.
"""
