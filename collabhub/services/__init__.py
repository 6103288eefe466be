"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services validate input, enforce ownership, shape response dicts and call
repositories for DB access. Explore, stats and featured run their
per-type queries concurrently, one session per query.
"""
