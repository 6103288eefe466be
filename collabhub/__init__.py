"""CollabHub 서버 패키지 — 소셜/협업 플랫폼 REST API.

CollabHub server package — REST API for the social/collaboration platform
(profiles, projects, articles, posts, likes/follows/watches, comments, explore).
"""
