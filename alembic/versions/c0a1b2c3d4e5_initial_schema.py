"""initial_schema

Revision ID: c0a1b2c3d4e5
Revises:
Create Date: 2026-10-19 09:00:00.000000

초기 스키마 생성: 사용자, 프로젝트, 아티클/섹션, 포스트, 댓글, 좋아요/팔로우/워치.
Create the initial schema: users, projects, articles and sections, posts,
comments, and the like/follow/watch interaction tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = 'c0a1b2c3d4e5'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

INTERACTION_TABLES: tuple[tuple[str, str], ...] = (
    ('likes', 'like'),
    ('follows', 'follow'),
    ('watches', 'watch'),
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def _image_columns(prefix: str) -> list[sa.Column]:
    return [
        sa.Column(f'{prefix}_url', sa.Text(), nullable=True),
        sa.Column(f'{prefix}_upload', sa.Text(), nullable=True),
        sa.Column(f'{prefix}_display', sa.String(20), server_default='url', nullable=True),
    ]


def _counter(name: str) -> sa.Column:
    return sa.Column(name, sa.Integer(), server_default='0', nullable=True)


def upgrade() -> None:
    # users — 사용자 계정 및 공개 프로필
    # User accounts and public profiles
    op.create_table(
        'users',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False, unique=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('user_type', sa.String(50), nullable=True),
        sa.Column('career_title', sa.String(255), nullable=True),
        *_image_columns('profile_image'),
        sa.Column('work_status', sa.String(100), nullable=True),
        sa.Column('seeking', sa.String(255), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=True),
        sa.Column('expertise', sa.JSON(), nullable=True),
        sa.Column('interest_tags', sa.JSON(), nullable=True),
        sa.Column('experience_tags', sa.JSON(), nullable=True),
        sa.Column('education_tags', sa.JSON(), nullable=True),
        sa.Column('target_audience', sa.JSON(), nullable=True),
        sa.Column('solutions_offered', sa.JSON(), nullable=True),
        _counter('likes_count'),
        _counter('followers_count'),
        _counter('watches_count'),
        sa.Column('featured', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        *_timestamps(),
    )
    # 사용자 유형 필터용 — Explore user-type filter
    op.create_index('ix_users_user_type', 'users', ['user_type'])

    # projects — 협업 프로젝트
    # Collaboration projects; grouped API fields stored as flat columns
    op.create_table(
        'projects',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('project_name', sa.String(255), nullable=False),
        sa.Column('project_description', sa.Text(), nullable=True),
        sa.Column('project_type', sa.String(100), nullable=True),
        sa.Column('project_category', sa.String(100), nullable=True),
        sa.Column('project_status', sa.String(50), nullable=True),
        sa.Column('project_title', sa.String(255), nullable=True),
        sa.Column('project_handle', sa.String(100), nullable=True),
        *_image_columns('project_image'),
        sa.Column('client', sa.String(255), nullable=True),
        sa.Column('client_location', sa.String(255), nullable=True),
        sa.Column('client_website', sa.String(500), nullable=True),
        sa.Column('contract_type', sa.String(100), nullable=True),
        sa.Column('budget', sa.String(100), nullable=True),
        sa.Column('budget_range', sa.String(100), nullable=True),
        sa.Column('currency', sa.String(10), server_default='USD', nullable=True),
        sa.Column('project_timeline', sa.String(255), nullable=True),
        sa.Column('skills_required', sa.JSON(), nullable=True),
        sa.Column('expertise_needed', sa.JSON(), nullable=True),
        sa.Column('target_audience', sa.JSON(), nullable=True),
        sa.Column('solutions_offered', sa.JSON(), nullable=True),
        sa.Column('project_tags', sa.JSON(), nullable=True),
        sa.Column('industry_tags', sa.JSON(), nullable=True),
        sa.Column('technology_tags', sa.JSON(), nullable=True),
        sa.Column('website_links', sa.JSON(), nullable=True),
        sa.Column('seeking_creator', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        sa.Column('seeking_brand', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        sa.Column('seeking_freelancer', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        sa.Column('seeking_contractor', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        sa.Column('project_visibility', sa.String(20), server_default='public', nullable=True),
        sa.Column('search_visibility', sa.Boolean(), server_default=sa.text('true'), nullable=True),
        sa.Column('notification_preferences_email', sa.Boolean(), server_default=sa.text('true'), nullable=True),
        sa.Column('notification_preferences_push', sa.Boolean(), server_default=sa.text('true'), nullable=True),
        sa.Column('notification_preferences_digest', sa.Boolean(), server_default=sa.text('true'), nullable=True),
        sa.Column('social_links_youtube', sa.String(500), nullable=True),
        sa.Column('social_links_instagram', sa.String(500), nullable=True),
        sa.Column('social_links_github', sa.String(500), nullable=True),
        sa.Column('social_links_twitter', sa.String(500), nullable=True),
        sa.Column('social_links_linkedin', sa.String(500), nullable=True),
        _counter('likes_count'),
        _counter('follows_count'),
        _counter('watches_count'),
        sa.Column('featured', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_projects_user_id', 'projects', ['user_id'])

    # articles — 아티클, article_sections — 순서가 있는 섹션
    # Articles and their ordered sections
    op.create_table(
        'articles',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(500), nullable=False),
        *_image_columns('article_image'),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('citations', sa.JSON(), nullable=True),
        sa.Column('contributors', sa.JSON(), nullable=True),
        sa.Column('related_media', sa.JSON(), nullable=True),
        _counter('likes_count'),
        _counter('follows_count'),
        _counter('watches_count'),
        sa.Column('featured', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_articles_user_id', 'articles', ['user_id'])

    op.create_table(
        'article_sections',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('article_id', UUID(as_uuid=True), sa.ForeignKey('articles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.String(50), server_default='full-width-text', nullable=False),
        sa.Column('title', sa.String(500), nullable=True),
        sa.Column('subtitle', sa.String(500), nullable=True),
        sa.Column('text', sa.Text(), nullable=True),
        sa.Column('media_url', sa.Text(), nullable=True),
        sa.Column('media_subtext', sa.Text(), nullable=True),
        sa.Column('order', sa.Integer(), server_default='0', nullable=False),
    )
    op.create_index('ix_article_sections_article_id', 'article_sections', ['article_id'])

    # posts — 포스트
    # Short-form posts
    op.create_table(
        'posts',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('media_url', sa.Text(), nullable=True),
        *_image_columns('post_image'),
        sa.Column('tags', sa.JSON(), nullable=True),
        _counter('comments_count'),
        _counter('likes_count'),
        _counter('follows_count'),
        _counter('watches_count'),
        sa.Column('featured', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_posts_user_id', 'posts', ['user_id'])

    # comments — 엔티티 댓글 (entity_type, entity_id 다형 참조)
    # Comments on any entity via a polymorphic (entity_type, entity_id) pair
    op.create_table(
        'comments',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('entity_type', sa.String(20), nullable=False),
        sa.Column('entity_id', UUID(as_uuid=True), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        _counter('likes_count'),
        sa.Column('featured', sa.Boolean(), server_default=sa.text('false'), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_comments_entity', 'comments', ['entity_type', 'entity_id'])

    # likes / follows / watches — 사용자당 대상별 1회
    # One row per user per target for each interaction kind
    for table, kind in INTERACTION_TABLES:
        op.create_table(
            table,
            sa.Column('id', UUID(as_uuid=True), primary_key=True),
            sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('entity_type', sa.String(20), nullable=False),
            sa.Column('entity_id', UUID(as_uuid=True), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
            sa.UniqueConstraint('user_id', 'entity_type', 'entity_id', name=f'uq_{kind}_user_entity'),
        )
        op.create_index(f'ix_{table}_entity', table, ['entity_type', 'entity_id'])


def downgrade() -> None:
    for table, _kind in reversed(INTERACTION_TABLES):
        op.drop_index(f'ix_{table}_entity', table_name=table)
        op.drop_table(table)

    op.drop_index('ix_comments_entity', table_name='comments')
    op.drop_table('comments')
    op.drop_index('ix_posts_user_id', table_name='posts')
    op.drop_table('posts')
    op.drop_index('ix_article_sections_article_id', table_name='article_sections')
    op.drop_table('article_sections')
    op.drop_index('ix_articles_user_id', table_name='articles')
    op.drop_table('articles')
    op.drop_index('ix_projects_user_id', table_name='projects')
    op.drop_table('projects')
    op.drop_index('ix_users_user_type', table_name='users')
    op.drop_table('users')
