"""create_portal_tables

Revision ID: c4d5e6f7a8b9
Revises:
Create Date: 2026-10-19 10:12:31.504127

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'c4d5e6f7a8b9'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    # 생성/수정/삭제(soft delete) 일시 — created/updated/removed
    return [
        sa.Column('created', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('removed', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    # 1. 파트너 — partner companies
    op.create_table('partner',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('telnum', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('level', sa.String(length=20), nullable=False, server_default='GOLD'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    # 2. 고객 — end customers
    op.create_table('customer',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('telnum', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('manager_id', sa.String(length=255), nullable=True),
        sa.Column('manager_company_id', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    # 3. 제품 카테고리 / 제품 / 릴리즈 — product categories, products and release notes
    op.create_table('product_category',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table('product',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('version', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('iso_file_path', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('history', sa.Text(), nullable=False, server_default=''),
        sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(['category_id'], ['product_category.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table('release',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=True),
        sa.Column('version', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('contents', sa.Text(), nullable=True),
        sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(['product_id'], ['product.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_release_product_id', 'release', ['product_id'])

    # 4. 사업 / 사업 이력 — businesses and their history
    op.create_table('business',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('issued', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('expired', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('license_id', sa.Integer(), nullable=True),
        sa.Column('customer_id', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('core_cnt', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('node_cnt', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('manager_id', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('product_id', sa.Integer(), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['customer_id'], ['customer.id']),
        sa.ForeignKeyConstraint(['product_id'], ['product.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table('business_history',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('business_id', sa.Integer(), nullable=False),
        sa.Column('issue', sa.Text(), nullable=True),
        sa.Column('solution', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('manager', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('issued', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('started', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('ended', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('note', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['business_id'], ['business.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_business_history_business_id', 'business_history', ['business_id'])

    # 5. 라이센스 — licenses (business_id 는 FK 없이 사업과 상호 참조)
    op.create_table('license',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('license_key', sa.String(length=64), nullable=False),
        sa.Column('issued', sa.String(length=20), nullable=False, server_default='0000-00-00'),
        sa.Column('expired', sa.String(length=20), nullable=False, server_default='0000-00-00'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('company_id', sa.Integer(), nullable=True),
        sa.Column('approve_user', sa.String(length=50), nullable=True),
        sa.Column('approved', sa.DateTime(timezone=True), nullable=True),
        sa.Column('business_id', sa.Integer(), nullable=True),
        sa.Column('issued_id', sa.String(length=255), nullable=True),
        sa.Column('trial', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('oem', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['company_id'], ['partner.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('license_key'),
    )

    # 6. 공지사항 — notices
    op.create_table('notice',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('writer', sa.String(length=255), nullable=True),
        sa.Column('level', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    # 7. 크레딧 — partner credit ledger
    op.create_table('credit',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('partner_id', sa.Integer(), nullable=True),
        sa.Column('business_id', sa.Integer(), nullable=True),
        sa.Column('deposit', sa.Integer(), nullable=True),
        sa.Column('credit', sa.Integer(), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['partner_id'], ['partner.id']),
        sa.ForeignKeyConstraint(['business_id'], ['business.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_credit_partner_id', 'credit', ['partner_id'])

    # 8. 기술지원 — customer support requests
    op.create_table('support',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=True),
        sa.Column('business_id', sa.Integer(), nullable=True),
        sa.Column('issued', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('type', sa.String(length=20), nullable=False, server_default='consult'),
        sa.Column('issue', sa.Text(), nullable=True),
        sa.Column('solution', sa.Text(), nullable=True),
        sa.Column('actioned', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('action_type', sa.String(length=20), nullable=False, server_default='remote'),
        sa.Column('manager', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='processing'),
        sa.Column('requester', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('requester_telnum', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('requester_email', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('writer', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['customer_id'], ['customer.id']),
        sa.ForeignKeyConstraint(['business_id'], ['business.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_support_customer_id', 'support', ['customer_id'])


def downgrade() -> None:
    op.drop_index('ix_support_customer_id', table_name='support')
    op.drop_table('support')
    op.drop_index('ix_credit_partner_id', table_name='credit')
    op.drop_table('credit')
    op.drop_table('notice')
    op.drop_table('license')
    op.drop_index('ix_business_history_business_id', table_name='business_history')
    op.drop_table('business_history')
    op.drop_table('business')
    op.drop_index('ix_release_product_id', table_name='release')
    op.drop_table('release')
    op.drop_table('product')
    op.drop_table('product_category')
    op.drop_table('customer')
    op.drop_table('partner')
