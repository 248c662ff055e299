"""Initial migration - catering tables

Revision ID: 5b1f0c3a9d27
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1f0c3a9d27'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('type', sa.Enum('CATERER', 'USER', 'ADMIN',
                  name='usertype'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Create caterer_info table
    op.create_table(
        'caterer_info',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('caterer_id', sa.Integer(), nullable=False),
        sa.Column('business_name', sa.String(), nullable=False),
        sa.Column('minimum_guests', sa.Integer(), nullable=True),
        sa.Column('status', sa.Enum('PENDING', 'APPROVED', 'REJECTED',
                  name='catererstatus'), nullable=False),
        sa.ForeignKeyConstraint(
            ['caterer_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('caterer_id')
    )
    op.create_index(op.f('ix_caterer_info_id'),
                    'caterer_info', ['id'], unique=False)

    # Create catalog metadata tables
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index(op.f('ix_categories_id'),
                    'categories', ['id'], unique=False)

    op.create_table(
        'sub_categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['category_id'], ['categories.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('category_id', 'name')
    )
    op.create_index(op.f('ix_sub_categories_id'),
                    'sub_categories', ['id'], unique=False)

    op.create_table(
        'cuisine_types',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index(op.f('ix_cuisine_types_id'),
                    'cuisine_types', ['id'], unique=False)

    op.create_table(
        'occasions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index(op.f('ix_occasions_id'),
                    'occasions', ['id'], unique=False)

    # Create packages table
    op.create_table(
        'packages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('cover_image_url', sa.String(), nullable=True),
        sa.Column('caterer_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('created_by', sa.Enum('CATERER', 'USER',
                  name='packagecreator'), nullable=False),
        sa.Column('minimum_people', sa.Integer(), nullable=False),
        sa.Column('total_price', sa.Numeric(12, 2), nullable=False),
        sa.Column('is_custom_price', sa.Boolean(), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('customisation_type', sa.Enum('FIXED', 'CUSTOMISABLE',
                  name='customisationtype'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('revision', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['caterer_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_packages_id'), 'packages', ['id'], unique=False)
    op.create_index(op.f('ix_packages_caterer_id'),
                    'packages', ['caterer_id'], unique=False)
    op.create_index(op.f('ix_packages_user_id'),
                    'packages', ['user_id'], unique=False)

    op.create_table(
        'package_occasions',
        sa.Column('package_id', sa.Integer(), nullable=False),
        sa.Column('occasion_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['package_id'], ['packages.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['occasion_id'], ['occasions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('package_id', 'occasion_id')
    )

    op.create_table(
        'package_category_selections',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('package_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('num_dishes_to_select', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ['package_id'], ['packages.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['category_id'], ['categories.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_package_category_selections_id'),
                    'package_category_selections', ['id'], unique=False)
    op.create_index(op.f('ix_package_category_selections_package_id'),
                    'package_category_selections', ['package_id'], unique=False)

    # Create dishes table
    op.create_table(
        'dishes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('caterer_id', sa.Integer(), nullable=False),
        sa.Column('cuisine_type_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('sub_category_id', sa.Integer(), nullable=True),
        sa.Column('quantity_in_gm', sa.Integer(), nullable=True),
        sa.Column('pieces', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['caterer_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['cuisine_type_id'], ['cuisine_types.id'], ),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ),
        sa.ForeignKeyConstraint(['sub_category_id'], ['sub_categories.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_dishes_id'), 'dishes', ['id'], unique=False)
    op.create_index(op.f('ix_dishes_caterer_id'),
                    'dishes', ['caterer_id'], unique=False)

    # Create package_items table
    op.create_table(
        'package_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('dish_id', sa.Integer(), nullable=False),
        sa.Column('caterer_id', sa.Integer(), nullable=False),
        sa.Column('package_id', sa.Integer(), nullable=True),
        sa.Column('people_count', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('is_optional', sa.Boolean(), nullable=False),
        sa.Column('is_addon', sa.Boolean(), nullable=False),
        sa.Column('price_at_time', sa.Numeric(10, 2), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['dish_id'], ['dishes.id'], ),
        sa.ForeignKeyConstraint(
            ['caterer_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['package_id'], ['packages.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_package_items_id'),
                    'package_items', ['id'], unique=False)
    op.create_index(op.f('ix_package_items_caterer_id'),
                    'package_items', ['caterer_id'], unique=False)
    op.create_index(op.f('ix_package_items_package_id'),
                    'package_items', ['package_id'], unique=False)

    # Create add_ons table
    op.create_table(
        'add_ons',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('package_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['package_id'], ['packages.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_add_ons_id'), 'add_ons', ['id'], unique=False)
    op.create_index(op.f('ix_add_ons_package_id'),
                    'add_ons', ['package_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_add_ons_package_id'), table_name='add_ons')
    op.drop_index(op.f('ix_add_ons_id'), table_name='add_ons')
    op.drop_table('add_ons')

    op.drop_index(op.f('ix_package_items_package_id'),
                  table_name='package_items')
    op.drop_index(op.f('ix_package_items_caterer_id'),
                  table_name='package_items')
    op.drop_index(op.f('ix_package_items_id'), table_name='package_items')
    op.drop_table('package_items')

    op.drop_index(op.f('ix_dishes_caterer_id'), table_name='dishes')
    op.drop_index(op.f('ix_dishes_id'), table_name='dishes')
    op.drop_table('dishes')

    op.drop_index(op.f('ix_package_category_selections_package_id'),
                  table_name='package_category_selections')
    op.drop_index(op.f('ix_package_category_selections_id'),
                  table_name='package_category_selections')
    op.drop_table('package_category_selections')

    op.drop_table('package_occasions')

    op.drop_index(op.f('ix_packages_user_id'), table_name='packages')
    op.drop_index(op.f('ix_packages_caterer_id'), table_name='packages')
    op.drop_index(op.f('ix_packages_id'), table_name='packages')
    op.drop_table('packages')

    op.drop_index(op.f('ix_occasions_id'), table_name='occasions')
    op.drop_table('occasions')

    op.drop_index(op.f('ix_cuisine_types_id'), table_name='cuisine_types')
    op.drop_table('cuisine_types')

    op.drop_index(op.f('ix_sub_categories_id'), table_name='sub_categories')
    op.drop_table('sub_categories')

    op.drop_index(op.f('ix_categories_id'), table_name='categories')
    op.drop_table('categories')

    op.drop_index(op.f('ix_caterer_info_id'), table_name='caterer_info')
    op.drop_table('caterer_info')

    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')

    # Drop enums
    sa.Enum(name='customisationtype').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='packagecreator').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='catererstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='usertype').drop(op.get_bind(), checkfirst=True)
