"""Initial schema: recipes, recipe ingredients, shopping lists and items

Revision ID: 3b7e2d9a41c5
Revises:
Create Date: 2026-10-19 09:12:44.118305

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2d9a41c5'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('image', sa.String(length=500), nullable=True),
        sa.Column('url', sa.String(length=500), nullable=True),
        sa.Column('source', sa.String(length=200), nullable=True),
        sa.Column('instructions', sa.Text(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('want_to_try', sa.Boolean(), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=True),
        sa.Column('cooking_time', sa.String(length=50), nullable=True),
        sa.Column('prep_time', sa.String(length=50), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('author', sa.String(length=200), nullable=True),
        sa.Column('storage', sa.Text(), nullable=True),
        sa.Column('freezes', sa.Boolean(), nullable=True),
        sa.Column('equipment', sa.Text(), nullable=True),
        sa.Column('macros', sa.JSON(), nullable=True),
        sa.Column('date_created', sa.DateTime(timezone=True), nullable=True),
        sa.Column('date_last_edited', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('recipe', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_user_id'), ['user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_recipe_url'), ['url'], unique=False)

    op.create_table(
        'recipe_ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(length=10), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('group_name', sa.String(length=200), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('recipe_ingredient', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_ingredient_recipe_id'), ['recipe_id'], unique=False)

    op.create_table(
        'shopping_list',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), nullable=True),
        sa.Column('date_last_edited', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('shopping_list', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_shopping_list_user_id'), ['user_id'], unique=False)

    op.create_table(
        'list_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('list_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(length=10), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['list_id'], ['shopping_list.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('list_item', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_list_item_list_id'), ['list_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_list_item_recipe_id'), ['recipe_id'], unique=False)


def downgrade():
    op.drop_table('list_item')
    op.drop_table('shopping_list')
    op.drop_table('recipe_ingredient')
    op.drop_table('recipe')
