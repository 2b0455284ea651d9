"""create cutting room tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 09:30:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "styles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("style_number", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_styles_id", "styles", ["id"], unique=False)
    op.create_index("ix_styles_style_number", "styles", ["style_number"], unique=True)

    op.create_table(
        "workers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("worker_group", sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("role IN ('admin', 'worker')", name="ck_workers_role"),
    )
    op.create_index("ix_workers_id", "workers", ["id"], unique=False)
    op.create_index("ix_workers_name", "workers", ["name"], unique=True)
    op.create_index("ix_workers_worker_group", "workers", ["worker_group"], unique=False)

    op.create_table(
        "production_orders",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_number", sa.String(length=100), nullable=False),
        sa.Column("style_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["style_id"], ["styles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_production_orders_id", "production_orders", ["id"], unique=False)
    op.create_index("ix_production_orders_order_number", "production_orders", ["order_number"], unique=True)
    op.create_index("ix_production_orders_style_id", "production_orders", ["style_id"], unique=False)
    op.create_index(
        "ix_production_orders_style_created",
        "production_orders",
        ["style_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "order_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("color", sa.String(length=50), nullable=False),
        sa.Column("size", sa.String(length=20), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["order_id"], ["production_orders.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
    )
    op.create_index("ix_order_items_id", "order_items", ["id"], unique=False)
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"], unique=False)

    op.create_table(
        "production_plans",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("plan_name", sa.String(length=255), nullable=False),
        sa.Column("style_id", sa.Integer(), nullable=False),
        sa.Column("linked_order_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["style_id"], ["styles.id"]),
        sa.ForeignKeyConstraint(["linked_order_id"], ["production_orders.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_production_plans_id", "production_plans", ["id"], unique=False)
    op.create_index("ix_production_plans_style_id", "production_plans", ["style_id"], unique=False)
    op.create_index("ix_production_plans_linked_order_id", "production_plans", ["linked_order_id"], unique=False)

    op.create_table(
        "cutting_layouts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("plan_id", sa.Integer(), nullable=False),
        sa.Column("layout_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["plan_id"], ["production_plans.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_cutting_layouts_id", "cutting_layouts", ["id"], unique=False)
    op.create_index("ix_cutting_layouts_plan_id", "cutting_layouts", ["plan_id"], unique=False)

    op.create_table(
        "layout_size_ratios",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("layout_id", sa.Integer(), nullable=False),
        sa.Column("size", sa.String(length=20), nullable=False),
        sa.Column("ratio", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["layout_id"], ["cutting_layouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("layout_id", "size", name="uq_layout_size_ratios_layout_size"),
        sa.CheckConstraint("ratio >= 0", name="ck_layout_size_ratios_ratio_non_negative"),
    )
    op.create_index("ix_layout_size_ratios_id", "layout_size_ratios", ["id"], unique=False)
    op.create_index("ix_layout_size_ratios_layout_id", "layout_size_ratios", ["layout_id"], unique=False)

    op.create_table(
        "production_tasks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("layout_id", sa.Integer(), nullable=False),
        sa.Column("style_id", sa.Integer(), nullable=False),
        sa.Column("layout_name", sa.String(length=255), nullable=False),
        sa.Column("color", sa.String(length=50), nullable=False),
        sa.Column("planned_layers", sa.Integer(), nullable=False),
        sa.Column("completed_layers", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["layout_id"], ["cutting_layouts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["style_id"], ["styles.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("planned_layers >= 1", name="ck_production_tasks_planned_layers_min_1"),
        sa.CheckConstraint("completed_layers >= 0", name="ck_production_tasks_completed_layers_non_negative"),
    )
    op.create_index("ix_production_tasks_id", "production_tasks", ["id"], unique=False)
    op.create_index("ix_production_tasks_layout_id", "production_tasks", ["layout_id"], unique=False)
    op.create_index("ix_production_tasks_style_id", "production_tasks", ["style_id"], unique=False)

    op.create_table(
        "production_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("task_id", sa.Integer(), nullable=False),
        sa.Column("worker_id", sa.Integer(), nullable=False),
        sa.Column("process_name", sa.String(length=20), nullable=False),
        sa.Column("layers_completed", sa.Integer(), nullable=False),
        sa.Column("log_time", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["task_id"], ["production_tasks.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["worker_id"], ["workers.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("layers_completed > 0", name="ck_production_logs_layers_positive"),
        sa.CheckConstraint(
            "process_name IN ('loading', 'spreading', 'cutting', 'packing')",
            name="ck_production_logs_process_name",
        ),
    )
    op.create_index("ix_production_logs_id", "production_logs", ["id"], unique=False)
    op.create_index("ix_production_logs_task_id", "production_logs", ["task_id"], unique=False)
    op.create_index("ix_production_logs_worker_id", "production_logs", ["worker_id"], unique=False)
    op.create_index("ix_production_logs_task_time", "production_logs", ["task_id", "log_time"], unique=False)

    op.create_table(
        "plan_progress_snapshots",
        sa.Column("plan_id", sa.Integer(), nullable=False),
        sa.Column("total_planned", sa.Integer(), nullable=False),
        sa.Column("total_completed", sa.Integer(), nullable=False),
        sa.Column("pending_tasks", sa.Integer(), nullable=False),
        sa.Column("progress_percent", sa.Integer(), nullable=False),
        sa.Column("refreshed_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["plan_id"], ["production_plans.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("plan_id"),
    )


def downgrade() -> None:
    op.drop_table("plan_progress_snapshots")
    op.drop_index("ix_production_logs_task_time", table_name="production_logs")
    op.drop_index("ix_production_logs_worker_id", table_name="production_logs")
    op.drop_index("ix_production_logs_task_id", table_name="production_logs")
    op.drop_index("ix_production_logs_id", table_name="production_logs")
    op.drop_table("production_logs")
    op.drop_index("ix_production_tasks_style_id", table_name="production_tasks")
    op.drop_index("ix_production_tasks_layout_id", table_name="production_tasks")
    op.drop_index("ix_production_tasks_id", table_name="production_tasks")
    op.drop_table("production_tasks")
    op.drop_index("ix_layout_size_ratios_layout_id", table_name="layout_size_ratios")
    op.drop_index("ix_layout_size_ratios_id", table_name="layout_size_ratios")
    op.drop_table("layout_size_ratios")
    op.drop_index("ix_cutting_layouts_plan_id", table_name="cutting_layouts")
    op.drop_index("ix_cutting_layouts_id", table_name="cutting_layouts")
    op.drop_table("cutting_layouts")
    op.drop_index("ix_production_plans_linked_order_id", table_name="production_plans")
    op.drop_index("ix_production_plans_style_id", table_name="production_plans")
    op.drop_index("ix_production_plans_id", table_name="production_plans")
    op.drop_table("production_plans")
    op.drop_index("ix_order_items_order_id", table_name="order_items")
    op.drop_index("ix_order_items_id", table_name="order_items")
    op.drop_table("order_items")
    op.drop_index("ix_production_orders_style_created", table_name="production_orders")
    op.drop_index("ix_production_orders_style_id", table_name="production_orders")
    op.drop_index("ix_production_orders_order_number", table_name="production_orders")
    op.drop_index("ix_production_orders_id", table_name="production_orders")
    op.drop_table("production_orders")
    op.drop_index("ix_workers_worker_group", table_name="workers")
    op.drop_index("ix_workers_name", table_name="workers")
    op.drop_index("ix_workers_id", table_name="workers")
    op.drop_table("workers")
    op.drop_index("ix_styles_style_number", table_name="styles")
    op.drop_index("ix_styles_id", table_name="styles")
    op.drop_table("styles")
