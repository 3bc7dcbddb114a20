"""create school tables

Revision ID: 5a1c0e7d2b94
Revises:
Create Date: 2026-10-18 09:12:40.118305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5a1c0e7d2b94'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LIVE_ROWS = sa.text("deleted_at IS NULL")


def entity_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
    ]


def create_entity_table(name, *columns):
    op.create_table(name, *entity_columns(), *columns)
    op.create_index(f'ix_{name}_id', name, ['id'])
    op.create_index(f'ix_{name}_deleted_at', name, ['deleted_at'])


def create_live_unique(name, table, columns):
    op.create_index(name, table, columns, unique=True,
                    sqlite_where=LIVE_ROWS, postgresql_where=LIVE_ROWS)


def upgrade() -> None:
    # Порядок важен: сначала родительские таблицы, потом зависимые
    create_entity_table(
        'departments',
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    create_entity_table(
        'teachers',
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id'), nullable=False, index=True),
    )
    create_live_unique('uq_teachers_email', 'teachers', ['email'])
    create_entity_table(
        'students',
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('enrollment_date', sa.Date(), nullable=False),
    )
    create_live_unique('uq_students_email', 'students', ['email'])
    create_entity_table(
        'courses',
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('code', sa.String(20), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('credits', sa.Integer(), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id'), nullable=False, index=True),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('teachers.id'), nullable=False, index=True),
    )
    create_live_unique('uq_courses_code', 'courses', ['code'])
    create_entity_table(
        'attendances',
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id'), nullable=False, index=True),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('courses.id'), nullable=False, index=True),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        sa.Column('status', sa.Enum('present', 'absent', 'late', name='attendance_status'), nullable=False),
    )
    create_entity_table(
        'homework',
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('courses.id'), nullable=False, index=True),
        sa.Column('due_date', sa.DateTime(), nullable=False, index=True),
        sa.Column('max_score', sa.Float(), nullable=False),
    )
    create_entity_table(
        'exams',
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('courses.id'), nullable=False, index=True),
        sa.Column('exam_date', sa.DateTime(), nullable=False, index=True),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('max_score', sa.Float(), nullable=False),
    )
    create_entity_table(
        'grades',
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id'), nullable=False, index=True),
        sa.Column('exam_id', sa.Integer(), sa.ForeignKey('exams.id'), nullable=False, index=True),
        sa.Column('score', sa.Float(), nullable=False),
    )
    create_entity_table(
        'student_courses',
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id'), nullable=False, index=True),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('courses.id'), nullable=False, index=True),
        sa.Column('enrollment_date', sa.Date(), nullable=False),
    )
    create_live_unique('uq_student_courses_pair', 'student_courses', ['student_id', 'course_id'])
    create_entity_table(
        'students_homework',
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id'), nullable=False, index=True),
        sa.Column('homework_id', sa.Integer(), sa.ForeignKey('homework.id'), nullable=False, index=True),
        sa.Column('submission_date', sa.DateTime(), nullable=True),
        sa.Column('score', sa.Float(), nullable=True),
        sa.Column('status', sa.Enum('pending', 'submitted', 'graded', name='submission_status'), nullable=False),
    )
    create_live_unique('uq_students_homework_pair', 'students_homework', ['student_id', 'homework_id'])


def downgrade() -> None:
    for table in (
        'students_homework',
        'student_courses',
        'grades',
        'exams',
        'homework',
        'attendances',
        'courses',
        'students',
        'teachers',
        'departments',
    ):
        op.drop_table(table)
    sa.Enum(name='submission_status').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='attendance_status').drop(op.get_bind(), checkfirst=True)
