import pytest
from sqlalchemy import Column, ForeignKey, Integer, MetaData, Table, inspect

from school_records.db.registry import REFERENCES, creation_order, init_db


def test_creation_order_parents_first():
    assert creation_order() == [
        "departments",
        "teachers",
        "students",
        "courses",
        "attendances",
        "homework",
        "exams",
        "grades",
        "student_courses",
        "students_homework",
    ]


def test_every_reference_created_before_dependent():
    order = creation_order()
    for table, targets in REFERENCES.items():
        for target in targets:
            assert order.index(target) < order.index(table)


def test_references():
    assert REFERENCES["departments"] == ()
    assert REFERENCES["courses"] == ("departments", "teachers")
    assert REFERENCES["grades"] == ("exams", "students")
    assert REFERENCES["students_homework"] == ("homework", "students")


def test_cycle_is_rejected():
    metadata = MetaData()
    Table("a", metadata, Column("id", Integer, primary_key=True),
          Column("b_id", Integer, ForeignKey("b.id")))
    Table("b", metadata, Column("id", Integer, primary_key=True),
          Column("a_id", Integer, ForeignKey("a.id")))
    with pytest.raises(ValueError):
        creation_order(metadata)


def test_init_db_creates_all_tables(engine):
    # engine из conftest уже прогнал init_db; повторный вызов ничего не ломает
    init_db(engine)
    assert set(inspect(engine).get_table_names()) == set(REFERENCES)


def test_unknown_tables_follow_foreign_keys():
    metadata = MetaData()
    Table("child", metadata, Column("id", Integer, primary_key=True),
          Column("parent_id", Integer, ForeignKey("parent.id")))
    Table("parent", metadata, Column("id", Integer, primary_key=True))
    assert creation_order(metadata) == ["parent", "child"]


def test_declared_order_contradicting_foreign_keys_is_rejected():
    # departments объявлены раньше teachers, но здесь ссылаются на них
    metadata = MetaData()
    Table("teachers", metadata, Column("id", Integer, primary_key=True))
    Table("departments", metadata, Column("id", Integer, primary_key=True),
          Column("head_id", Integer, ForeignKey("teachers.id")))
    with pytest.raises(ValueError):
        creation_order(metadata)
