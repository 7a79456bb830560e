from conftest import make_employee

from src.meal_admin.meal_admin.core.constants import ALL_DEPARTMENTS
from src.meal_admin.meal_admin.employees.directory import department_counts, filter_employees, top_department


def _people():
    return [
        make_employee(1, name="Alice Nguyen", department="Finance"),
        make_employee(2, name="Bob Tran", email="bob.tran@oel.test", department="Sales"),
        make_employee(3, name="Carol Le", department="Finance"),
        make_employee(4, name="Dan Pham", email="dan@partner.test", department="R&D"),
    ]


def test_all_departments_and_empty_search_returns_full_list_in_order():
    people = _people()
    assert filter_employees(people, ALL_DEPARTMENTS, "") == people


def test_department_filter_only_returns_that_department():
    result = filter_employees(_people(), "Finance")
    assert [e.id for e in result] == [1, 3]
    assert all(e.department == "Finance" for e in result)


def test_search_is_case_insensitive_on_name_or_email():
    people = _people()
    assert [e.id for e in filter_employees(people, query="ALICE")] == [1]
    assert [e.id for e in filter_employees(people, query="partner")] == [4]
    assert [e.id for e in filter_employees(people, query="TRAN@")] == [2]


def test_department_and_search_combine():
    assert filter_employees(_people(), "Sales", "alice") == []


def test_department_counts_cover_whole_population():
    people = _people()
    counts = department_counts(people)

    assert counts == {"Finance": 2, "Sales": 1, "R&D": 1}
    assert sum(counts.values()) == len(people)


def test_top_department():
    assert top_department({"Finance": 2, "Sales": 1}) == ("Finance", 2)
    assert top_department({}) is None
