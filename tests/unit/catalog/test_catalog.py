"""Unit tests for CourseCatalog."""

import pytest

from registrar.bootstrap import Registrar
from registrar.catalog import CourseCatalog, normalize_prerequisites
from registrar.store import Course, ValidationError


@pytest.fixture
def catalog(registrar: Registrar) -> CourseCatalog:
    return registrar.catalog


@pytest.mark.unit
class TestNormalizePrerequisites:
    """Tests for normalize_prerequisites."""

    def test_strips_and_drops_blanks(self) -> None:
        assert normalize_prerequisites("CSCI-301", [" CSCI-101 ", "", "  "]) == ["CSCI-101"]

    def test_dedupes_ignoring_case_keeping_first(self) -> None:
        result = normalize_prerequisites("CSCI-301", ["CSCI-101", "csci-101", "MATH-121"])
        assert result == ["CSCI-101", "MATH-121"]

    def test_rejects_self_reference(self) -> None:
        with pytest.raises(ValidationError):
            normalize_prerequisites("CSCI-201", ["csci-201"])


@pytest.mark.unit
class TestGet:
    """Tests for CourseCatalog.get."""

    def test_get_ignores_case(self, catalog: CourseCatalog) -> None:
        catalog.upsert(Course(code="CSCI-101", title="Intro to Programming"))
        course = catalog.get("csci-101")
        assert course is not None
        assert course.code == "CSCI-101"

    def test_get_missing_returns_none(self, catalog: CourseCatalog) -> None:
        assert catalog.get("NOPE-999") is None

    def test_get_blank_returns_none(self, catalog: CourseCatalog) -> None:
        assert catalog.get("   ") is None


@pytest.mark.unit
class TestListAndSearch:
    """Tests for CourseCatalog.list and search."""

    @pytest.fixture(autouse=True)
    def courses(self, catalog: CourseCatalog) -> None:
        catalog.upsert(Course(code="MATH-121", title="Calculus I", department="Math"))
        catalog.upsert(Course(code="csci-201", title="Data Structures", department="CS"))
        catalog.upsert(Course(code="CSCI-101", title="Intro to Programming", department="CS"))

    def test_list_ordered_by_code_ignoring_case(self, catalog: CourseCatalog) -> None:
        codes = [c.code for c in catalog.list()]
        assert codes == ["CSCI-101", "csci-201", "MATH-121"]

    def test_list_empty(self, registrar: Registrar) -> None:
        registrar.catalog.delete("MATH-121")
        registrar.catalog.delete("CSCI-201")
        registrar.catalog.delete("CSCI-101")
        assert registrar.catalog.list() == []

    def test_search_by_code(self, catalog: CourseCatalog) -> None:
        assert [c.code for c in catalog.search("csci")] == ["CSCI-101", "csci-201"]

    def test_search_by_title(self, catalog: CourseCatalog) -> None:
        assert [c.code for c in catalog.search("STRUCT")] == ["csci-201"]

    def test_search_by_department(self, catalog: CourseCatalog) -> None:
        assert [c.code for c in catalog.search("math")] == ["MATH-121"]

    def test_search_blank_equals_list(self, catalog: CourseCatalog) -> None:
        all_codes = [c.code for c in catalog.list()]
        assert [c.code for c in catalog.search("  ")] == all_codes
        assert [c.code for c in catalog.search(None)] == all_codes

    def test_search_no_match(self, catalog: CourseCatalog) -> None:
        assert catalog.search("biology") == []


@pytest.mark.unit
class TestUpsert:
    """Tests for CourseCatalog.upsert."""

    def test_insert(self, catalog: CourseCatalog) -> None:
        stored = catalog.upsert(Course(code="CSCI-101", title="Intro", capacity=40, credits=4))
        assert stored.code == "CSCI-101"
        assert stored.capacity == 40
        assert stored.credits == 4
        assert stored.enrolled == 0

    def test_replace_same_code_any_case(self, catalog: CourseCatalog) -> None:
        catalog.upsert(Course(code="CSCI-101", title="Intro"))
        catalog.upsert(Course(code="csci-101", title="Intro to Programming"))

        courses = catalog.list()
        assert len(courses) == 1
        assert courses[0].title == "Intro to Programming"

    def test_replace_keeps_enrolled(self, seeded: Registrar) -> None:
        seeded.registration.register("alice", "CSCI-101")

        seeded.catalog.upsert(Course(code="CSCI-101", title="Intro v2", capacity=50))

        course = seeded.catalog.get("CSCI-101")
        assert course.enrolled == 1
        assert course.title == "Intro v2"
        assert course.capacity == 50

    def test_blank_code_rejected(self, catalog: CourseCatalog) -> None:
        with pytest.raises(ValidationError):
            catalog.upsert(Course(code="   ", title="Nothing"))

    def test_self_prerequisite_rejected(self, catalog: CourseCatalog) -> None:
        with pytest.raises(ValidationError):
            catalog.upsert(Course(code="CSCI-201", prerequisites=["CSCI-201"]))
        assert catalog.get("CSCI-201") is None

    def test_prerequisites_normalized(self, catalog: CourseCatalog) -> None:
        stored = catalog.upsert(
            Course(code="CSCI-301", prerequisites=["CSCI-201", "csci-201", " ", "MATH-121"])
        )
        assert stored.prerequisites == ["CSCI-201", "MATH-121"]

    def test_zero_and_negative_capacity_accepted(self, catalog: CourseCatalog) -> None:
        assert catalog.upsert(Course(code="SEM-000", capacity=0)).capacity == 0
        assert catalog.upsert(Course(code="SEM-001", capacity=-1)).capacity == -1

    def test_unknown_prerequisite_allowed(self, catalog: CourseCatalog) -> None:
        stored = catalog.upsert(Course(code="CSCI-301", prerequisites=["GHOST-100"]))
        assert stored.prerequisites == ["GHOST-100"]


@pytest.mark.unit
class TestDelete:
    """Tests for CourseCatalog.delete."""

    def test_delete_existing(self, catalog: CourseCatalog) -> None:
        catalog.upsert(Course(code="CSCI-101"))
        assert catalog.delete("csci-101") is True
        assert catalog.get("CSCI-101") is None

    def test_delete_missing(self, catalog: CourseCatalog) -> None:
        assert catalog.delete("CSCI-101") is False

    def test_delete_keeps_enrollments(self, seeded: Registrar) -> None:
        seeded.registration.register("alice", "CSCI-101")

        assert seeded.catalog.delete("CSCI-101") is True

        roster = seeded.ledger.enrollments_for_course("CSCI-101")
        assert len(roster) == 1
        assert roster[0].course_title == "Intro to Programming"
