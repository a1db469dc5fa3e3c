import pytest

from citation_coverage.matcher import CoverageDiffer, compute_coverage


def test_uncited_entry_is_reported():
    result = compute_coverage({"Smith.2020", "Jones.2021a"}, {"Smith.2020"})
    assert result.uncited == ["Jones.2021a"]
    assert result.unknown == []
    assert not result.is_complete


def test_unknown_citation_without_bibliography():
    result = compute_coverage(set(), {"Doe.2019b"})
    assert result.uncited == []
    assert result.unknown == ["Doe.2019b"]
    assert result.is_complete


def test_empty_document_leaves_everything_uncited():
    result = compute_coverage({"b.2020", "a.2021"}, set())
    assert result.uncited == ["a.2021", "b.2020"]


def test_disjoint_sets():
    result = compute_coverage({"A.2020"}, {"B.2021"})
    assert result.uncited == ["A.2020"]
    assert result.unknown == ["B.2021"]


def test_equal_sets_are_fully_covered():
    keys = {"A.2020", "B.2021"}
    result = compute_coverage(keys, set(keys))
    assert result.uncited == []
    assert result.unknown == []
    assert result.bibliography_keys == 2
    assert result.document_keys == 2


def test_duplicate_inputs_collapse():
    result = CoverageDiffer().diff(["A.2020", "A.2020", "B.2021"], ["A.2020", "A.2020"])
    assert result.uncited == ["B.2021"]
    assert result.bibliography_keys == 2
    assert result.document_keys == 1


def test_output_is_sorted_and_stable():
    bibliography = ["Zeta.2020", "alpha.2020", "Beta.2020", "Alpha.2020"]
    first = compute_coverage(bibliography, [])
    second = compute_coverage(reversed(bibliography), [])
    assert first.uncited == ["Alpha.2020", "Beta.2020", "Zeta.2020", "alpha.2020"]
    assert first.uncited == second.uncited


@pytest.mark.parametrize(
    "document",
    [set(), {"A.2020"}, {"X.1999", "Y.2000"}, {"A.2020", "B.2021", "C.2022", "Z.2030"}],
)
def test_uncited_is_subset_of_bibliography(document):
    bibliography = {"A.2020", "B.2021", "C.2022"}
    result = compute_coverage(bibliography, document)
    assert set(result.uncited) <= bibliography
    assert set(result.unknown) <= document
