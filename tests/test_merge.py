"""
Merge-on-import tests.
"""
from fittrack.services.analytics import merge_by_id, sort_by_date


class TestMergeById:
    def test_existing_wins(self, make_weight):
        existing = [make_weight("a", 75, "2024-01-02")]
        imported = [make_weight("a", 70, "2024-01-01")]

        merged = merge_by_id(existing, imported)

        assert len(merged) == 1
        assert merged[0].weight == 75
        assert merged[0].date.isoformat() == "2024-01-02"

    def test_not_symmetric(self, make_weight):
        left = [make_weight("a", 75, "2024-01-02")]
        right = [make_weight("a", 70, "2024-01-01")]
        assert merge_by_id(right, left)[0].weight == 70

    def test_sorted_newest_first(self, make_weight):
        existing = [make_weight("a", 80, "2024-01-01")]
        imported = [make_weight("b", 81, "2024-01-05"), make_weight("c", 82, "2024-01-03")]
        merged = merge_by_id(existing, imported)
        assert [e.id for e in merged] == ["b", "c", "a"]

    def test_reimport_is_idempotent(self, make_weight):
        existing = [make_weight("a", 80, "2024-01-01"), make_weight("b", 81, "2024-01-04")]
        imported = [make_weight("b", 90, "2024-01-09"), make_weight("c", 82, "2024-01-02")]

        once = merge_by_id(existing, imported)
        twice = merge_by_id(once, imported)

        assert twice == once
        assert merge_by_id(existing, once) == once

    def test_empty_import_is_identity(self, make_weight):
        collection = [
            make_weight("a", 80, "2024-01-01"),
            make_weight("b", 81, "2024-01-04"),
            make_weight("c", 79, "2024-01-02"),
        ]
        assert merge_by_id(collection, []) == sort_by_date(collection, descending=True)

    def test_no_duplicate_ids_and_union_length(self, make_workout):
        existing = [make_workout(str(i), "gym", "2024-01-01") for i in range(5)]
        imported = [make_workout(str(i), "home", "2024-01-02") for i in range(3, 9)]

        merged = merge_by_id(existing, imported)
        ids = [w.id for w in merged]

        assert len(ids) == len(set(ids))
        assert set(ids) == {str(i) for i in range(9)}
        assert len(merged) == 9

    def test_duplicates_within_import_collapse(self, make_weight):
        imported = [make_weight("x", 70, "2024-01-01"), make_weight("x", 71, "2024-01-02")]
        merged = merge_by_id([], imported)
        assert [e.weight for e in merged] == [70]
