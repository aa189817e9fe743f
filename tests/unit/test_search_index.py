"""Tests for SearchIndex pre-filtering."""

from injury_info.search import SearchIndex, extract_query_words


def _filler(source_factory, count: int, start: int = 0) -> list:
    return [
        source_factory(
            id=f"filler_{i}",
            disease_or_category=f"Condition {i}",
            title=f"Filler {i}",
            url=f"https://example.org/filler/{i}",
            keywords=(f"filler{i}",),
        )
        for i in range(start, start + count)
    ]


class TestSearchIndex:
    def test_small_collection_returns_all_records(self, source_factory) -> None:
        records = _filler(source_factory, 50)
        index = SearchIndex()
        index.build(records)

        candidates = index.pre_filter(["unrelated"], "unrelated")
        assert candidates == records

    def test_large_collection_is_narrowed(self, source_factory) -> None:
        matching = [
            source_factory(
                id=f"meso_{i}",
                url=f"https://example.org/meso/{i}",
                keywords=("asbestos",),
            )
            for i in range(6)
        ]
        records = _filler(source_factory, 30) + matching + _filler(source_factory, 30, 30)
        index = SearchIndex()
        index.build(records)

        query = "asbestos exposure"
        candidates = index.pre_filter(extract_query_words(query), query)
        assert candidates == matching

    def test_too_few_candidates_returns_all(self, source_factory) -> None:
        records = _filler(source_factory, 60)
        index = SearchIndex()
        index.build(records)

        candidates = index.pre_filter(["filler3"], "filler3")
        assert len(candidates) == 60

    def test_disease_substring_in_either_direction(self, source_factory) -> None:
        lymphoma = [
            source_factory(
                id=f"nhl_{i}",
                disease_or_category="Non-Hodgkin Lymphoma",
                url=f"https://example.org/nhl/{i}",
                keywords=(),
            )
            for i in range(5)
        ]
        records = _filler(source_factory, 55) + lymphoma
        index = SearchIndex()
        index.build(records)

        # Raw query contained in the disease label
        candidates = index.pre_filter(["lymphoma"], "lymphoma")
        assert candidates == lymphoma

    def test_candidates_keep_store_order(self, source_factory) -> None:
        tagged = [
            source_factory(
                id=f"tag_{i}",
                disease_or_category="Roundup" if i % 2 else "Glyphosate",
                url=f"https://example.org/tag/{i}",
                keywords=("roundup",),
            )
            for i in range(8)
        ]
        records = _filler(source_factory, 25) + tagged + _filler(source_factory, 25, 25)
        index = SearchIndex()
        index.build(records)

        candidates = index.pre_filter(["roundup"], "roundup")
        assert [c.id for c in candidates] == [r.id for r in tagged]

    def test_build_replaces_previous_index(self, source_factory) -> None:
        index = SearchIndex()
        index.build(_filler(source_factory, 3))
        index.build([source_factory()])
        assert len(index.records) == 1
        assert index.disease_count == 1
        assert index.keyword_count == 2
