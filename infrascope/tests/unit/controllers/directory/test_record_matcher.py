"""Tests for the two-tier record matcher."""

from __future__ import annotations

import pytest

from infrascope.controllers.directory.matchers.record_matcher import (
    RecordMatcher,
    match_records,
)
from infrascope.models.directory.directory_record import DirectoryFilters, DirectoryRecord

pytestmark = [pytest.mark.unit, pytest.mark.fast]


def _ids(records: list[DirectoryRecord] | tuple[DirectoryRecord, ...]) -> list[str]:
    return [record.id for record in records]


class TestRecordMatcherTiers:
    """Exact-then-partial ranking."""

    def test_exact_name_then_partial(self, directory_records: list[DirectoryRecord]) -> None:
        result = RecordMatcher().match(directory_records, DirectoryFilters(search="alice"))
        assert _ids(result.exact) == ["u1"]
        assert _ids(result.partial) == []

    def test_prefix_query_matches_both_partially(
        self, directory_records: list[DirectoryRecord]
    ) -> None:
        result = RecordMatcher().match(directory_records, DirectoryFilters(search="al"))
        assert _ids(result.exact) == []
        assert _ids(result.partial) == ["u1", "u2"]

    def test_alice_scenario_ranks_exact_before_partial(self) -> None:
        records = [
            DirectoryRecord.model_validate({"_id": "u2", "cn": "Alice Anders", "email": "aa@x"}),
            DirectoryRecord.model_validate({"_id": "u1", "cn": "alice a", "email": "alice@x"}),
        ]
        result = RecordMatcher().match(records, DirectoryFilters(search="alice a"))
        assert _ids(result.exact) == ["u1"]
        assert _ids(result.partial) == ["u2"]
        assert _ids(result.records) == ["u1", "u2"]

    def test_exact_match_on_id_and_email(self, directory_records: list[DirectoryRecord]) -> None:
        matcher = RecordMatcher()
        assert _ids(matcher.match(directory_records, DirectoryFilters(search="u3")).exact) == ["u3"]
        assert _ids(
            matcher.match(directory_records, DirectoryFilters(search="BOB@X")).exact
        ) == ["u3"]

    def test_search_is_trimmed_and_case_insensitive(
        self, directory_records: list[DirectoryRecord]
    ) -> None:
        result = RecordMatcher().match(directory_records, DirectoryFilters(search="  ALAN  "))
        assert _ids(result.exact) == ["u2"]

    def test_tiers_are_disjoint(self, directory_records: list[DirectoryRecord]) -> None:
        result = RecordMatcher().match(directory_records, DirectoryFilters(search="a"))
        assert not set(_ids(result.exact)) & set(_ids(result.partial))

    def test_no_text_keeps_input_order(self, directory_records: list[DirectoryRecord]) -> None:
        result = RecordMatcher().match(directory_records)
        assert _ids(result.records) == ["u1", "u2", "u3"]
        assert len(result) == 3

    def test_no_hits_is_empty(self, directory_records: list[DirectoryRecord]) -> None:
        assert match_records(directory_records, DirectoryFilters(search="zzz")) == []

    def test_empty_input(self) -> None:
        assert len(RecordMatcher().match([], DirectoryFilters(search="a"))) == 0


class TestRecordMatcherFilters:
    """Structured filters apply to both tiers."""

    def test_role_filter(self, directory_records: list[DirectoryRecord]) -> None:
        records = match_records(directory_records, DirectoryFilters(role="admin"))
        assert _ids(records) == ["u1"]

    def test_default_role_is_user(self, directory_records: list[DirectoryRecord]) -> None:
        records = match_records(directory_records, DirectoryFilters(role="user"))
        assert _ids(records) == ["u1", "u2"]

    def test_org_and_active_filters(self, directory_records: list[DirectoryRecord]) -> None:
        records = match_records(
            directory_records, DirectoryFilters(org="networking", is_active=False)
        )
        assert _ids(records) == ["u3"]

    def test_inactive_excluded_when_active_only(
        self, directory_records: list[DirectoryRecord]
    ) -> None:
        records = match_records(directory_records, DirectoryFilters(isActive=True))
        assert all(record.is_active for record in records)
        assert len(records) == 2

    def test_business_unit_filter_applies_to_partial_tier(
        self, directory_records: list[DirectoryRecord]
    ) -> None:
        result = RecordMatcher().match(
            directory_records, DirectoryFilters(search="b", business_unit="edge")
        )
        assert _ids(result.records) == ["u3"]

    def test_output_never_longer_than_input(
        self, directory_records: list[DirectoryRecord]
    ) -> None:
        for search in ("", "a", "x", "alice", "@"):
            assert len(match_records(directory_records, DirectoryFilters(search=search))) <= 3
