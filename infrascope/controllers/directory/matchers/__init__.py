"""Directory matchers."""

from infrascope.controllers.directory.matchers.record_matcher import (
    MatchResult,
    RecordMatcher,
    match_records,
)

__all__ = ["MatchResult", "RecordMatcher", "match_records"]
