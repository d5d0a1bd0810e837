"""Tests for the model reply interpreter."""

import json

import pytest

from domain.models import TextNode
from services.ai.output_postprocess import parse_response


def _ids(results):
    return [v.node_id for v in results.variants]


def _by_id(results, node_id):
    return [v for v in results.variants if v.node_id == node_id]


@pytest.fixture
def hello_world():
    return [{"id": "1", "characters": "Hello"}, {"id": "2", "characters": "World"}]


class TestGlobalFallback:
    def test_not_json(self):
        results = parse_response("not json", [{"id": "1", "characters": "Hello"}])
        assert results.to_dict() == {
            "variants": [{"nodeId": "1", "original": "Hello", "options": ["Hello", "Hello", "Hello"]}]
        }

    def test_empty_variants_equals_identity_fallback(self):
        nodes = [{"id": "1", "characters": "Hello"}]
        assert parse_response('{"variants": []}', nodes).to_dict() == parse_response("not json", nodes).to_dict()

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            None,
            "[]",
            "42",
            '"variants"',
            "{}",
            '{"variants": null}',
            '{"variants": "A,B,C"}',
            '{"variants": {"nodeId": "1"}}',
            "{'variants': []}",
        ],
    )
    def test_malformed_replies_fall_back_in_input_order(self, raw, hello_world):
        results = parse_response(raw, hello_world)
        assert results.to_dict() == {
            "variants": [
                {"nodeId": "1", "original": "Hello", "options": ["Hello", "Hello", "Hello"]},
                {"nodeId": "2", "original": "World", "options": ["World", "World", "World"]},
            ]
        }


class TestReconciliation:
    def test_partial_reply_fills_missing_nodes(self, hello_world):
        raw = '{"variants":[{"nodeId":"1","options":["A","B","C"]}]}'
        results = parse_response(raw, hello_world).to_dict()["variants"]
        assert {"nodeId": "1", "original": "Hello", "options": ["A", "B", "C"]} in results
        assert {"nodeId": "2", "original": "World", "options": ["World", "World", "World"]} in results
        assert len(results) == 2

    def test_original_comes_from_input_not_upstream(self, hello_world):
        raw = json.dumps({"variants": [{"nodeId": "1", "original": "HACKED", "options": ["A", "B", "C"]}]})
        (entry,) = _by_id(parse_response(raw, hello_world), "1")
        assert entry.original == "Hello"

    def test_unknown_node_id_kept_with_empty_original(self, hello_world):
        raw = json.dumps({"variants": [{"nodeId": "zzz", "options": ["A", "B", "C"]}]})
        results = parse_response(raw, hello_world)
        assert _ids(results) == ["zzz", "1", "2"]
        assert results.variants[0].original == ""

    def test_missing_options_become_empty_list(self, hello_world):
        raw = json.dumps({"variants": [{"nodeId": "1"}, {"nodeId": "2", "options": None}]})
        results = parse_response(raw, hello_world)
        assert [v.options for v in results.variants] == [[], []]

    def test_option_count_not_enforced(self, hello_world):
        raw = json.dumps({"variants": [{"nodeId": "1", "options": ["only one"]}]})
        (entry,) = _by_id(parse_response(raw, hello_world), "1")
        assert entry.options == ["only one"]

    def test_numeric_node_id_does_not_match_string_id(self, hello_world):
        raw = json.dumps({"variants": [{"nodeId": 1, "options": ["A", "B", "C"]}]})
        results = parse_response(raw, hello_world)
        assert _ids(results) == [1, "1", "2"]
        assert results.variants[0].original == ""

    def test_duplicate_node_ids_are_not_merged(self, hello_world):
        # 현재 동작 기록: 같은 nodeId 가 두 번 오면 두 개 다 남는다
        raw = json.dumps(
            {
                "variants": [
                    {"nodeId": "1", "options": ["A", "B", "C"]},
                    {"nodeId": "1", "options": ["D", "E", "F"]},
                ]
            }
        )
        results = parse_response(raw, hello_world)
        assert [v.options for v in _by_id(results, "1")] == [["A", "B", "C"], ["D", "E", "F"]]
        assert len(_by_id(results, "2")) == 1

    def test_accepts_text_node_objects(self):
        nodes = [TextNode(id="x", characters="สวัสดี", name="Hi")]
        results = parse_response('{"variants": [{"nodeId": "x", "options": ["a", "b", "c"]}]}', nodes)
        assert results.variants[0].original == "สวัสดี"


class TestTotality:
    @pytest.mark.parametrize(
        "raw",
        [
            "{",
            "null",
            "true",
            '{"variants": [{"nodeId": ["1"], "options": ["A"]}]}',
            '{"variants": [{"nodeId": {"a": 1}}]}',
            '{"variants": [{}]}',
            "[" * 5000,
            "\x00\x01",
        ],
    )
    def test_never_raises_and_covers_every_input(self, raw, hello_world):
        results = parse_response(raw, hello_world)
        ids = _ids(results)
        assert "1" in ids
        assert "2" in ids


class TestBadEntries:
    def test_non_object_entry_keeps_valid_siblings(self, hello_world):
        raw = '{"variants":[{"nodeId":"1","options":["A","B","C"]}, "junk"]}'
        assert parse_response(raw, hello_world).to_dict() == {
            "variants": [
                {"nodeId": "1", "original": "Hello", "options": ["A", "B", "C"]},
                {"nodeId": "2", "original": "World", "options": ["World", "World", "World"]},
            ]
        }

    def test_non_array_options_keeps_valid_siblings(self, hello_world):
        raw = '{"variants":[{"nodeId":"1","options":["A","B","C"]}, {"nodeId":"2","options":"X"}]}'
        assert parse_response(raw, hello_world).to_dict() == {
            "variants": [
                {"nodeId": "1", "original": "Hello", "options": ["A", "B", "C"]},
                {"nodeId": "2", "original": "World", "options": []},
            ]
        }

    @pytest.mark.parametrize("raw", ['{"variants": [null]}', '{"variants": ["1", 2, [3]]}'])
    def test_only_non_object_entries_reconcile_every_node(self, raw, hello_world):
        results = parse_response(raw, hello_world)
        assert results.to_dict() == {
            "variants": [
                {"nodeId": "1", "original": "Hello", "options": ["Hello", "Hello", "Hello"]},
                {"nodeId": "2", "original": "World", "options": ["World", "World", "World"]},
            ]
        }

    def test_non_array_options_becomes_empty_list(self, hello_world):
        raw = '{"variants": [{"nodeId": "1", "options": "A"}]}'
        (entry,) = _by_id(parse_response(raw, hello_world), "1")
        assert entry.options == []
        assert entry.original == "Hello"
