import dataclasses
import enum
import logging

import pytest

from jsonrift import loader
from jsonrift.core import DecodeError, EncodeError, LoadError, ValueKind, from_native
from jsonrift.diff import ComparisonStatus, Resolution
from jsonrift.loader import (
    compare_bytes,
    compare_files,
    compare_mem_to_file,
    compare_native,
    decode_document,
    read_file,
    to_json_bytes,
)


class _Colour(enum.Enum):
    RED = "red"


@dataclasses.dataclass
class _Point:
    x: int
    y: int
    colour: _Colour = _Colour.RED


def _nested_payload(leaf, depth):
    return b"[" * depth + leaf + b"]" * depth


# Within the recursion limit, and far beyond it.
DEEP = 500
DEEPER = 3000


# ---------------------------------------------------------------------------
# COLLABORATORS
# ---------------------------------------------------------------------------

class TestReadFile:

    def test_reads_bytes(self, write_json):
        path = write_json("a.json", '{"a": 1}')
        assert read_file(path) == b'{"a": 1}'

    def test_missing_file_raises_load_error(self, tmp_path):
        missing = tmp_path / "missing.json"
        with pytest.raises(LoadError) as exc_info:
            read_file(missing)
        assert exc_info.value.source == str(missing)
        assert isinstance(exc_info.value.cause, OSError)

    def test_directory_raises_load_error(self, tmp_path):
        with pytest.raises(LoadError):
            read_file(tmp_path)


class TestToJsonBytes:

    def test_plain_structure(self):
        assert to_json_bytes({"a": [1, None]}) == b'{"a": [1, null]}'

    def test_dataclass_and_enum(self):
        assert to_json_bytes(_Point(1, 2)) == b'{"x": 1, "y": 2, "colour": "red"}'

    def test_nan_raises_encode_error(self):
        with pytest.raises(EncodeError):
            to_json_bytes({"a": float("nan")})

    def test_unsupported_type_raises_encode_error(self):
        with pytest.raises(EncodeError, match="not JSON serializable"):
            to_json_bytes({"a": object()})

    def test_circular_reference_raises_encode_error(self):
        loop = []
        loop.append(loop)
        with pytest.raises(EncodeError):
            to_json_bytes(loop)

    def test_source_in_error(self):
        with pytest.raises(EncodeError) as exc_info:
            to_json_bytes({1j: 1}, source="left")
        assert exc_info.value.source == "left"

    def test_recursion_limit_raises_encode_error(self, monkeypatch):
        def _overflow(*args, **kwargs):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(loader.json, "dumps", _overflow)
        with pytest.raises(EncodeError, match="nested too deeply") as exc_info:
            to_json_bytes([[[1]]], source="left")
        assert isinstance(exc_info.value.cause, RecursionError)


class TestDecodeDocument:

    def test_object(self):
        assert decode_document(b'{"a": 1}').kind is ValueKind.OBJECT

    def test_array_fallback(self):
        assert decode_document(b'[1, 2]').kind is ValueKind.ARRAY

    def test_accepts_str(self):
        assert decode_document('{"a": 1}') == from_native({"a": 1})

    def test_int_and_float_preserved(self):
        value = decode_document(b'[1, 1.0]')
        assert type(value[0].value) is int
        assert type(value[1].value) is float

    @pytest.mark.parametrize("payload", [b"1", b'"text"', b"null", b"true"])
    def test_scalar_top_level_rejected(self, payload):
        with pytest.raises(DecodeError, match="neither a JSON object nor a JSON array"):
            decode_document(payload, source="doc")

    @pytest.mark.parametrize("payload", [b"", b"{", b"{'a': 1}", b"\xff\xfe\xfd"])
    def test_malformed_rejected(self, payload):
        with pytest.raises(DecodeError):
            decode_document(payload)

    @pytest.mark.parametrize("payload", [b"[NaN]", b'{"a": Infinity}', b"[-Infinity]"])
    def test_non_standard_constants_rejected(self, payload):
        with pytest.raises(DecodeError):
            decode_document(payload)

    def test_out_of_range_number_rejected(self):
        with pytest.raises(DecodeError, match="outside the float range"):
            decode_document(b"[1e400]", source="doc")

    def test_too_deep_payload_rejected(self):
        with pytest.raises(DecodeError, match="nested too deeply") as exc_info:
            decode_document(_nested_payload(b"1", DEEPER), source="doc")
        assert exc_info.value.source == "doc"

    def test_error_names_source(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_document(b"{", source="left.json")
        assert exc_info.value.source == "left.json"
        assert "left.json" in exc_info.value.message

    def test_array_fallback_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="jsonrift.loader"):
            decode_document(b"[]", source="doc")
        assert "doc is not a JSON object" in caplog.text


# ---------------------------------------------------------------------------
# ENTRY POINTS
# ---------------------------------------------------------------------------

class TestCompareBytes:

    def test_equal_objects(self):
        result = compare_bytes(b'{"a": 1, "b": 2}', b'{"b": 2, "a": 1}')
        assert result.status is ComparisonStatus.EQUAL

    def test_arrays(self):
        result = compare_bytes(b"[1, 2]", b"[1, 2, 3]")
        assert result.is_array is True
        assert result.items[-1].resolution is Resolution.ADDED

    def test_object_vs_array_is_a_difference(self):
        result = compare_bytes(b'{"a": 1}', b"[1]")
        assert result.status is ComparisonStatus.DIFFERENT
        assert result.error is None

    def test_malformed_left(self):
        result = compare_bytes(b"{not json", b'{"a": 1}')
        assert result.has_diff is True
        assert isinstance(result.error, DecodeError)
        assert result.error.source == "a"

    def test_malformed_right(self):
        result = compare_bytes(b'{"a": 1}', b"[1,")
        assert isinstance(result.error, DecodeError)
        assert result.error.source == "b"

    def test_neither_side_parses_is_an_error(self):
        result = compare_bytes(b"nope", b"nope")
        assert result.has_diff is True
        assert result.status is ComparisonStatus.ERROR

    def test_abort_logged_as_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="jsonrift.loader"):
            compare_bytes(b"{", b"{}")
        assert "comparison aborted" in caplog.text


class TestCompareNative:

    def test_equal_structures(self):
        assert compare_native({"a": [1, 2]}, {"a": [1, 2]}).has_diff is False

    def test_tuple_and_list_compare_equal(self):
        assert compare_native({"a": (1, 2)}, {"a": [1, 2]}).has_diff is False

    def test_dataclasses(self):
        result = compare_native(_Point(1, 2), _Point(1, 3))
        assert [(i.key, i.resolution) for i in result.items] == [
            ("colour", Resolution.EQUAL),
            ("x", Resolution.EQUAL),
            ("y", Resolution.NOT_EQUAL),
        ]

    def test_unencodable_side_is_an_error(self):
        result = compare_native({"a": object()}, {"a": 1})
        assert result.has_diff is True
        assert isinstance(result.error, EncodeError)

    def test_scalar_side_is_a_decode_error(self):
        result = compare_native(1, 1)
        assert result.has_diff is True
        assert isinstance(result.error, DecodeError)


class TestCompareFiles:

    def test_equal_files(self, write_json):
        a = write_json("a.json", {"a": 1})
        b = write_json("b.json", {"a": 1})
        assert compare_files(a, b).status is ComparisonStatus.EQUAL

    def test_different_files(self, write_json, nested_left, nested_right):
        a = write_json("a.json", nested_left)
        b = write_json("b.json", nested_right)
        result = compare_files(a, b)
        assert result.status is ComparisonStatus.DIFFERENT
        assert result.keys() == ("a", "b", "c", "d")

    def test_missing_file(self, write_json, tmp_path):
        a = write_json("a.json", {"a": 1})
        result = compare_files(a, tmp_path / "missing.json")
        assert result.has_diff is True
        assert isinstance(result.error, LoadError)

    def test_malformed_file_names_path(self, write_json):
        a = write_json("a.json", {"a": 1})
        b = write_json("b.json", "{oops")
        result = compare_files(a, b)
        assert isinstance(result.error, DecodeError)
        assert result.error.source == b

    def test_both_files_malformed(self, write_json):
        a = write_json("a.json", "oops")
        b = write_json("b.json", "oops")
        result = compare_files(a, b)
        assert result.has_diff is True
        assert result.status is ComparisonStatus.ERROR


class TestCompareMemToFile:

    def test_matches_reference(self, write_json):
        path = write_json("expected.json", {"items": [1, 2], "name": "x"})
        result = compare_mem_to_file({"name": "x", "items": [1, 2]}, path)
        assert result.has_diff is False

    def test_reports_difference(self, write_json):
        path = write_json("expected.json", [1, 2])
        result = compare_mem_to_file([1, 2, 3], path)
        assert result.has_diff is True
        assert result.items[-1].resolution is Resolution.REMOVED

    def test_missing_reference(self, tmp_path):
        result = compare_mem_to_file({"a": 1}, tmp_path / "none.json")
        assert isinstance(result.error, LoadError)


class TestDeepNesting:

    def test_difference_at_depth_500(self):
        result = compare_bytes(_nested_payload(b"1", DEEP), _nested_payload(b"2", DEEP))
        assert result.error is None
        assert result.status is ComparisonStatus.DIFFERENT

    def test_equal_at_depth_500(self):
        payload = _nested_payload(b'{"a": 1}', DEEP)
        assert compare_bytes(payload, payload).status is ComparisonStatus.EQUAL

    def test_depth_3000_is_a_decode_error(self):
        result = compare_bytes(_nested_payload(b"", DEEPER), b"[]")
        assert result.status is ComparisonStatus.ERROR
        assert result.has_diff is True
        assert isinstance(result.error, DecodeError)
        assert result.error.source == "a"

    def test_depth_3000_file(self, write_json):
        path_a = write_json("deep.json", _nested_payload(b"", DEEPER).decode())
        path_b = write_json("flat.json", [])
        result = compare_files(path_a, path_b)
        assert isinstance(result.error, DecodeError)
        assert "nested too deeply" in result.error.message

    def test_comparison_overflow_is_an_error(self, monkeypatch):
        def _overflow(a, b):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(loader, "compare", _overflow)
        result = compare_bytes(b"[[1]]", b"[[2]]")
        assert result.status is ComparisonStatus.ERROR
        assert isinstance(result.error, DecodeError)
        assert result.error.message == "DecodeError: a and b are nested too deeply to compare"
        assert isinstance(result.error.cause, RecursionError)
