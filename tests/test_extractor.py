"""Tests for building filter state from query parameters."""

import pytest

from query_filters import MemoryQueryParams, UnsupportedType, extract_filters


class TestExtractFilters:
    """Tests for extract_filters()."""

    def test_no_params_uses_defaults(self, order_template):
        """Test every filter falls back to its default."""
        filters, active = extract_filters(order_template, {})

        assert dict(filters) == dict(order_template)
        assert active == frozenset()

    def test_set_param_is_decoded_and_active(self):
        """Test a serialized set parameter."""
        params = {"statuses": "{completed,canceled}"}

        filters, active = extract_filters({"statuses": set()}, params)

        assert filters["statuses"] == {"completed", "canceled"}
        assert "statuses" in active

    def test_present_params_only_activate_their_keys(self, order_template):
        """Test absent keys stay inactive at their defaults."""
        filters, active = extract_filters(order_template, {"age": "30", "is_paid": "true"})

        assert filters["age"] == 30
        assert filters["is_paid"] is True
        assert filters["name"] == ""
        assert active == {"age", "is_paid"}

    def test_empty_value_is_still_present(self, order_template):
        """Test an empty parameter counts as present."""
        filters, active = extract_filters(order_template, {"name": ""})

        assert filters["name"] == ""
        assert active == {"name"}

    def test_unrelated_params_are_ignored(self, order_template):
        """Test the key set is exactly the template's."""
        filters, active = extract_filters(order_template, {"page": "2", "sort": "asc"})

        assert set(filters) == set(order_template)
        assert active == frozenset()

    def test_keys_follow_template_order(self, order_template):
        """Test filter order matches the template."""
        filters, _ = extract_filters(order_template, {"statuses": "{}", "name": "x"})

        assert list(filters) == ["name", "age", "is_paid", "statuses"]

    def test_unsupported_default_fails_before_decoding(self):
        """Test template validation happens up front."""
        with pytest.raises(UnsupportedType):
            extract_filters({"name": "", "bad": object()}, {"name": "x"})

    def test_result_is_read_only(self, order_template):
        """Test returned state cannot be edited in place."""
        filters, active = extract_filters(order_template, {})

        with pytest.raises(TypeError):
            filters["name"] = "x"
        assert isinstance(active, frozenset)

    def test_reads_from_param_store(self, order_template):
        """Test a QueryParamStore works as the parameter source."""
        params = MemoryQueryParams.from_query_string("age=5&statuses=%7Bcompleted%7D")

        filters, active = extract_filters(order_template, params)

        assert filters["age"] == 5
        assert filters["statuses"] == {"completed"}
        assert active == {"age", "statuses"}

    def test_shape_decoding_ignores_default_kind(self, order_template):
        """Test schema-less decoding turns "true" into a bool for a string filter."""
        filters, _ = extract_filters(order_template, {"name": "true"})

        assert filters["name"] is True

    def test_typed_decoding_keeps_strings(self, order_template):
        """Test typed mode keeps string filters as text."""
        filters, _ = extract_filters(
            order_template, {"name": "true", "age": "7"}, typed=True
        )

        assert filters["name"] == "true"
        assert filters["age"] == 7
