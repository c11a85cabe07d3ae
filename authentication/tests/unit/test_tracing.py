from unittest.mock import MagicMock

import pytest

from authentication.infra.observability.tracing import add_span_attributes


@pytest.mark.unit
def test_add_span_attributes_stringifies_values():
    span = MagicMock()

    add_span_attributes(span, product_id=42, outcome="success")

    span.set_attribute.assert_any_call("product_id", "42")
    span.set_attribute.assert_any_call("outcome", "success")
    assert span.set_attribute.call_count == 2
