import pytest

from utils.logging_utils import mask_value, sanitize_payload


@pytest.mark.unit
class TestSanitizePayload:
    def test_only_allowed_keys_are_kept(self):
        payload = {"name": "Linen Shirt", "description": "Long text", "store_id": "abc"}

        assert sanitize_payload(payload, ("name", "store_id")) == {"name": "Linen Shirt", "store_id": "abc"}

    def test_lists_are_reduced_to_their_length(self):
        payload = {"variants": [{}, {}, {}], "tags": []}

        assert sanitize_payload(payload, ("variants", "tags")) == {"variants": "<3 items>", "tags": "<0 items>"}

    def test_masked_keys(self):
        payload = {"email": "seller@example.com", "phone_number": "351912345678"}

        result = sanitize_payload(payload, ("email", "phone_number"), masked_keys=("email", "phone_number"))

        assert result == {"email": "se***@example.com", "phone_number": "***"}

    def test_non_mapping_payload(self):
        assert sanitize_payload(["a", "b"], ("name",)) == {}

    def test_mask_value_keeps_edges_of_long_values(self):
        assert mask_value("acct_1234567890abcd") == "acct...abcd"
        assert mask_value(42) == 42
