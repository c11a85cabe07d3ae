import re
import uuid
from decimal import Decimal

import pytest

from marketplace.catalog.domain.exceptions import ProductValidationError
from marketplace.catalog.domain.services.product_validator import (
    CategoryDraft,
    ProductCore,
    TagDraft,
    VariantDraft,
    VariantRecord,
    derive_categories,
    derive_variants,
    stamp_variants,
    validate_all,
    validate_submission,
    validate_tags,
)

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@pytest.fixture
def submission():
    return {
        "name": "Linen Shirt",
        "description": "Breathable linen shirt for warm days",
        "status": "draft",
        "store_id": str(uuid.uuid4()),
        "variants": [
            {"name": "Red M", "color": "#DC143C", "size": "m", "price": "19.99", "quantity": 5},
            {"name": "White S", "color": "#FFFFFF", "size": "s", "price": 0, "quantity": 0},
        ],
        "categories": [{"name": "Shirts"}],
        "tags": [{"name": "linen", "description": "Made from linen"}],
    }


def _draft(**overrides):
    values = {
        "name": "Red M",
        "color": "#DC143C",
        "size": "m",
        "price": Decimal("19.99"),
        "quantity": 5,
        "sku": "red-m-m-dc143c-abc123",
    }
    values.update(overrides)
    return VariantDraft(**values)


@pytest.mark.unit
class TestValidateSubmission:
    def test_valid_submission_builds_bundle(self, submission):
        bundle = validate_submission(submission)

        assert isinstance(bundle.product, ProductCore)
        assert bundle.product.store_id == uuid.UUID(submission["store_id"])
        assert len(bundle.variants) == 2
        assert all(isinstance(v, VariantDraft) for v in bundle.variants)
        assert bundle.variants[0].price == Decimal("19.99")
        assert bundle.variants[1].price == Decimal("0")
        assert bundle.categories[0] == CategoryDraft(name="Shirts", slug=bundle.categories[0].slug)
        assert bundle.tags == (TagDraft(name="linen", description="Made from linen"),)

    def test_generated_identifiers_are_slugs(self, submission):
        bundle = validate_submission(submission)

        for variant in bundle.variants:
            assert SLUG_RE.match(variant.sku)
        assert bundle.variants[0].sku.startswith("red-m-m-dc143c-")
        assert SLUG_RE.match(bundle.categories[0].slug)
        assert bundle.categories[0].slug.startswith("shirts-")

    def test_same_submission_gets_different_identifiers(self, submission):
        first = validate_submission(submission)
        second = validate_submission(submission)

        assert first.variants[0].sku != second.variants[0].sku
        assert first.categories[0].slug != second.categories[0].slug

    def test_submission_is_not_mutated(self, submission):
        validate_submission(submission)
        assert "sku" not in submission["variants"][0]
        assert "slug" not in submission["categories"][0]

    def test_empty_variants_are_allowed(self, submission):
        submission["variants"] = []
        bundle = validate_submission(submission)
        assert bundle.variants == ()

    @pytest.mark.parametrize("tags", [None, []])
    def test_missing_or_empty_tags_are_allowed(self, submission, tags):
        submission["tags"] = tags
        assert validate_submission(submission).tags == ()

    def test_zero_categories_fails_naming_categories(self, submission):
        submission["categories"] = []

        with pytest.raises(ProductValidationError) as exc_info:
            validate_submission(submission)

        assert exc_info.value.record_sets == ["categories"]

    def test_one_character_tag_fails_naming_tags(self, submission):
        submission["tags"] = [{"name": "x", "description": "Too short a name"}]

        with pytest.raises(ProductValidationError) as exc_info:
            validate_submission(submission)

        assert exc_info.value.record_sets == ["tags"]
        assert "name" in exc_info.value.errors["tags"][0]

    def test_all_failing_sets_are_reported_together(self, submission):
        submission["name"] = "ab"
        submission["variants"][0]["size"] = "xxxl"
        submission["categories"] = [{"name": "Categorical Imperatives"}]
        submission["tags"] = [{"name": "ok-tag", "description": ""}]

        with pytest.raises(ProductValidationError) as exc_info:
            validate_submission(submission)

        assert exc_info.value.record_sets == ["categories", "product", "tags", "variants"]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("color", "#123456"),
            ("size", "XL"),
            ("price", "-1.00"),
            ("price", "1.999"),
            ("quantity", -1),
            ("name", "ab"),
            ("name", "A much too long name"),
        ],
    )
    def test_invalid_variant_field(self, submission, field, value):
        submission["variants"][0][field] = value

        with pytest.raises(ProductValidationError) as exc_info:
            validate_submission(submission)

        assert exc_info.value.record_sets == ["variants"]
        assert field in exc_info.value.errors["variants"][0]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", "ab"),
            ("name", "x" * 16),
            ("description", "too short"),
            ("description", "x" * 301),
            ("status", "archived"),
            ("store_id", "not-a-uuid"),
        ],
    )
    def test_invalid_product_field(self, submission, field, value):
        submission[field] = value

        with pytest.raises(ProductValidationError) as exc_info:
            validate_submission(submission)

        assert exc_info.value.record_sets == ["product"]
        assert field in exc_info.value.errors["product"]

    def test_missing_variants_fails(self, submission):
        del submission["variants"]

        with pytest.raises(ProductValidationError) as exc_info:
            validate_submission(submission)

        assert "variants" in exc_info.value.record_sets

    def test_non_mapping_submission_fails(self):
        with pytest.raises(ProductValidationError) as exc_info:
            validate_submission(["not", "an", "object"])

        assert exc_info.value.record_sets == ["submission"]


@pytest.mark.unit
class TestValidatePieces:
    def test_validate_all_returns_typed_records(self):
        product, variants, categories = validate_all(
            {"name": "Mug", "description": "Ceramic coffee mug", "status": "active", "store_id": str(uuid.uuid4())},
            derive_variants([{"name": "Black", "color": "#000000", "size": "s", "price": "4.50", "quantity": 3}]),
            derive_categories([{"name": "Kitchen"}]),
        )

        assert product.status == "active"
        assert variants[0].quantity == 3
        assert categories[0].name == "Kitchen"

    def test_validate_tags_rejects_long_description(self):
        with pytest.raises(ProductValidationError) as exc_info:
            validate_tags([{"name": "gift", "description": "x" * 301}])
        assert exc_info.value.record_sets == ["tags"]

    def test_derive_leaves_malformed_entries_for_the_schema(self):
        assert derive_variants("nope") == "nope"
        assert derive_categories([None]) == [None]


@pytest.mark.unit
class TestStampVariants:
    def test_stamps_product_id(self):
        product_id = uuid.uuid4()

        records = stamp_variants([_draft(), _draft(name="Black L", size="l", color="#000000")], product_id)

        assert all(isinstance(r, VariantRecord) for r in records)
        assert {r.product_id for r in records} == {product_id}
        assert records[0].sku == "red-m-m-dc143c-abc123"

    def test_missing_product_id_fails_naming_variants(self):
        with pytest.raises(ProductValidationError) as exc_info:
            stamp_variants([_draft()], None)

        assert exc_info.value.record_sets == ["variants"]

    def test_no_drafts_gives_no_records(self):
        assert stamp_variants([], uuid.uuid4()) == []
