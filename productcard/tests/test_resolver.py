"""resolver モジュールのユニットテスト."""

import json
from pathlib import Path

from src.loader import product_from_dict
from src.models import Product, ResolvedSelection, Variant
from src.resolver import resolve_variant_index, variant_matches

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _load_product(name: str) -> Product:
    return product_from_dict(json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8")))


def _variant(**parameters: str) -> Variant:
    return Variant(product=Product(), parameters=parameters)


class TestVariantMatches:
    """variant_matches のテスト."""

    def test_equal_values(self):
        assert variant_matches({"color": "red", "size": "M"}, {"color": "red"})

    def test_different_value(self):
        assert not variant_matches({"color": "blue"}, {"color": "red"})

    def test_missing_key_is_consistent(self):
        """バリアントが持たない属性は一致扱いになること."""
        assert variant_matches({"size": "M"}, {"color": "red"})

    def test_empty_filters(self):
        assert variant_matches({"color": "red"}, {})


class TestResolveVariantIndex:
    """resolve_variant_index のテスト."""

    def test_empty_filters_default(self):
        """フィルタが空なら常に既定値を返すこと."""
        variants = [_variant(color="blue"), _variant(color="red")]
        assert resolve_variant_index(variants, {}) == ResolvedSelection(0, {})

    def test_no_variants_default(self):
        assert resolve_variant_index(None, {"color": "red"}) == ResolvedSelection(0, {})
        assert resolve_variant_index([], {"color": "red"}) == ResolvedSelection(0, {})

    def test_exact_match(self):
        variants = [_variant(color="blue", size="M"), _variant(color="red", size="L")]
        result = resolve_variant_index(variants, {"color": "red", "size": "L"})

        assert result.index == 1
        assert result.parameters == {"color": "red", "size": "L"}

    def test_first_match_wins(self):
        """重複する一致では先頭の位置を返すこと."""
        variants = [
            _variant(color="blue"),
            _variant(color="red"),
            _variant(color="red"),
        ]
        assert resolve_variant_index(variants, {"color": "red"}).index == 1

    def test_parameters_limited_to_filter_keys(self):
        """返すパラメータはフィルタに含まれるキーのみであること."""
        variants = [_variant(color="blue", size="M"), _variant(color="red", size="M")]
        result = resolve_variant_index(variants, {"color": "red"})

        assert result == ResolvedSelection(1, {"color": "red"})

    def test_no_match_default(self):
        """一致しなければ既定値にフォールバックすること."""
        variants = [_variant(color="blue"), _variant(color="red")]
        assert resolve_variant_index(variants, {"color": "green"}) == ResolvedSelection(0, {})

    def test_filter_key_absent_everywhere(self):
        """どのバリアントも持たない属性だけのフィルタでは先頭が一致すること."""
        variants = [_variant(color="blue"), _variant(color="red")]
        assert resolve_variant_index(variants, {"material": "wool"}) == ResolvedSelection(0, {})

    def test_does_not_mutate_inputs(self):
        variants = [_variant(color="blue", size="M"), _variant(color="red", size="M")]
        filters = {"color": "red"}
        result = resolve_variant_index(variants, filters)

        assert result.parameters is not variants[1].parameters
        assert result.parameters is not filters
        assert filters == {"color": "red"}
        assert variants[1].parameters == {"color": "red", "size": "M"}

    def test_result_is_hashable(self):
        variants = [_variant(color="blue"), _variant(color="red")]
        result = resolve_variant_index(variants, {"color": "red"})

        assert hash(result) == hash(ResolvedSelection(1, {"color": "red"}))

    def test_idempotent(self):
        product = _load_product("configurable_cap.json")
        first = resolve_variant_index(product.variants, {"color": "red", "size": "L"})
        second = resolve_variant_index(product.variants, {"color": "red", "size": "L"})

        assert first == second == ResolvedSelection(2, {"color": "red", "size": "L"})
