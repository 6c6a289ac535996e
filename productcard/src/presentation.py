"""解決済みバリアントから表示用の値（サムネイル・価格）を取り出す."""

from __future__ import annotations

from src.models import PresentationFacts, Product


class VariantIndexError(IndexError):
    """configurable 商品に範囲外のバリアント位置が渡された."""


def effective_product(product: Product, index: int) -> Product:
    """表示対象の商品を返す.

    configurable 商品でバリアントがあればそのバリアントの商品、
    それ以外は index に関係なく商品自身。

    Raises:
        VariantIndexError: configurable 商品で index が範囲外の場合
    """
    if not product.is_configurable or not product.variants:
        return product

    # 負の index は末尾から数えるため明示的に弾く
    if not 0 <= index < len(product.variants):
        raise VariantIndexError(
            f"variant index {index} out of range for {len(product.variants)} variants"
        )
    return product.variants[index].product


def extract_presentation_facts(product: Product, index: int) -> PresentationFacts:
    """サムネイルパス・価格・表示対象商品を導出する.

    サムネイルはバリアント側を優先し、無ければ親商品のものを使う。
    価格が None なら商品は読み込み中。
    """
    effective = effective_product(product, index)

    thumbnail = effective.thumbnail or product.thumbnail
    return PresentationFacts(
        thumbnail=thumbnail.path if thumbnail else None,
        price=effective.price,
        effective=effective,
    )
