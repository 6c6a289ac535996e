"""商品タイル 1 枚分の表示用データを組み立てる.

処理フロー:
  1. フィルタからバリアントを解決
  2. 解決結果からサムネイル・価格を導出
  3. 解決パラメータ付きのリンク先を生成
"""

from __future__ import annotations

from collections.abc import Mapping

from src.config import MEDIA_PATH_PREFIX
from src.link import build_link_target, build_review_link
from src.models import GROUPED_TYPE, CardFacts, Product
from src.presentation import extract_presentation_facts
from src.resolver import resolve_variant_index


class CardAction:
    """タイルのメインボタンの種類."""

    CONFIGURE = "configure"
    VIEW_DETAILS = "view_details"
    ADD_TO_CART = "add_to_cart"


def review_label(count: int) -> str:
    """レビュー件数の表示文言 (例: "1 Review", "3 Reviews")."""
    return f"{count} {'Review' if count == 1 else 'Reviews'}"


def card_action(product: Product, price) -> str | None:
    """価格が無ければ None（プレースホルダ表示）、あれば商品タイプに応じたボタン."""
    if price is None:
        return None
    if product.is_configurable:
        return CardAction.CONFIGURE
    if product.type_id == GROUPED_TYPE:
        return CardAction.VIEW_DETAILS
    return CardAction.ADD_TO_CART


def build_card(product: Product, filters: Mapping[str, str] | None = None) -> CardFacts:
    """商品とフィルタからタイルの表示用データを生成する."""
    selection = resolve_variant_index(product.variants, filters or {})
    facts = extract_presentation_facts(product, selection.index)
    link = build_link_target(product, selection.parameters)

    review_link = None
    review_text = None
    summary = product.review_summary
    if summary and summary.review_count > 0:
        review_link = build_review_link(product, selection.parameters)
        review_text = review_label(summary.review_count)

    return CardFacts(
        product=product,
        selection=selection,
        effective=facts.effective,
        thumbnail=facts.thumbnail,
        image_src=f"{MEDIA_PATH_PREFIX}{facts.thumbnail}" if facts.thumbnail else None,
        price=facts.price,
        link=link,
        is_loading=not product.url_key,
        action=card_action(product, facts.price),
        review_link=review_link,
        review_text=review_text,
    )
