"""商品ページへのリンク先を組み立てるモジュール."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from urllib.parse import quote

from src.config import PRODUCT_PATH_PREFIX, REVIEWS_HASH
from src.models import NavigationTarget, Product

logger = logging.getLogger(__name__)


def to_query_string(parameters: Mapping[str, str]) -> str:
    """パラメータを key=value&... 形式のクエリ文字列にする（先頭の ? なし）.

    空の値は "key=" になる。parse_qsl(..., keep_blank_values=True) で元に戻る。
    """
    return "&".join(
        f"{quote(str(key), safe='')}={quote(str(value), safe='')}"
        for key, value in parameters.items()
    )


def build_link_target(
    product: Product, parameters: Mapping[str, str]
) -> NavigationTarget | None:
    """商品ページへのリンク先を返す.

    Returns:
        NavigationTarget。url_key が無い（読み込み中 / ページなし）場合は None。
    """
    if not product.url_key:
        logger.debug("url_key なしのためリンク不可: id=%s", product.id)
        return None

    return NavigationTarget(
        pathname=f"{PRODUCT_PATH_PREFIX}{product.url_key}",
        state={"product": product},
        search=to_query_string(parameters),
    )


def with_hash(target: NavigationTarget, hash_: str) -> NavigationTarget:
    """hash だけ差し替えたコピーを返す."""
    return replace(target, hash=hash_)


def build_review_link(
    product: Product, parameters: Mapping[str, str]
) -> NavigationTarget | None:
    """レビュー欄 (#reviews) へのリンク先. pathname と search は通常リンクと同じ."""
    target = build_link_target(product, parameters)
    if target is None:
        return None
    return with_hash(target, REVIEWS_HASH)
