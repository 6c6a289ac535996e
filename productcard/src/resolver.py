"""バリアント解決モジュール.

選択中の属性フィルタから configurable 商品の「アクティブ」なバリアントを決める。

解決ルール:
  1. バリアントが無い、またはフィルタが空 → 既定 (index 0, パラメータなし)
  2. 先頭から走査し、全フィルタと矛盾しない最初のバリアントを採用
  3. 一致なし → 既定にフォールバック
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from src.models import ResolvedSelection, Variant

logger = logging.getLogger(__name__)


def variant_matches(parameters: Mapping[str, str], filters: Mapping[str, str]) -> bool:
    """バリアントのパラメータが全フィルタと矛盾しないか判定する.

    フィルタのキーをバリアントが持たない場合は一致とみなす。
    """
    return all(
        key not in parameters or parameters[key] == value
        for key, value in filters.items()
    )


def resolve_variant_index(
    variants: Sequence[Variant] | None, filters: Mapping[str, str] | None
) -> ResolvedSelection:
    """フィルタに合うバリアントの位置と、フィルタと重なるパラメータを返す.

    Args:
        variants: バリアント列（None 可）
        filters: 属性コード -> 選択値（空可）

    Returns:
        ResolvedSelection。一致しなければ index 0・パラメータなし。
    """
    if not variants or not filters:
        return ResolvedSelection()

    for index, variant in enumerate(variants):
        if variant_matches(variant.parameters, filters):
            parameters = {
                key: value
                for key, value in variant.parameters.items()
                if key in filters
            }
            return ResolvedSelection(index=index, parameters=parameters)

    logger.debug("フィルタに一致するバリアントなし: filters=%s", dict(filters))
    return ResolvedSelection()
