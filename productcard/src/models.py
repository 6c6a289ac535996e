"""データモデル定義."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- 商品タイプ ---
CONFIGURABLE_TYPE = "configurable"
GROUPED_TYPE = "grouped"
SIMPLE_TYPE = "simple"


@dataclass(frozen=True)
class Thumbnail:
    """商品サムネイル."""

    path: str  # 例: /c/a/cap.jpg


@dataclass(frozen=True)
class ReviewSummary:
    """レビュー集計."""

    review_count: int = 0
    rating_summary: float | None = None  # 0〜100


@dataclass(frozen=True)
class Product:
    """商品. バリアント内の商品も同じ形を取る."""

    type_id: str = SIMPLE_TYPE  # simple / configurable / grouped / ...
    url_key: str | None = None  # None = 読み込み中 or リンク不可
    thumbnail: Thumbnail | None = None
    price: Any = field(default=None, hash=False)  # 金額はそのまま受け渡す。None = 読み込み中
    variants: tuple[Variant, ...] | None = None
    id: int | str | None = None
    sku: str | None = None
    name: str | None = None
    brand: str | None = None
    review_summary: ReviewSummary | None = None

    @property
    def is_configurable(self) -> bool:
        return self.type_id == CONFIGURABLE_TYPE


@dataclass(frozen=True)
class Variant:
    """configurable 商品の購入可能な組み合わせ 1 件."""

    product: Product
    parameters: dict[str, str] = field(default_factory=dict, hash=False)  # 属性コード -> 値


@dataclass(frozen=True)
class ResolvedSelection:
    """バリアント解決結果."""

    index: int = 0
    parameters: dict[str, str] = field(default_factory=dict, hash=False)  # フィルタと重なる属性のみ


@dataclass(frozen=True)
class PresentationFacts:
    """解決済みバリアントから導出した表示用の値."""

    thumbnail: str | None
    price: Any = field(hash=False)
    effective: Product


@dataclass(frozen=True)
class NavigationTarget:
    """ルーティング層に渡すリンク先."""

    pathname: str
    state: dict[str, Any] = field(hash=False)
    search: str
    hash: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = {
            "pathname": self.pathname,
            "state": self.state,
            "search": self.search,
        }
        if self.hash:
            data["hash"] = self.hash
        return data


@dataclass(frozen=True)
class CardFacts:
    """商品タイル 1 枚分の表示用データ."""

    product: Product
    selection: ResolvedSelection
    effective: Product
    thumbnail: str | None
    image_src: str | None
    price: Any = field(hash=False)
    link: NavigationTarget | None
    is_loading: bool
    action: str | None  # None = 価格未取得のためプレースホルダ表示
    review_link: NavigationTarget | None = None
    review_text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """ログ出力・シリアライズ用. state 内の商品は url_key のみに縮める."""
        return {
            "url_key": self.product.url_key,
            "type_id": self.product.type_id,
            "index": self.selection.index,
            "parameters": dict(self.selection.parameters),
            "thumbnail": self.thumbnail,
            "image_src": self.image_src,
            "price": self.price,
            "link": _link_summary(self.link),
            "is_loading": self.is_loading,
            "action": self.action,
            "review_link": _link_summary(self.review_link),
            "review_text": self.review_text,
        }


def _link_summary(target: NavigationTarget | None) -> dict[str, str] | None:
    if target is None:
        return None
    summary = {"pathname": target.pathname, "search": target.search}
    if target.hash:
        summary["hash"] = target.hash
    return summary
