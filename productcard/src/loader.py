"""商品データ読み込みモジュール.

JSON 形式の商品レコードを pydantic の入力スキーマで検証し、
models のデータクラスへ変換する。呼び出し元の dict は変更せず、
保持する mapping はすべてコピーする。
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError, ValidationInfo, field_validator

from src.models import CONFIGURABLE_TYPE, SIMPLE_TYPE, Product, ReviewSummary, Thumbnail, Variant

logger = logging.getLogger(__name__)


class ProductSchemaError(ValueError):
    """商品レコードが入力スキーマに合わない場合に送出される.

    path は最初のエラー位置 (例: product.variants[1].parameters)。
    """

    def __init__(self, path: str, message: str, errors: list[dict] | None = None):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, exc: ValidationError, prefix: str) -> ProductSchemaError:
        errors = exc.errors()
        first = errors[0]
        return cls(_format_loc(prefix, first["loc"]), first["msg"], errors)


def _format_loc(prefix: str, loc: tuple) -> str:
    parts = [prefix]
    for part in loc:
        parts.append(f"[{part}]" if isinstance(part, int) else f".{part}")
    return "".join(parts)


# --- 入力スキーマ ---


class ThumbnailRecord(BaseModel):
    path: StrictStr


class ReviewSummaryRecord(BaseModel):
    review_count: StrictInt = Field(default=0, ge=0)
    rating_summary: float | None = None

    @field_validator("review_count", mode="before")
    @classmethod
    def _null_count(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("rating_summary", mode="before")
    @classmethod
    def _check_rating(cls, value: Any) -> Any:
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise ValueError("number expected")
        return value


class ProductRecord(BaseModel):
    """商品レコード. バリアント内の商品も同じスキーマ."""

    type_id: StrictStr = SIMPLE_TYPE
    url_key: StrictStr | None = None
    thumbnail: ThumbnailRecord | None = None
    price: Any = None
    variants: list[VariantRecord] | None = None
    id: Any = None
    sku: StrictStr | None = None
    name: StrictStr | None = None
    brand: StrictStr | None = None
    review_summary: ReviewSummaryRecord | None = None

    @field_validator("type_id", mode="before")
    @classmethod
    def _default_type(cls, value: Any) -> Any:
        return SIMPLE_TYPE if value is None else value

    @field_validator("variants", mode="before")
    @classmethod
    def _check_variants_array(cls, value: Any) -> Any:
        # tuple や set を配列として受け入れない
        if value is not None and not isinstance(value, list):
            raise ValueError("array expected")
        return value

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: Any) -> Any:
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, str))):
            raise ValueError("int or string expected")
        return value

    @field_validator("variants")
    @classmethod
    def _check_variants(cls, value: list | None, info: ValidationInfo) -> list | None:
        if value is not None and not value and info.data.get("type_id") == CONFIGURABLE_TYPE:
            raise ValueError("configurable product has no variants")
        return value


class VariantRecord(BaseModel):
    product: ProductRecord
    parameters: dict[StrictStr, StrictStr]


ProductRecord.model_rebuild()


# --- 変換 ---


def products_from_json(text: str) -> list[Product]:
    """JSON 文字列から商品リストを読み込む.

    単一の商品オブジェクトでも配列でも受け付ける。

    Raises:
        json.JSONDecodeError: JSON として不正な場合
        ProductSchemaError: スキーマ違反の場合
    """
    data = json.loads(text)
    if isinstance(data, list):
        return [product_from_dict(item, f"[{i}]") for i, item in enumerate(data)]
    return [product_from_dict(data)]


def product_from_dict(data: Any, path: str = "product") -> Product:
    """商品レコード (dict) を検証して Product に変換する."""
    try:
        record = ProductRecord.model_validate(data)
    except ValidationError as e:
        raise ProductSchemaError.from_validation_error(e, path) from e
    return _to_product(record, path)


def variant_from_dict(data: Any, path: str = "variant") -> Variant:
    """バリアントレコード {product, parameters} を検証して Variant に変換する."""
    try:
        record = VariantRecord.model_validate(data)
    except ValidationError as e:
        raise ProductSchemaError.from_validation_error(e, path) from e
    return _to_variant(record, path)


def _to_product(record: ProductRecord, path: str) -> Product:
    variants = None
    if record.variants is not None:
        variants = tuple(
            _to_variant(v, f"{path}.variants[{i}]") for i, v in enumerate(record.variants)
        )

    summary = None
    if record.review_summary is not None:
        summary = ReviewSummary(
            review_count=record.review_summary.review_count,
            rating_summary=record.review_summary.rating_summary,
        )

    return Product(
        type_id=record.type_id,
        url_key=record.url_key,
        thumbnail=_to_thumbnail(record.thumbnail, f"{path}.thumbnail"),
        price=record.price,
        variants=variants,
        id=record.id,
        sku=record.sku,
        name=record.name,
        brand=record.brand,
        review_summary=summary,
    )


def _to_variant(record: VariantRecord, path: str) -> Variant:
    return Variant(
        product=_to_product(record.product, f"{path}.product"),
        parameters=dict(record.parameters),
    )


def _to_thumbnail(record: ThumbnailRecord | None, path: str) -> Thumbnail | None:
    if record is None:
        return None
    if not record.path:
        # path が空のサムネイルは未設定として扱う
        logger.debug("空のサムネイルを無視: %s", path)
        return None
    return Thumbnail(path=record.path)
