"""商品タイル プレビュー: メインエントリーポイント.

処理フロー:
  1. JSON ファイルから商品（単体 or 配列）を読み込む
  2. key=value 引数をフィルタとしてまとめる
  3. 各商品のタイル表示用データを生成・ログ出力

使い方:
  python -m src.main products.json color=red size=M
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import datetime
from pathlib import Path

from src.card import build_card
from src.config import LOG_DIR, LOG_LEVEL
from src.loader import ProductSchemaError, products_from_json
from src.models import CardFacts

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """ロギングの初期設定."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / f"productcard_{datetime.now().strftime('%Y%m%d')}.log"
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def parse_filters(args: list[str]) -> dict[str, str]:
    """key=value 形式の引数をフィルタにする. 不正な引数はスキップ."""
    filters: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            logger.warning("不正なフィルタ引数をスキップ: %s", arg)
            continue
        filters[key] = value
    return filters


def run(argv: list[str] | None = None) -> list[CardFacts]:
    """メイン処理."""
    setup_logging()
    args = sys.argv[1:] if argv is None else argv
    if not args:
        logger.error("商品 JSON ファイルを指定してください")
        return []

    start_time = time.time()
    path = Path(args[0])
    filters = parse_filters(args[1:])
    logger.info("=== タイル生成 開始: file=%s, filters=%s ===", path, filters)

    # 1. 商品読み込み
    try:
        products = products_from_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("ファイル読み込み失敗: file=%s, error=%s", path, e)
        return []
    except (UnicodeDecodeError, json.JSONDecodeError, ProductSchemaError) as e:
        logger.error("商品データが不正です: file=%s, error=%s", path, e)
        return []

    # 2. タイル生成
    cards: list[CardFacts] = []
    for product in products:
        card = build_card(product, filters)
        cards.append(card)
        logger.info(
            "  %s → index=%d, price=%s, action=%s",
            product.url_key or "(読み込み中)", card.selection.index, card.price, card.action,
        )
        logger.debug("  %s", json.dumps(card.to_dict(), ensure_ascii=False, default=str))

    # サマリ
    elapsed = time.time() - start_time
    loading = sum(1 for c in cards if c.is_loading)
    logger.info("=== タイル生成 完了 ===")
    logger.info("商品: %d 件, 読み込み中: %d 件, 所要時間: %.3f 秒",
                len(cards), loading, elapsed)
    return cards


if __name__ == "__main__":
    run()
