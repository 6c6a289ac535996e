"""設定モジュール: 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- リンク ---
PRODUCT_PATH_PREFIX: str = os.getenv("PRODUCT_PATH_PREFIX", "/product/")
REVIEWS_HASH: str = os.getenv("REVIEWS_HASH", "#reviews")

# --- 画像 ---
MEDIA_PATH_PREFIX: str = os.getenv("MEDIA_PATH_PREFIX", "/media/jpg/catalog/product")

# --- ログ ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOG_DIR", Path(__file__).resolve().parent.parent / "logs"))
