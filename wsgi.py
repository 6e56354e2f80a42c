"""WSGI 入口, 例如 `gunicorn wsgi:application`; 缺省按 production 环境加载配置."""

from __future__ import annotations

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
os.environ.setdefault("FLASK_ENV", "production")

from app import create_app  # noqa: E402

application = app = create_app()

if __name__ == "__main__":
    application.run(
        host=os.environ.get("FLASK_HOST", "127.0.0.1"),
        port=int(os.environ.get("FLASK_PORT", "5001")),
        debug=False,
    )
