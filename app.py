"""本地开发服务器: `python app.py`.

FLASK_HOST / FLASK_PORT / FLASK_DEBUG 控制监听地址与调试模式.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
os.environ.setdefault("FLASK_ENV", "development")

from app import create_app  # noqa: E402
from app.utils.structlog_config import get_system_logger  # noqa: E402


def main() -> None:
    host = os.environ.get("FLASK_HOST") or "127.0.0.1"
    port = int(os.environ.get("FLASK_PORT") or "5001")
    debug = (os.environ.get("FLASK_DEBUG") or "true").lower() == "true"

    app = create_app()
    base_url = f"http://{host}:{port}"
    get_system_logger().info(
        "发票看板开发服务器启动",
        invoices=f"{base_url}/dashboard/invoices",
        signup=f"{base_url}/signup",
        migrate_command="flask --app app db upgrade",
        debug=debug,
    )
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
