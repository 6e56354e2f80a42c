"""开票日期与日期展示.

发票日期取 UTC 当天; 业务代码统一调用 `time_utils.today()`, 测试可整体替换.
"""

from datetime import UTC, date, datetime

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%b %d, %Y"


class TimeUtils:
    @staticmethod
    def now() -> datetime:
        return datetime.now(UTC)

    def today(self) -> date:
        """UTC 当天日期, 写入 invoices.date."""
        return self.now().date()

    @staticmethod
    def format_date(value: str | date | datetime | None, format_str: str = DISPLAY_DATE_FORMAT) -> str:
        """页面展示用; 接受 date 或 ``YYYY-MM-DD`` 文本, 解析失败时原样返回."""
        if value is None:
            return ""
        if isinstance(value, str):
            try:
                value = datetime.strptime(value, ISO_DATE_FORMAT).date()
            except ValueError:
                return value
        return value.strftime(format_str)


time_utils = TimeUtils()
