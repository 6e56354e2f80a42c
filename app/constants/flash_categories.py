"""flash() 使用的提示类别, 与模板里提示条的 CSS 类同名."""


class FlashCategory:
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
