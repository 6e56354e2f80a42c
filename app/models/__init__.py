"""ORM 模型: Customer / Invoice / User.

按名称延迟导入, `from app.models import Invoice` 不会在应用工厂之前触发模型加载.
"""

from importlib import import_module

_MODEL_MODULES = {
    "Customer": "app.models.customer",
    "Invoice": "app.models.invoice",
    "User": "app.models.user",
}

__all__ = sorted(_MODEL_MODULES)


def __getattr__(name: str) -> type:
    module_path = _MODEL_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'app.models' has no attribute {name}")
    model = getattr(import_module(module_path), name)
    globals()[name] = model
    return model
