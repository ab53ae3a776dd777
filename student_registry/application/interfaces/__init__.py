from .key_value_storage import KeyValueStorage
from .record_presenter import RecordPresenter

__all__ = [
    "KeyValueStorage",
    "RecordPresenter",
]
