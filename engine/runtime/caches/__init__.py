from .model_cache import CoalescingTable, ModelCache

__all__ = [
    "CoalescingTable",
    "ModelCache",
]
