"""Data models for Blockview."""
from blockview.models.device import DeviceRecord, DeviceTree, Quantity

__all__ = [
    'DeviceRecord',
    'DeviceTree',
    'Quantity',
]
