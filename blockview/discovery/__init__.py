"""Snapshot decoding and device queries."""
from blockview.discovery.decoder import decode_device_record, decode_device_tree
from blockview.discovery.queries import (
    descendant_partitions,
    find_device,
    largest,
    largest_mounted_removable_partition,
    largest_unmounted_removable_partition,
    mounted_removable_partitions,
    unmounted_removable_partitions,
    walk,
)

__all__ = [
    'decode_device_record',
    'decode_device_tree',
    'descendant_partitions',
    'find_device',
    'largest',
    'largest_mounted_removable_partition',
    'largest_unmounted_removable_partition',
    'mounted_removable_partitions',
    'unmounted_removable_partitions',
    'walk',
]
