"""Queries over a decoded DeviceTree.

The partition queries follow lsblk's disk -> partition convention and only
look at the direct children of each top-level device.
"""
from typing import Callable, Iterable, Iterator, List, Optional

from blockview.core.logger import get_logger
from blockview.models.device import DeviceRecord, DeviceTree

logger = get_logger(__name__)

DeviceFilter = Callable[[DeviceRecord], bool]


def descendant_partitions(
    tree: DeviceTree,
    device_filter: DeviceFilter,
    partition_filter: DeviceFilter,
) -> List[DeviceRecord]:
    """Collect direct children of matching devices, in snapshot order."""
    partitions = []
    for device in tree:
        if not device_filter(device):
            continue
        for child in device.children:
            if partition_filter(child):
                partitions.append(child)
    return partitions


def unmounted_removable_partitions(tree: DeviceTree) -> List[DeviceRecord]:
    """Partitions of USB devices that have no mountpoint."""
    return descendant_partitions(
        tree,
        DeviceRecord.is_removable_transport,
        lambda partition: not partition.is_mounted(),
    )


def mounted_removable_partitions(tree: DeviceTree) -> List[DeviceRecord]:
    """Partitions of USB devices that are mounted."""
    return descendant_partitions(
        tree,
        DeviceRecord.is_removable_transport,
        DeviceRecord.is_mounted,
    )


def largest(
    records: Iterable[DeviceRecord],
    key: Callable[[DeviceRecord], int],
) -> Optional[DeviceRecord]:
    """Return the record with the greatest key; the first one wins ties."""
    return max(records, key=key, default=None)


def largest_unmounted_removable_partition(tree: DeviceTree) -> Optional[DeviceRecord]:
    """The biggest unmounted USB partition by size, or None if there is none."""
    result = largest(unmounted_removable_partitions(tree), lambda p: p.size.value)
    if result is None:
        logger.debug("No unmounted removable partitions in snapshot")
    return result


def largest_mounted_removable_partition(tree: DeviceTree) -> Optional[DeviceRecord]:
    """The mounted USB partition with the most available space, or None."""
    result = largest(mounted_removable_partitions(tree), lambda p: p.fs_available.value)
    if result is None:
        logger.debug("No mounted removable partitions in snapshot")
    return result


def walk(tree: DeviceTree) -> Iterator[DeviceRecord]:
    """Yield every record at every depth, depth-first, parents first."""
    stack = list(reversed(tree.devices))
    while stack:
        record = stack.pop()
        yield record
        stack.extend(reversed(record.children))


def find_device(tree: DeviceTree, path_or_name: str) -> Optional[DeviceRecord]:
    """Find the first record whose path or name matches."""
    for record in walk(tree):
        if path_or_name in (record.path, record.name):
            return record
    return None
