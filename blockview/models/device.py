"""Block device models decoded from lsblk snapshots."""
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from blockview.core.units import format_iec, format_si

REMOVABLE_TRANSPORT = "usb"


@dataclass(frozen=True)
class Quantity:
    """A byte count as reported by lsblk.

    ``raw`` keeps the text exactly as it appeared in the snapshot. An absent
    field decodes to the zero quantity whose ``raw`` is empty, which is the
    only way to tell it apart from a field reported as ``0``.
    """
    value: int = 0
    raw: str = ""
    human: str = "0B"

    @classmethod
    def zero(cls) -> "Quantity":
        return cls()

    @classmethod
    def from_int(cls, value: int, raw: str) -> "Quantity":
        return cls(value=value, raw=raw, human=format_si(value))

    @property
    def is_present(self) -> bool:
        """True if the field was present in the snapshot."""
        return self.raw != ""

    @property
    def human_iec(self) -> str:
        """Size rendered with binary units."""
        return format_iec(self.value)


@dataclass(frozen=True)
class DeviceRecord:
    """One disk, partition or logical device in an lsblk tree."""

    # Identity
    name: str = ""
    kernel_name: str = ""
    parent_kernel_name: str = ""
    path: str = ""
    maj_min: str = ""
    device_type: str = ""  # disk, part, loop, crypt, lvm, raid1, ...

    # Filesystem
    fs_available: Quantity = field(default_factory=Quantity)
    fs_size: Quantity = field(default_factory=Quantity)
    fs_type: str = ""
    fs_used: str = ""
    fs_use_percent: str = ""
    fs_version: str = ""
    mountpoint: str = ""
    mountpoints: Tuple[str, ...] = ()
    label: str = ""
    uuid: str = ""

    # Partition table
    pt_uuid: str = ""
    pt_type: str = ""
    part_type: str = ""
    part_type_name: str = ""
    part_label: str = ""
    part_uuid: str = ""
    part_flags: str = ""

    # Queue and I/O limits (numeric text, empty when unreported)
    read_ahead: str = ""
    alignment: str = ""
    min_io: str = ""
    opt_io: str = ""
    physical_sector_size: str = ""
    logical_sector_size: str = ""
    request_queue_size: str = ""
    scheduler: str = ""
    discard_alignment: str = ""
    discard_granularity: str = ""
    discard_max: str = ""
    write_same_max: str = ""

    # Capability flags
    read_only: bool = False
    removable: bool = False
    hotplug: bool = False
    rotational: bool = False
    random: bool = False
    discard_zeroes: bool = False
    dax: bool = False

    # Hardware and transport
    model: str = ""
    serial: str = ""
    vendor: str = ""
    revision: str = ""
    wwn: str = ""
    hctl: str = ""
    transport: str = ""
    subsystems: str = ""
    zoned: str = ""

    # Node ownership
    owner: str = ""
    group: str = ""
    mode: str = ""

    state: str = ""
    size: Quantity = field(default_factory=Quantity)
    children: Tuple["DeviceRecord", ...] = ()

    def has_partitions(self) -> bool:
        return len(self.children) > 0

    def is_running(self) -> bool:
        return self.state == "running"

    def is_mounted(self) -> bool:
        return self.mountpoint != ""

    def is_removable_transport(self) -> bool:
        """True if the device hangs off a USB transport."""
        return self.transport == REMOVABLE_TRANSPORT


@dataclass(frozen=True)
class DeviceTree:
    """Top-level devices of one lsblk snapshot, in enumeration order."""
    devices: Tuple[DeviceRecord, ...] = ()

    def __iter__(self) -> Iterator[DeviceRecord]:
        return iter(self.devices)

    def __len__(self) -> int:
        return len(self.devices)

    def __getitem__(self, index: int) -> DeviceRecord:
        return self.devices[index]
