"""Tests for DeviceRecord predicates and DeviceTree."""
import dataclasses

import pytest

from blockview.models.device import DeviceRecord, DeviceTree, Quantity


class TestDeviceRecordPredicates:
    """Classification helpers look only at the record's own fields."""

    def test_has_partitions(self):
        assert DeviceRecord(name="sda").has_partitions() is False
        assert DeviceRecord(name="sda", children=(DeviceRecord(name="sda1"),)).has_partitions() is True

    def test_is_running(self):
        assert DeviceRecord(state="running").is_running() is True
        assert DeviceRecord(state="live").is_running() is False
        assert DeviceRecord().is_running() is False

    def test_is_mounted(self):
        assert DeviceRecord(mountpoint="/mnt").is_mounted() is True
        assert DeviceRecord(mountpoint="").is_mounted() is False

    def test_is_removable_transport_exact_match(self):
        assert DeviceRecord(transport="usb").is_removable_transport() is True
        assert DeviceRecord(transport="USB").is_removable_transport() is False
        assert DeviceRecord(transport="sata").is_removable_transport() is False
        assert DeviceRecord(transport="").is_removable_transport() is False

    def test_removable_flag_does_not_imply_transport(self):
        record = DeviceRecord(removable=True, hotplug=True, transport="mmc")
        assert record.is_removable_transport() is False

    def test_predicates_ignore_children(self):
        child = DeviceRecord(mountpoint="/mnt", state="running", transport="usb")
        parent = DeviceRecord(children=(child,))

        assert parent.is_mounted() is False
        assert parent.is_running() is False
        assert parent.is_removable_transport() is False


class TestImmutability:
    """Decoded records cannot be changed after the fact."""

    def test_record_is_frozen(self):
        record = DeviceRecord(name="sda")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "sdb"

    def test_quantity_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Quantity.zero().value = 1

    def test_defaults_are_zero_quantities(self):
        record = DeviceRecord()
        assert record.size == Quantity.zero()
        assert record.fs_size == Quantity.zero()
        assert record.fs_available == Quantity.zero()
        assert record.children == ()


class TestDeviceTree:
    """Sequence behaviour of the root container."""

    def test_sequence_protocol(self):
        first, second = DeviceRecord(name="a"), DeviceRecord(name="b")
        tree = DeviceTree(devices=(first, second))

        assert len(tree) == 2
        assert list(tree) == [first, second]
        assert tree[1] is second

    def test_empty_tree_is_falsy(self):
        assert not DeviceTree()
