"""Shared test fixtures for Blockview tests."""
import json

import pytest

from blockview.core.config import reset_config
from blockview.discovery.samples import SAMPLE_LSBLK_JSON, sample_tree


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Keep env-driven config and mock mode from leaking between tests."""
    for var in (
        "BLOCKVIEW_UNITS",
        "BLOCKVIEW_LOG_FILE",
        "BLOCKVIEW_VERBOSE",
        "BLOCKVIEW_CONFIG",
        "BLOCKVIEW_MOCK",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_json():
    """Raw bytes of the bundled lsblk sample."""
    return SAMPLE_LSBLK_JSON.encode()


@pytest.fixture
def devices():
    """Decoded sample snapshot."""
    return sample_tree()


def make_snapshot(*devices) -> bytes:
    """Wrap device dicts in an lsblk document."""
    return json.dumps({"blockdevices": list(devices)}).encode()


def usb_disk(name, *children, tran="usb"):
    """Minimal lsblk disk entry."""
    entry = {"name": name, "path": name, "type": "disk", "tran": tran, "size": "64000000000"}
    if children:
        entry["children"] = list(children)
    return entry


def partition(name, size="1000", mountpoint=None, fsavail=None):
    """Minimal lsblk partition entry."""
    return {
        "name": name,
        "path": name,
        "type": "part",
        "size": size,
        "mountpoint": mountpoint,
        "fsavail": fsavail,
    }
