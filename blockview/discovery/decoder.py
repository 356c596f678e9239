"""Decode ``lsblk -pabOJ`` output into a DeviceTree."""
import json
from typing import Any, Dict, List, Union

from blockview.core.errors import MalformedDocument
from blockview.core.scalars import (
    decode_number_text,
    decode_quantity,
    decode_text,
    decode_text_list,
    decode_tribool,
)
from blockview.models.device import DeviceRecord, DeviceTree

ROOT_KEY = "blockdevices"


def decode_device_tree(data: Union[bytes, str]) -> DeviceTree:
    """Parse one lsblk JSON snapshot.

    Args:
        data: Raw output of ``lsblk -J`` (bytes or already decoded text)

    Returns:
        DeviceTree with the top-level devices in enumeration order

    Raises:
        MalformedDocument: Not JSON, or not shaped like lsblk output
        MalformedScalar: A field could not be decoded; no partial tree is returned
    """
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedDocument(f"Snapshot is not valid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedDocument("Snapshot is nested too deeply to parse") from e

    if not isinstance(document, dict):
        raise MalformedDocument(
            f"Snapshot root must be an object, got {type(document).__name__}"
        )
    if ROOT_KEY not in document:
        raise MalformedDocument(f"Snapshot has no '{ROOT_KEY}' key")

    devices = document[ROOT_KEY]
    if not isinstance(devices, list):
        raise MalformedDocument(
            f"'{ROOT_KEY}' must be a list, got {type(devices).__name__}"
        )

    try:
        return DeviceTree(devices=tuple(
            decode_device_record(entry, where=f"{ROOT_KEY}[{index}]")
            for index, entry in enumerate(devices)
        ))
    except RecursionError as e:
        raise MalformedDocument("Device tree is nested too deeply to decode") from e


def decode_device_record(entry: Dict[str, Any], where: str = "record") -> DeviceRecord:
    """Decode one lsblk device object, recursing into its children."""
    if not isinstance(entry, dict):
        raise MalformedDocument(
            f"{where} must be an object, got {type(entry).__name__}"
        )

    return DeviceRecord(
        name=decode_text(entry.get("name"), "name"),
        kernel_name=decode_text(entry.get("kname"), "kname"),
        parent_kernel_name=decode_text(entry.get("pkname"), "pkname"),
        path=decode_text(entry.get("path"), "path"),
        maj_min=decode_text(entry.get("maj:min"), "maj:min"),
        device_type=decode_text(entry.get("type"), "type"),
        fs_available=decode_quantity(entry.get("fsavail"), "fsavail"),
        fs_size=decode_quantity(entry.get("fssize"), "fssize"),
        fs_type=decode_text(entry.get("fstype"), "fstype"),
        fs_used=decode_text(entry.get("fsused"), "fsused"),
        fs_use_percent=decode_text(entry.get("fsuse%"), "fsuse%"),
        fs_version=decode_text(entry.get("fsver"), "fsver"),
        mountpoint=decode_text(entry.get("mountpoint"), "mountpoint"),
        mountpoints=decode_text_list(entry.get("mountpoints"), "mountpoints"),
        label=decode_text(entry.get("label"), "label"),
        uuid=decode_text(entry.get("uuid"), "uuid"),
        pt_uuid=decode_text(entry.get("ptuuid"), "ptuuid"),
        pt_type=decode_text(entry.get("pttype"), "pttype"),
        part_type=decode_text(entry.get("parttype"), "parttype"),
        part_type_name=decode_text(entry.get("parttypename"), "parttypename"),
        part_label=decode_text(entry.get("partlabel"), "partlabel"),
        part_uuid=decode_text(entry.get("partuuid"), "partuuid"),
        part_flags=decode_text(entry.get("partflags"), "partflags"),
        read_ahead=decode_number_text(entry.get("ra"), "ra"),
        alignment=decode_number_text(entry.get("alignment"), "alignment"),
        min_io=decode_number_text(entry.get("min-io"), "min-io"),
        opt_io=decode_number_text(entry.get("opt-io"), "opt-io"),
        physical_sector_size=decode_number_text(entry.get("phy-sec"), "phy-sec"),
        logical_sector_size=decode_number_text(entry.get("log-sec"), "log-sec"),
        request_queue_size=decode_number_text(entry.get("rq-size"), "rq-size"),
        scheduler=decode_text(entry.get("sched"), "sched"),
        discard_alignment=decode_number_text(entry.get("disc-aln"), "disc-aln"),
        discard_granularity=decode_number_text(entry.get("disc-gran"), "disc-gran"),
        discard_max=decode_number_text(entry.get("disc-max"), "disc-max"),
        write_same_max=decode_number_text(entry.get("wsame"), "wsame"),
        read_only=decode_tribool(entry.get("ro"), "ro"),
        removable=decode_tribool(entry.get("rm"), "rm"),
        hotplug=decode_tribool(entry.get("hotplug"), "hotplug"),
        rotational=decode_tribool(entry.get("rota"), "rota"),
        random=decode_tribool(entry.get("rand"), "rand"),
        discard_zeroes=decode_tribool(entry.get("disc-zero"), "disc-zero"),
        dax=decode_tribool(entry.get("dax"), "dax"),
        model=decode_text(entry.get("model"), "model"),
        serial=decode_text(entry.get("serial"), "serial"),
        vendor=decode_text(entry.get("vendor"), "vendor"),
        revision=decode_text(entry.get("rev"), "rev"),
        wwn=decode_text(entry.get("wwn"), "wwn"),
        hctl=decode_text(entry.get("hctl"), "hctl"),
        transport=decode_text(entry.get("tran"), "tran"),
        subsystems=decode_text(entry.get("subsystems"), "subsystems"),
        zoned=decode_text(entry.get("zoned"), "zoned"),
        owner=decode_text(entry.get("owner"), "owner"),
        group=decode_text(entry.get("group"), "group"),
        mode=decode_text(entry.get("mode"), "mode"),
        state=decode_text(entry.get("state"), "state"),
        size=decode_quantity(entry.get("size"), "size"),
        children=_decode_children(entry.get("children"), where),
    )


def _decode_children(raw: Any, where: str) -> tuple:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise MalformedDocument(
            f"{where}.children must be a list, got {type(raw).__name__}"
        )

    children: List[DeviceRecord] = []
    for index, child in enumerate(raw):
        children.append(decode_device_record(child, where=f"{where}.children[{index}]"))
    return tuple(children)
