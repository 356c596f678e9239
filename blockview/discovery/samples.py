"""Sample lsblk snapshot used in mock mode and by tests."""
from blockview.discovery.decoder import decode_device_tree
from blockview.models.device import DeviceTree

# Trimmed `lsblk -pabOJ` output. Mixes the newer typed encoding (JSON
# booleans and integers) with the older one ("0"/"1" flags, string sizes).
SAMPLE_LSBLK_JSON = """\
{
   "blockdevices": [
      {
         "name": "/dev/nvme0n1", "kname": "/dev/nvme0n1", "pkname": null,
         "path": "/dev/nvme0n1", "maj:min": "259:0", "type": "disk",
         "fsavail": null, "fssize": null, "fstype": null, "fsused": null,
         "fsuse%": null, "fsver": null, "mountpoint": null, "mountpoints": [null],
         "label": null, "uuid": null, "ptuuid": "6f1c2a51-3c0e-4b8e-9a44-0f2c1d7e9b10",
         "pttype": "gpt", "ra": 128, "ro": false, "rm": false, "hotplug": false,
         "model": "Samsung SSD 980 PRO 1TB", "serial": "S5GXNF0R123456",
         "size": 1000204886016, "state": "live", "owner": "root", "group": "disk",
         "mode": "brw-rw----", "alignment": 0, "min-io": 512, "opt-io": 0,
         "phy-sec": 512, "log-sec": 512, "rota": false, "sched": "none",
         "rq-size": 1023, "disc-aln": 0, "disc-gran": 512, "disc-max": 2199023255040,
         "disc-zero": false, "wsame": 0, "wwn": "eui.002538b911b2c3d4", "rand": true,
         "hctl": null, "tran": "nvme", "subsystems": "block:nvme:pci", "rev": "5B2QGXA7",
         "vendor": null, "zoned": "none", "dax": false,
         "children": [
            {
               "name": "/dev/nvme0n1p1", "kname": "/dev/nvme0n1p1", "pkname": "/dev/nvme0n1",
               "path": "/dev/nvme0n1p1", "maj:min": "259:1", "type": "part",
               "fsavail": 530202624, "fssize": 535805952, "fstype": "vfat",
               "fsused": "5603328", "fsuse%": "1%", "fsver": "FAT32",
               "mountpoint": "/boot/efi", "mountpoints": ["/boot/efi"],
               "label": null, "uuid": "3A1B-0C2D", "parttype": "c12a7328-f81f-11d2-ba4b-00a0c93ec93b",
               "parttypename": "EFI System", "partlabel": "EFI", "partuuid": "0b7a0e2f-01",
               "partflags": null, "ro": false, "rm": false, "hotplug": false,
               "size": 536870912, "rota": false, "rand": true, "tran": null
            },
            {
               "name": "/dev/nvme0n1p2", "kname": "/dev/nvme0n1p2", "pkname": "/dev/nvme0n1",
               "path": "/dev/nvme0n1p2", "maj:min": "259:2", "type": "part",
               "fsavail": 701292150784, "fssize": 982900588544, "fstype": "ext4",
               "fsused": "231393513472", "fsuse%": "24%", "fsver": "1.0",
               "mountpoint": "/", "mountpoints": ["/"], "label": "root",
               "uuid": "c5d1a8f2-7f4e-4a2b-8d33-51b0f6c1e9aa",
               "parttypename": "Linux filesystem", "ro": false, "rm": false,
               "hotplug": false, "size": 999666999296, "rota": false, "rand": true,
               "tran": null
            }
         ]
      },
      {
         "name": "/dev/sda", "kname": "/dev/sda", "path": "/dev/sda", "maj:min": "8:0",
         "type": "disk", "pttype": "dos", "ra": "128", "ro": "0", "rm": "1",
         "hotplug": "1", "rota": "0", "rand": "1", "model": "Ultra Fit",
         "serial": "4C530001230815117432", "size": "61530439680", "state": "running",
         "phy-sec": "512", "log-sec": "512", "sched": "mq-deadline",
         "hctl": "0:0:0:0", "tran": "usb", "subsystems": "block:scsi:usb:pci",
         "rev": "1.00", "vendor": "SanDisk ", "disc-zero": "0", "dax": "0",
         "children": [
            {
               "name": "/dev/sda1", "kname": "/dev/sda1", "pkname": "/dev/sda",
               "path": "/dev/sda1", "maj:min": "8:1", "type": "part",
               "fsavail": "30719250432", "fssize": "30752636928", "fstype": "exfat",
               "fsused": "33386496", "fsuse%": "0%", "fsver": "1.0",
               "mountpoint": "/media/backup", "label": "BACKUP", "uuid": "64F2-8E5C",
               "ro": "0", "rm": "1", "hotplug": "1", "rota": "0", "rand": "1",
               "size": "30765219840", "tran": null
            },
            {
               "name": "/dev/sda2", "kname": "/dev/sda2", "pkname": "/dev/sda",
               "path": "/dev/sda2", "maj:min": "8:2", "type": "part",
               "fsavail": "", "fssize": "", "fstype": "ext4", "mountpoint": null,
               "label": "scratch", "uuid": "7e0c9a44-1d2b-4f5e-8a61-3b9c0d2e4f71",
               "ro": "0", "rm": "1", "hotplug": "1", "rota": "0", "rand": "1",
               "size": "30764171264", "tran": null
            }
         ]
      },
      {
         "name": "/dev/sdb", "kname": "/dev/sdb", "path": "/dev/sdb", "maj:min": "8:16",
         "type": "disk", "fstype": "linux_raid_member", "fsver": "1.2",
         "label": "nas:0", "uuid": "1f2e3d4c-5b6a-7980-a1b2-c3d4e5f60718",
         "ro": false, "rm": false, "hotplug": false, "rota": true, "rand": true,
         "model": "WDC WD40EFRX-68N32N0", "serial": "WD-WCC7K0ABCDEF",
         "size": 4000787030016, "state": "running", "hctl": "1:0:0:0", "tran": "sata",
         "subsystems": "block:scsi:pci", "vendor": "ATA     ",
         "children": [
            {
               "name": "/dev/md0", "kname": "/dev/md0", "pkname": "/dev/sdb",
               "path": "/dev/md0", "maj:min": "9:0", "type": "raid1",
               "pttype": "gpt", "ro": false, "rm": false, "hotplug": false,
               "rota": true, "rand": false, "size": 4000652787712, "tran": null,
               "children": [
                  {
                     "name": "/dev/md0p1", "kname": "/dev/md0p1", "pkname": "/dev/md0",
                     "path": "/dev/md0p1", "maj:min": "259:3", "type": "part",
                     "fsavail": 2900000000000, "fssize": 3936818319360, "fstype": "xfs",
                     "mountpoint": "/srv/nas", "mountpoints": ["/srv/nas"],
                     "ro": false, "rm": false, "hotplug": false, "rota": true,
                     "rand": false, "size": 4000651739136, "tran": null
                  }
               ]
            }
         ]
      },
      {
         "name": "/dev/sdc", "kname": "/dev/sdc", "path": "/dev/sdc", "maj:min": "8:32",
         "type": "disk", "ro": "0", "rm": "1", "hotplug": "1", "rota": "0",
         "rand": "1", "model": "Flash Disk", "size": "0", "state": "running",
         "tran": "usb", "subsystems": "block:scsi:usb:pci", "vendor": "Generic "
      }
   ]
}
"""


def sample_tree() -> DeviceTree:
    """Decode the sample snapshot."""
    return decode_device_tree(SAMPLE_LSBLK_JSON)
