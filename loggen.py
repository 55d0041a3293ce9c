import datetime
import random
from pathlib import Path

DEVICES = ["ALC-01", "ALC-02", "VMS-North", "CCTV-07", "TSMC-Core", "Queue-Mgr"]
SOURCE_FILES = ["alc_main.c", "vms_drv.c", "queue.c", "netlink.c"]
MESSAGES = {
    "I": ["Startup OK", "Heartbeat received", "Plan 3 activated", "Config reloaded"],
    "W": ["Detector loop 4 degraded", "Comms latency high", "Door open"],
    "E": ["Network timeout", "Lamp failure phase 2", "Controller restart requested"],
}
MCAFEE_LEVELS = ["Info", "Warning", "Error"]
MCAFEE_MESSAGES = ["Scan completed", "Signature update deferred", "Threat blocked on port 445"]
VEHICLE_CLASSES = ["Car", "Van", "Truck", "Bus", "Motorcycle"]
TARIFFS = {"Car": 2.50, "Van": 3.75, "Truck": 7.20, "Bus": 6.00, "Motorcycle": 1.25}

START = datetime.datetime(2024, 1, 15, 6, 0, 0)


def _timeline(rng, count):
    current = START
    for _ in range(count):
        current += datetime.timedelta(seconds=rng.randint(2, 600), milliseconds=rng.randint(0, 999))
        yield current


def generate_tsmc(count=100, seed=0):
    rng = random.Random(seed)
    records = []
    for i, ts in enumerate(_timeline(rng, count)):
        code = rng.choice("IIIWE")
        records.append(
            f"{ts:%Y%m%d}/{ts:%H%M%S}{ts.microsecond // 1000:03d}/{i}/0"
            f"/{rng.choice(DEVICES)}/{rng.choice(SOURCE_FILES)}/1/0/{code}"
            f"/{rng.choice(MESSAGES[code])}/{rng.randint(100, 999)}:)"
        )
    return "\n".join(records) + "\n"


def generate_alc(count=100, seed=0):
    rng = random.Random(seed)
    records = []
    for i, ts in enumerate(_timeline(rng, count)):
        code = rng.choice("IIWE")
        fields = [
            f"{ts:%Y-%m-%d %H:%M:%S}",
            code,
            str(i),
            rng.choice(DEVICES),
            rng.choice(SOURCE_FILES),
            "0",
            "0",
            rng.choice(MESSAGES[code]),
        ]
        records.append("~|[" + "\t".join(fields) + "]|~")
    return "\n".join(records) + "\n"


def generate_mcafee(count=100, seed=0):
    rng = random.Random(seed)
    lines = []
    for ts in _timeline(rng, count):
        lines.append(
            f"{ts:%Y-%m-%d %H:%M:%S}.{ts.microsecond // 1000:03d} ePO-Server"
            f" ({rng.randint(1000, 9999)}.{rng.randint(1, 99)})"
            f" {rng.choice(MCAFEE_LEVELS)}: {rng.choice(MCAFEE_MESSAGES)}"
        )
    return "\n".join(lines) + "\n"


def generate_passage(count=100, seed=0):
    rng = random.Random(seed)
    lines = ["timestamp,lane,vehicle_class,revenue"]
    for ts in _timeline(rng, count):
        vehicle_class = rng.choice(VEHICLE_CLASSES)
        lines.append(
            f"{ts:%Y-%m-%dT%H:%M:%S},{rng.randint(1, 6)},{vehicle_class},{TARIFFS[vehicle_class]:.2f}"
        )
    return "\n".join(lines) + "\n"


def generate_ivdc(count=100, seed=0):
    rng = random.Random(seed)
    lines = ["timestamp,lane,occupancy,speed,vehicle_count"]
    for ts in _timeline(rng, count):
        lines.append(
            f"{ts:%Y-%m-%dT%H:%M:%S},{rng.randint(1, 4)},"
            f"{rng.uniform(0, 100):.1f},{rng.uniform(10, 110):.1f},{rng.randint(0, 40)}"
        )
    return "\n".join(lines) + "\n"


GENERATORS = {
    "TSMC": generate_tsmc,
    "ALC": generate_alc,
    "McAfee": generate_mcafee,
    "Passage": generate_passage,
    "IVDC": generate_ivdc,
}

EXTENSIONS = {"TSMC": "log", "ALC": "log", "McAfee": "log", "Passage": "csv", "IVDC": "csv"}


def write_samples(directory="samples", count=500):
    out = Path(directory)
    out.mkdir(parents=True, exist_ok=True)
    for fmt, generate in GENERATORS.items():
        path = out / f"{fmt.lower()}_sample.{EXTENSIONS[fmt]}"
        path.write_text(generate(count), encoding="utf-8")
        print(f"Generated {count} {fmt} records in {path}")


if __name__ == "__main__":
    write_samples()
