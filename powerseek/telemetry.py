"""Battery telemetry module"""
import enum
import logging
import os
from dataclasses import dataclass

import psutil

from .config import POWER_SUPPLY_PATH

logger = logging.getLogger(__name__)


class HardwareQueryError(Exception):
    """Battery enumeration could not be started."""


class BatteryState(enum.Enum):
    CHARGING = "charging"
    DISCHARGING = "discharging"
    FULL = "full"
    EMPTY = "empty"
    UNKNOWN = "unknown"


_STATE_MAP = {
    "charging": BatteryState.CHARGING,
    "discharging": BatteryState.DISCHARGING,
    "full": BatteryState.FULL,
    "empty": BatteryState.EMPTY,
    "unknown": BatteryState.UNKNOWN,
}


@dataclass(frozen=True)
class BatteryRecord:
    """One battery at one refresh instant."""
    name: str
    voltage: float      # V
    current: float      # A
    power: float        # W
    state: BatteryState
    percentage: float   # 0-100, <= 0 means not reported


def map_state(raw):
    """Map an OS charge state onto BatteryState. Unrecognized values are UNKNOWN."""
    if isinstance(raw, BatteryState):
        return raw
    if isinstance(raw, str):
        return _STATE_MAP.get(raw.strip().lower(), BatteryState.UNKNOWN)
    return BatteryState.UNKNOWN


def derive_current(energy_rate, voltage):
    """Current in amperes from energy rate (W) and voltage (V), via mW / mV.

    A zero voltage yields exactly 0.0.
    """
    energy_rate_mw = energy_rate * 1000.0
    voltage_mv = voltage * 1000.0
    if voltage_mv == 0.0:
        return 0.0
    return energy_rate_mw / voltage_mv


# --- sysfs (Linux) ---

def _read_attr(path, attr):
    with open(os.path.join(path, attr), "r", encoding="utf-8", errors="ignore") as f:
        return f.read().strip()


def _read_micro(path, attr):
    """Read a sysfs micro-unit attribute and return it in base units."""
    return int(_read_attr(path, attr)) / 1_000_000


class SysfsBattery:
    """A battery exposed under /sys/class/power_supply."""

    def __init__(self, path):
        self.path = path
        self.name = os.path.basename(path)
        self._voltage = None

    def _has(self, attr):
        return os.path.exists(os.path.join(self.path, attr))

    def voltage(self):
        self._voltage = _read_micro(self.path, "voltage_now")
        return self._voltage

    def energy_rate(self):
        if self._has("power_now"):
            return abs(_read_micro(self.path, "power_now"))
        # Some drivers only report current; power = I * V, same voltage sample
        voltage = self.voltage() if self._voltage is None else self._voltage
        return abs(_read_micro(self.path, "current_now")) * voltage

    def state_of_charge(self):
        if self._has("capacity"):
            return float(_read_attr(self.path, "capacity"))
        for now, full in (("energy_now", "energy_full"), ("charge_now", "charge_full")):
            if self._has(now) and self._has(full):
                full_value = int(_read_attr(self.path, full))
                if full_value > 0:
                    return int(_read_attr(self.path, now)) * 100.0 / full_value
        return 0.0

    def state(self):
        return _read_attr(self.path, "status")


class SysfsBatteryManager:
    """Enumerates batteries from the Linux power-supply class."""

    def __init__(self, root=POWER_SUPPLY_PATH):
        self.root = root

    def batteries(self):
        try:
            entries = sorted(os.listdir(self.root))
        except OSError as e:
            raise HardwareQueryError(f"Cannot list {self.root}: {e}") from e

        handles = []
        for entry in entries:
            path = os.path.join(self.root, entry)
            try:
                supply_type = _read_attr(path, "type")
            except OSError:
                continue
            if supply_type.lower() == "battery":
                handles.append(SysfsBattery(path))
        return handles


# --- psutil fallback ---

class PsutilBattery:
    """The single battery psutil reports. Voltage and rate are not available."""

    name = "Battery"

    def __init__(self, info):
        self.info = info

    def voltage(self):
        return 0.0

    def energy_rate(self):
        return 0.0

    def state_of_charge(self):
        return float(self.info.percent)

    def state(self):
        plugged = self.info.power_plugged
        if plugged is None:
            return BatteryState.UNKNOWN
        if plugged:
            return BatteryState.FULL if self.info.percent >= 100 else BatteryState.CHARGING
        return BatteryState.DISCHARGING


class PsutilBatteryManager:
    """Battery enumeration through psutil.sensors_battery()."""

    def __init__(self):
        if not hasattr(psutil, "sensors_battery"):
            raise HardwareQueryError("psutil has no battery support on this platform")

    def batteries(self):
        try:
            info = psutil.sensors_battery()
        except (OSError, RuntimeError) as e:
            raise HardwareQueryError(f"psutil battery query failed: {e}") from e
        if info is None:
            return []
        return [PsutilBattery(info)]


def default_manager():
    """Pick the battery facility for this host."""
    if os.path.isdir(POWER_SUPPLY_PATH):
        return SysfsBatteryManager()
    return PsutilBatteryManager()


# --- reader ---

def read_battery(handle):
    """Build a record from one handle, or None if the battery cannot be read."""
    try:
        voltage = handle.voltage()
        energy_rate = handle.energy_rate()
        percentage = handle.state_of_charge()
        raw_state = handle.state()
    except (OSError, ValueError) as e:
        logger.debug("Skipping battery %s: %s", getattr(handle, "name", "?"), e)
        return None

    return BatteryRecord(
        name=getattr(handle, "name", "Battery"),
        voltage=voltage,
        current=derive_current(energy_rate, voltage),
        power=energy_rate,
        state=map_state(raw_state),
        percentage=percentage,
    )


class TelemetryReader:
    """Turns a battery manager's handles into BatteryRecords."""

    def __init__(self, manager):
        self.manager = manager

    def read_all(self):
        """Read every battery. Unreadable batteries are dropped.

        Raises HardwareQueryError when the batteries cannot be enumerated.
        """
        handles = self.manager.batteries()
        return [record for record in map(read_battery, handles) if record is not None]
