"""Display strings (zh-CN)"""
from .telemetry import BatteryState

TITLE = "Power Seek - 电源监控"
BATTERY_LIST_TITLE = "电池信息"
NO_BATTERIES = "未检测到电池"

STATE_LABELS = {
    BatteryState.CHARGING: "充电",
    BatteryState.DISCHARGING: "放电",
    BatteryState.FULL: "满",
    BatteryState.EMPTY: "空",
    BatteryState.UNKNOWN: "未知",
}

NAME_LINE = "电池: {name}"
STATE_LINE = "状态: {state}"
PERCENTAGE_LINE = "电量: {percentage:.2f}%"
VOLTAGE_LINE = "电压: {voltage:.2f}V"
CURRENT_LINE = "电流: {current:.2f}A"
POWER_LINE = "功率: {power:.2f}W"

FOOTER = "刷新间隔: {interval}s | 按 '+' 增加, '-' 减少 | 按 'q' 退出, 'r' 手动刷新"


def state_label(state):
    """Localized label for a battery state."""
    return STATE_LABELS.get(state, STATE_LABELS[BatteryState.UNKNOWN])
