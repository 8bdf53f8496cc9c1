import unittest

from powerseek import strings
from powerseek.telemetry import BatteryRecord, BatteryState
from powerseek.ui import battery_lines, build_frame, render
from powerseek.utils import display_width, strip_ansi
from tests.fakes import FakeTerminal


def record(**overrides):
    values = dict(name="BAT0", voltage=12.0, current=2.0, power=24.0,
                  state=BatteryState.DISCHARGING, percentage=55.0)
    values.update(overrides)
    return BatteryRecord(**values)


class TestBatteryLines(unittest.TestCase):
    def test_entry_contents(self):
        lines = [strip_ansi(line) for line in battery_lines(record())]
        self.assertEqual(lines[0], "电池: BAT0")
        self.assertEqual(lines[1], "状态: 放电")
        self.assertTrue(lines[2].startswith("电量: 55.00%"))
        self.assertEqual(lines[3:], ["电压: 12.00V", "电流: 2.00A", "功率: 24.00W", ""])

    def test_percentage_omitted_when_not_reported(self):
        lines = [strip_ansi(line) for line in battery_lines(record(percentage=0.0))]
        self.assertFalse(any(line.startswith("电量") for line in lines))
        self.assertEqual(len(lines), 6)

    def test_every_state_has_label(self):
        for state in BatteryState:
            self.assertIn(strings.STATE_LABELS[state], strip_ansi(battery_lines(record(state=state))[1]))


class TestFrame(unittest.TestCase):
    def test_layout(self):
        frame = build_frame([record()], 2, 80, 24)
        plain = [strip_ansi(line) for line in frame]

        self.assertEqual(len(frame), 24)
        self.assertEqual(plain[0].strip(), strings.TITLE)
        self.assertTrue(plain[3].startswith("┌" + strings.BATTERY_LIST_TITLE))
        self.assertTrue(plain[20].startswith("└"))
        self.assertIn("刷新间隔: 2s", plain[22])
        for line in plain[3:21]:
            self.assertEqual(display_width(line), 80)

    def test_scenario_values_shown(self):
        text = "\n".join(strip_ansi(line) for line in build_frame([record()], 2, 80, 24))
        for expected in ("电量: 55.00%", "电压: 12.00V", "电流: 2.00A", "功率: 24.00W"):
            self.assertIn(expected, text)

    def test_entries_cut_at_border(self):
        records = [record(name=f"BAT{i}") for i in range(5)]
        frame = build_frame(records, 2, 60, 16)
        plain = [strip_ansi(line) for line in frame]
        self.assertEqual(len(frame), 16)
        self.assertTrue(plain[12].startswith("└"))

    def test_empty_snapshot(self):
        text = "\n".join(strip_ansi(line) for line in build_frame([], 5, 80, 20))
        self.assertIn(strings.NO_BATTERIES, text)
        self.assertIn("刷新间隔: 5s", text)

    def test_narrow_terminal_does_not_overflow(self):
        frame = build_frame([record()], 2, 30, 20)
        for line in frame[3:17]:
            self.assertEqual(display_width(line), 30)


class TestRender(unittest.TestCase):
    def test_clears_only_on_resize(self):
        class State:
            records = (record(),)
            refresh_interval = 3
            prev_term_size = (0, 0)

        state = State()
        term = FakeTerminal(cols=80, rows=24)
        render(state, term)
        render(state, term)
        self.assertEqual(term.clears, 1)
        term.cols = 100
        render(state, term)
        self.assertEqual(term.clears, 2)
        self.assertEqual(len(term.frames), 3)


if __name__ == '__main__':
    unittest.main()
