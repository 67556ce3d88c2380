import struct
import unittest

from snss_reader.snss import (
    SESSION,
    SESSION_DECODERS,
    TAB_RESTORE_DECODERS,
    TABS,
    ActiveWindow,
    LastActiveTime,
    OutOfBoundsError,
    PageTransitionType,
    PinnedState,
    RecordDecodeError,
    SelectedNavigationIndex,
    SelectedTabInIndex,
    TabClosed,
    TabIndexInWindow,
    TabNavigation,
    WindowBounds,
    WindowClosed,
    WindowType,
    decode_command,
)
from tests.snss.builders import id_and_time_payload, navigation_payload, window_bounds_payload


class NavigationDecodeTests(unittest.TestCase):
    def test_decodes_all_navigation_fields(self) -> None:
        payload = navigation_payload(
            tab_id=1994883225,
            index=1,
            url="https://console.hetzner.cloud/projects/3687808/servers/64199561/loadbalancers",
            title="primary · Hetzner Cloud",
            state=b"\x01\x02\x03\x04\x05",
            transition=0x10000008,
            has_post_data=False,
            referrer_url="https://console.hetzner.cloud/",
            referrer_policy=2,
            original_request_url="https://console.hetzner.cloud/projects/3687808/servers/64199561/graphs",
            is_overriding_user_agent=False,
        )
        tab = decode_command(6, payload)
        self.assertIsInstance(tab, TabNavigation)
        self.assertEqual(1994883225, tab.tab_id)
        self.assertEqual(1, tab.index)
        self.assertEqual("https://console.hetzner.cloud/projects/3687808/servers/64199561/loadbalancers", tab.url)
        self.assertEqual("primary · Hetzner Cloud", tab.title)
        self.assertEqual(b"\x01\x02\x03\x04\x05", tab.state)
        self.assertEqual(PageTransitionType.RELOAD, tab.transition.core)
        self.assertFalse(tab.has_post_data)
        self.assertEqual("https://console.hetzner.cloud/", tab.referrer_url)
        self.assertEqual(2, tab.referrer_policy)
        self.assertEqual(
            "https://console.hetzner.cloud/projects/3687808/servers/64199561/graphs",
            tab.original_request_url,
        )
        self.assertFalse(tab.is_overriding_user_agent)
        self.assertEqual(b"", tab.extra)

    def test_tab_restore_tag_uses_the_same_layout(self) -> None:
        tab = decode_command(
            1,
            navigation_payload(tab_id=3, has_post_data=True, is_overriding_user_agent=True),
            TABS,
        )
        self.assertIsInstance(tab, TabNavigation)
        self.assertEqual(3, tab.tab_id)
        self.assertTrue(tab.has_post_data)
        self.assertTrue(tab.is_overriding_user_agent)

    def test_trailing_pickle_fields_are_kept_verbatim(self) -> None:
        extra = struct.pack("<qi", 13_300_000_000_000_000, 200)
        tab = decode_command(6, navigation_payload(extra=extra))
        self.assertEqual(extra, tab.extra)

    def test_pickle_size_mismatch_is_a_decode_error(self) -> None:
        payload = navigation_payload() + b"\x00\x00\x00\x00"
        with self.assertRaises(RecordDecodeError) as ctx:
            decode_command(6, payload)
        self.assertEqual(0, ctx.exception.offset)

    def test_truncated_navigation_is_out_of_bounds(self) -> None:
        payload = navigation_payload(title="a long enough title")
        body = payload[4:30]
        with self.assertRaises(OutOfBoundsError):
            decode_command(6, struct.pack("<I", len(body)) + body)


class FixedLayoutDecodeTests(unittest.TestCase):
    def test_window_bounds(self) -> None:
        content = decode_command(14, window_bounds_payload(42, 10, 20, 1280, 800, 1))
        self.assertEqual(WindowBounds(window_id=42, x=10, y=20, width=1280, height=800, show_state=1), content)

    def test_window_bounds_allows_negative_coordinates(self) -> None:
        content = decode_command(14, window_bounds_payload(1, -1920, -8, 1920, 1080, 3))
        self.assertEqual(-1920, content.x)
        self.assertEqual(-8, content.y)

    def test_pairs_of_ids(self) -> None:
        payload = struct.pack("<ii", 11, 22)
        self.assertEqual(TabIndexInWindow(tab_id=11, index=22), decode_command(2, payload))
        self.assertEqual(SelectedNavigationIndex(tab_id=11, index=22), decode_command(7, payload))
        self.assertEqual(SelectedTabInIndex(window_id=11, index=22), decode_command(8, payload))
        self.assertEqual(WindowType(window_id=11, window_type=22), decode_command(9, payload))

    def test_pinned_state_reads_padded_bool(self) -> None:
        self.assertEqual(PinnedState(tab_id=5, pinned=True), decode_command(12, struct.pack("<iB3x", 5, 1)))
        self.assertEqual(PinnedState(tab_id=5, pinned=False), decode_command(12, struct.pack("<iB3x", 5, 0)))

    def test_closed_and_last_active_read_aligned_int64(self) -> None:
        payload = id_and_time_payload(9, 13_350_000_000_000_000)
        self.assertEqual(TabClosed(id=9, close_time=13_350_000_000_000_000), decode_command(16, payload))
        self.assertEqual(WindowClosed(id=9, close_time=13_350_000_000_000_000), decode_command(17, payload))
        self.assertEqual(
            LastActiveTime(tab_id=9, last_active_time=13_350_000_000_000_000),
            decode_command(21, payload),
        )

    def test_active_window(self) -> None:
        self.assertEqual(ActiveWindow(window_id=3), decode_command(20, struct.pack("<i", 3)))

    def test_trailing_bytes_are_a_decode_error(self) -> None:
        with self.assertRaises(RecordDecodeError) as ctx:
            decode_command(2, struct.pack("<iii", 1, 2, 3))
        self.assertNotIsInstance(ctx.exception, OutOfBoundsError)
        self.assertEqual(8, ctx.exception.offset)

    def test_short_payload_is_out_of_bounds(self) -> None:
        with self.assertRaises(OutOfBoundsError):
            decode_command(14, struct.pack("<iii", 1, 2, 3))

    def test_unregistered_tag_returns_none(self) -> None:
        for tag in (0, 255):
            self.assertNotIn(tag, SESSION_DECODERS)
            self.assertIsNone(decode_command(tag, b"\x01\x02"))


class FileKindTests(unittest.TestCase):
    def test_tabs_table_only_knows_navigation(self) -> None:
        self.assertEqual([1], sorted(TAB_RESTORE_DECODERS))
        self.assertNotIn(1, SESSION_DECODERS)

    def test_session_commands_are_not_decoded_in_tabs_files(self) -> None:
        payload = struct.pack("<ii", 11, 22)
        self.assertIsNone(decode_command(2, payload, TABS))
        self.assertEqual(TabIndexInWindow(tab_id=11, index=22), decode_command(2, payload, SESSION))

    def test_tab_restore_navigation_is_not_decoded_in_session_files(self) -> None:
        self.assertIsNone(decode_command(1, navigation_payload(), SESSION))

    def test_unknown_kind_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            decode_command(6, navigation_payload(), "history")


if __name__ == "__main__":
    unittest.main()
