"""
Tests for TabManager: tab identity, activation, close fallback,
rename/refresh/duplicate and the location observer entry point.
"""

from tabdeck.core.tabs import Tab, TabManager, base_route


class TestOpenTab:
    def test_open_appends_timestamp_suffix(self, tab_manager, navigator):
        path = tab_manager.open_tab("/dashboard")

        assert path == "/dashboard?_ts=1000"
        assert tab_manager.tabs == [Tab("/dashboard?_ts=1000", "Dashboard")]
        assert tab_manager.active_tab == path
        assert navigator.last == (path, False)

    def test_open_keeps_caller_query(self, tab_manager):
        path = tab_manager.open_tab("/invoice/list?page=2")

        assert path == "/invoice/list?page=2"
        assert tab_manager.paths() == ["/invoice/list?page=2"]

    def test_explicit_label_wins(self, tab_manager):
        path = tab_manager.open_tab("/invoice/create", "New bill")
        assert tab_manager.find(path).label == "New bill"

    def test_same_route_twice_gives_two_tabs(self, tab_manager):
        first = tab_manager.open_tab("/invoice/list")
        second = tab_manager.open_tab("/invoice/list")

        assert first != second
        assert len(tab_manager) == 2
        assert tab_manager.active_tab == second

    def test_paths_stay_unique(self, tab_manager):
        for route in ["/a", "/a", "/b", "/a?x=1", "/a?x=1", "/b"]:
            tab_manager.open_tab(route)
        paths = tab_manager.paths()
        assert len(paths) == len(set(paths))

    def test_reopen_existing_activates_it(self, tab_manager, navigator):
        a = tab_manager.open_tab("/a?x=1")
        tab_manager.open_tab("/b?x=1")

        tab_manager.open_tab(a)

        assert len(tab_manager) == 2
        assert tab_manager.active_tab == a
        assert navigator.last == (a, False)

    def test_suffixes_are_monotonic_on_a_frozen_clock(self, tab_manager, clock):
        first = tab_manager.open_tab("/a")
        second = tab_manager.open_tab("/a")
        clock.now = 500  # clock going backwards
        third = tab_manager.open_tab("/a")

        assert [first, second, third] == ["/a?_ts=1000", "/a?_ts=1001", "/a?_ts=1002"]


class TestSwitchTab:
    def test_switch_activates_and_navigates(self, tab_manager, navigator):
        a = tab_manager.open_tab("/a")
        tab_manager.open_tab("/b")

        tab_manager.switch_tab(a)

        assert tab_manager.active_tab == a
        assert navigator.last == (a, False)

    def test_switch_unknown_path_is_noop(self, tab_manager, navigator):
        b = tab_manager.open_tab("/b")
        calls = len(navigator.calls)

        tab_manager.switch_tab("/nope?_ts=1")

        assert tab_manager.active_tab == b
        assert len(navigator.calls) == calls


class TestCloseTab:
    def test_close_only_tab_empties_and_goes_home(self, tab_manager, navigator):
        a = tab_manager.open_tab("/a")

        tab_manager.close_tab(a)

        assert tab_manager.tabs == []
        assert tab_manager.active_tab is None
        assert navigator.last == ("/", False)

    def test_close_active_falls_back_to_first(self, tab_manager, navigator):
        a = tab_manager.open_tab("/a")
        b = tab_manager.open_tab("/b")
        c = tab_manager.open_tab("/c")
        tab_manager.switch_tab(b)

        tab_manager.close_tab(b)

        assert tab_manager.paths() == [a, c]
        assert tab_manager.active_tab == a
        assert navigator.last == (a, False)

    def test_close_inactive_keeps_active(self, tab_manager, navigator):
        a = tab_manager.open_tab("/a")
        tab_manager.open_tab("/b")
        c = tab_manager.open_tab("/c")
        calls = len(navigator.calls)

        tab_manager.close_tab(a)

        assert len(tab_manager) == 2
        assert a not in tab_manager
        assert tab_manager.active_tab == c
        assert len(navigator.calls) == calls

    def test_rapid_consecutive_closes(self, tab_manager):
        a = tab_manager.open_tab("/a")
        b = tab_manager.open_tab("/b")
        c = tab_manager.open_tab("/c")

        tab_manager.close_tab(c)
        tab_manager.close_tab(a)

        assert tab_manager.paths() == [b]
        assert tab_manager.active_tab == b

        tab_manager.close_tab(b)
        assert tab_manager.active_tab is None

    def test_close_unknown_path_is_noop(self, tab_manager):
        a = tab_manager.open_tab("/a")
        tab_manager.close_tab("/missing?_ts=3")
        assert tab_manager.paths() == [a]
        assert tab_manager.active_tab == a

    def test_home_path_comes_from_settings(self, qapp, navigator, settings_manager):
        settings_manager.set("home_path", "/welcome")
        manager = TabManager(navigator, settings_manager=settings_manager)
        path = manager.open_tab("/a")

        manager.close_tab(path)

        assert navigator.last == ("/welcome", False)

    def test_state_is_final_when_signals_fire(self, tab_manager):
        a = tab_manager.open_tab("/a")
        b = tab_manager.open_tab("/b")
        seen = []
        tab_manager.activeTabChanged.connect(
            lambda path: seen.append((path, tab_manager.paths()))
        )

        tab_manager.close_tab(b)

        assert seen == [(a, [a])]

    def test_tab_closed_signal(self, tab_manager, qtbot):
        a = tab_manager.open_tab("/a")
        with qtbot.waitSignal(tab_manager.tabClosed, timeout=1000) as blocker:
            tab_manager.close_tab(a)
        assert blocker.args == [a]


class TestRenameTab:
    def test_rename_changes_only_label(self, tab_manager, navigator):
        a = tab_manager.open_tab("/a")
        b = tab_manager.open_tab("/b")
        calls = len(navigator.calls)

        tab_manager.rename_tab(a, "X")

        assert tab_manager.tabs == [Tab(a, "X"), Tab(b, "B")]
        assert tab_manager.active_tab == b
        assert len(navigator.calls) == calls

    def test_rename_emits(self, tab_manager, qtbot):
        a = tab_manager.open_tab("/a")
        with qtbot.waitSignal(tab_manager.tabRenamed, timeout=1000) as blocker:
            tab_manager.rename_tab(a, "Sales")
        assert blocker.args == [a, "Sales"]

    def test_rename_unknown_path_is_noop(self, tab_manager):
        a = tab_manager.open_tab("/a")
        tab_manager.rename_tab("/zzz", "X")
        assert tab_manager.find(a).label == "A"


class TestRefreshTab:
    def test_refresh_gives_new_identity(self, tab_manager, navigator):
        a = tab_manager.open_tab("/invoice/list")
        tab_manager.rename_tab(a, "Bills")

        new = tab_manager.refresh_tab(a)

        assert new != a
        assert base_route(new) == "/invoice/list"
        assert a not in tab_manager
        assert tab_manager.find(new).label == "Bills"
        assert tab_manager.active_tab == new
        assert navigator.last == (new, True)

    def test_refresh_keeps_position(self, tab_manager):
        a = tab_manager.open_tab("/a")
        b = tab_manager.open_tab("/b")
        c = tab_manager.open_tab("/c")

        new = tab_manager.refresh_tab(b)

        assert tab_manager.paths() == [a, new, c]

    def test_refresh_strips_caller_query(self, tab_manager, clock):
        a = tab_manager.open_tab("/invoice/list?page=3")
        clock.now = 2000
        assert tab_manager.refresh_tab(a) == "/invoice/list?_ts=2000"

    def test_refresh_emits_old_and_new(self, tab_manager, qtbot):
        a = tab_manager.open_tab("/a")
        with qtbot.waitSignal(tab_manager.tabRefreshed, timeout=1000) as blocker:
            new = tab_manager.refresh_tab(a)
        assert blocker.args == [a, new]

    def test_refresh_unknown_path_is_noop(self, tab_manager):
        a = tab_manager.open_tab("/a")
        assert tab_manager.refresh_tab("/b?_ts=1") is None
        assert tab_manager.paths() == [a]


class TestDuplicateTab:
    def test_duplicate_opens_second_tab(self, tab_manager, navigator):
        a = tab_manager.open_tab("/invoice/list?x=1")

        copy = tab_manager.duplicate_tab(a)

        assert len(tab_manager) == 2
        assert {base_route(p) for p in tab_manager.paths()} == {"/invoice/list"}
        assert copy != a
        assert tab_manager.find(copy).label == "Invoice list (copy)"
        assert tab_manager.active_tab == copy
        assert navigator.last == (copy, False)

    def test_duplicate_unknown_path_is_noop(self, tab_manager):
        assert tab_manager.duplicate_tab("/a?x=1") is None
        assert len(tab_manager) == 0


class TestSyncLocation:
    def test_existing_location_is_activated_without_navigation(self, tab_manager, navigator):
        a = tab_manager.open_tab("/a")
        tab_manager.open_tab("/b")
        calls = len(navigator.calls)

        tab_manager.sync_location(a)

        assert tab_manager.active_tab == a
        assert len(navigator.calls) == calls

    def test_unknown_location_with_query_is_adopted_as_is(self, tab_manager, navigator):
        tab_manager.sync_location("/invoice/details?id=42")

        assert tab_manager.tabs == [Tab("/invoice/details?id=42", "Invoice details")]
        assert tab_manager.active_tab == "/invoice/details?id=42"
        assert navigator.calls == []

    def test_bare_location_gets_key_and_replaces_location(self, tab_manager, navigator):
        tab_manager.sync_location("/products/all")

        assert tab_manager.paths() == ["/products/all?_ts=1000"]
        assert navigator.calls == [("/products/all?_ts=1000", True)]

    def test_home_location_is_ignored(self, tab_manager):
        tab_manager.sync_location("/")
        tab_manager.sync_location("")
        assert len(tab_manager) == 0
        assert tab_manager.active_tab is None

    def test_home_location_with_open_tabs_returns_to_active(self, tab_manager, navigator):
        a = tab_manager.open_tab("/a")

        tab_manager.sync_location("/")

        assert tab_manager.paths() == [a]
        assert tab_manager.active_tab == a
        assert navigator.last == (a, True)

    def test_own_navigation_is_ignored(self, qapp, clock):
        seen = []

        def navigate(path, replace=False):
            seen.append(path)
            manager.sync_location(path)

        manager = TabManager(navigate, clock=clock)
        manager.open_tab("/a")
        manager.open_tab("/a")

        assert len(manager) == 2
        assert len(seen) == 2


def test_clear_resets_session(tab_manager):
    tab_manager.open_tab("/a")
    tab_manager.open_tab("/b")

    tab_manager.clear()

    assert tab_manager.tabs == []
    assert tab_manager.active_tab is None


def test_end_to_end_scenario(tab_manager, navigator, clock):
    dashboard = tab_manager.open_tab("/dashboard")
    assert tab_manager.tabs == [Tab("/dashboard?_ts=1000", "Dashboard")]
    assert tab_manager.active_tab == "/dashboard?_ts=1000"

    clock.advance(250)
    invoices = tab_manager.open_tab("/invoice/list")
    assert invoices == "/invoice/list?_ts=1250"
    assert len(tab_manager) == 2
    assert tab_manager.active_tab == invoices

    tab_manager.close_tab(invoices)
    assert tab_manager.paths() == [dashboard]
    assert tab_manager.active_tab == dashboard
    assert navigator.last == (dashboard, False)
