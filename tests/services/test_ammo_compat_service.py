"""AmmoCompatService 테스트 — 패스 전체 시나리오"""

from __future__ import annotations

import copy
from collections import namedtuple
from unittest.mock import MagicMock

import pytest

from src.core.catalog.models import ItemId, PassStatus
from src.core.event_bus import EventBus
from src.core.event_types import EventTypes
from src.services.ammo_compat_service import AmmoCompatService


def ammo(caliber: str, **extra) -> dict:
    props = {"Caliber": caliber, "PenetrationPower": 10}
    props.update(extra)
    return {"_props": props}


def magazine(whitelist) -> dict:
    return {"_props": {"Cartridges": [{"_props": {"filters": [{"Filter": whitelist}]}}]}}


def weapon(chamber, magazines) -> dict:
    return {
        "_props": {
            "Caliber": "X",
            "Chambers": [{"_props": {"filters": [{"Filter": chamber}]}}],
            "Slots": [{"_props": {"filters": [{"Filter": magazines}]}}],
        }
    }


def whitelist_of(record: dict, section: str = "Cartridges") -> list:
    return record["_props"][section][0]["_props"]["filters"][0]["Filter"]


Record = namedtuple("Record", ["Properties"])
AmmoProps = namedtuple("AmmoProps", ["Caliber", "Damage"])
MagazineProps = namedtuple("MagazineProps", ["Cartridges"])
SlotProps = namedtuple("SlotProps", ["filters"])
FilterGroup = namedtuple("FilterGroup", ["Filter"])


class StrictId:
    """정수 생성자만 받는 식별자 래퍼 (문자열 변환 실패용)"""

    def __init__(self, value: int) -> None:
        self.value = int(value)

    def __str__(self) -> str:
        return f"A{self.value}"


@pytest.fixture()
def bus_events():
    bus = EventBus()
    received = []
    for event_type in (
        EventTypes.AMMO_COMPAT_COMPLETED,
        EventTypes.AMMO_COMPAT_SKIPPED,
        EventTypes.AMMO_COMPAT_FAILED,
    ):
        bus.subscribe(event_type, received.append)
    return bus, received


class TestScenarios:
    def test_single_gap(self, scenario_catalog) -> None:
        summary = AmmoCompatService(scenario_catalog).run()

        assert set(whitelist_of(scenario_catalog["M1"])) == {"A1", "A2"}
        assert summary.status is PassStatus.COMPLETED
        assert summary.whitelists_touched == 1
        assert summary.identifiers_added == 1
        assert summary.known_ammo_count == 3

    def test_no_gap_not_touched(self, scenario_catalog) -> None:
        scenario_catalog["M1"] = magazine(["A1", "A2"])
        summary = AmmoCompatService(scenario_catalog).run()
        assert summary.whitelists_touched == 0
        assert summary.identifiers_added == 0
        assert whitelist_of(scenario_catalog["M1"]) == ["A1", "A2"]

    def test_empty_whitelist_left_empty(self, scenario_catalog) -> None:
        scenario_catalog["M1"] = magazine([])
        summary = AmmoCompatService(scenario_catalog).run()
        assert whitelist_of(scenario_catalog["M1"]) == []
        assert summary.whitelists_touched == 0

    def test_weapon_chamber_and_slots(self, scenario_catalog) -> None:
        scenario_catalog["W1"] = weapon(["A2"], ["M1"])
        summary = AmmoCompatService(scenario_catalog).run()

        w1 = scenario_catalog["W1"]
        assert set(whitelist_of(w1, "Chambers")) == {"A1", "A2"}
        # 탄창 화이트리스트 (슬롯)는 탄약이 아니므로 그대로
        assert whitelist_of(w1, "Slots") == ["M1"]
        assert summary.whitelists_touched == 2
        assert summary.identifiers_added == 2

    def test_wrapped_ids_in_catalog(self) -> None:
        catalog = {
            "A1": ammo("X"),
            "A2": ammo("X"),
            "M1": magazine([ItemId("A1")]),
        }
        AmmoCompatService(catalog).run()
        assert whitelist_of(catalog["M1"]) == [ItemId("A1"), ItemId("A2")]

    def test_object_records(self) -> None:
        """dict가 아닌 namedtuple 레코드로 이루어진 카탈로그"""
        whitelist = ["A1"]
        catalog = {
            "A1": Record(AmmoProps("X", 50)),
            "A2": Record(AmmoProps("x", 40)),
            "A3": Record(AmmoProps("Y", 30)),
            "M1": Record(
                MagazineProps([Record(SlotProps([FilterGroup(whitelist)]))])
            ),
        }
        summary = AmmoCompatService(catalog).run()

        assert summary.status is PassStatus.COMPLETED
        assert summary.known_ammo_count == 3
        assert summary.identifiers_added == 1
        assert set(whitelist) == {"A1", "A2"}


class TestProperties:
    def test_idempotent(self, scenario_catalog) -> None:
        scenario_catalog["W1"] = weapon(["A3"], ["M1"])
        service = AmmoCompatService(scenario_catalog)
        service.run()
        after_first = copy.deepcopy(scenario_catalog)

        second = service.run()
        assert second.identifiers_added == 0
        assert second.whitelists_touched == 0
        assert scenario_catalog == after_first

    def test_non_corruption(self, scenario_catalog) -> None:
        scenario_catalog["W1"] = weapon(["unknown"], ["M1", "M2"])
        AmmoCompatService(scenario_catalog).run()
        assert whitelist_of(scenario_catalog["W1"], "Chambers") == ["unknown"]
        assert whitelist_of(scenario_catalog["W1"], "Slots") == ["M1", "M2"]

    def test_caliber_closure(self) -> None:
        catalog = {f"X{i}": ammo("X") for i in range(5)}
        catalog.update({f"Y{i}": ammo("Y") for i in range(3)})
        catalog.update({f"Z{i}": ammo("Z") for i in range(2)})
        catalog["M1"] = magazine(["X0", "Y2"])
        AmmoCompatService(catalog).run()

        expected = {f"X{i}" for i in range(5)} | {f"Y{i}" for i in range(3)}
        assert set(whitelist_of(catalog["M1"])) == expected

    def test_case_insensitive_calibers(self) -> None:
        catalog = {
            "A1": ammo("9x19mm"),
            "A2": ammo("9X19MM"),
            "M1": magazine(["A1"]),
        }
        summary = AmmoCompatService(catalog).run()
        assert set(whitelist_of(catalog["M1"])) == {"A1", "A2"}
        assert summary.known_ammo_count == 2

    def test_preservation(self, scenario_catalog) -> None:
        scenario_catalog["M1"] = magazine(["junk", "A1", "other"])
        AmmoCompatService(scenario_catalog).run()
        wl = whitelist_of(scenario_catalog["M1"])
        assert wl[:3] == ["junk", "A1", "other"]
        assert set(wl) == {"junk", "A1", "other", "A2"}

    def test_index_built_before_expansion(self) -> None:
        """확장 중 추가된 항목이 같은 패스의 다른 화이트리스트에 영향 없음"""
        catalog = {
            "A1": ammo("X"),
            "A2": ammo("X"),
            "M1": magazine(["A1"]),
            "M2": magazine(["A2"]),
        }
        summary = AmmoCompatService(catalog).run()
        assert summary.whitelists_touched == 2
        assert summary.identifiers_added == 2


class TestNoWork:
    def test_empty_catalog(self, bus_events) -> None:
        bus, received = bus_events
        summary = AmmoCompatService({}, bus).run()
        assert summary.status is PassStatus.EMPTY_CATALOG
        assert summary.identifiers_added == 0
        assert [e.event_type for e in received] == [EventTypes.AMMO_COMPAT_SKIPPED]

    def test_none_catalog(self) -> None:
        summary = AmmoCompatService(None).run()
        assert summary.status is PassStatus.EMPTY_CATALOG

    def test_no_ammo(self) -> None:
        catalog = {"M1": magazine(["A1"]), "W1": {"_props": {"Caliber": "X"}}}
        before = copy.deepcopy(catalog)
        summary = AmmoCompatService(catalog).run()
        assert summary.status is PassStatus.NO_AMMO
        assert summary.whitelists_touched == 0
        assert summary.known_ammo_count == 0
        assert catalog == before

    def test_none_records_skipped(self, scenario_catalog) -> None:
        scenario_catalog["broken"] = None
        summary = AmmoCompatService(scenario_catalog).run()
        assert summary.status is PassStatus.COMPLETED


class TestFailure:
    def test_unexpected_exception_becomes_failed_summary(self, bus_events) -> None:
        bus, received = bus_events

        catalog = {"A1": ammo("X"), "A2": ammo("X"), "M1": magazine([StrictId(1)])}
        service = AmmoCompatService(catalog, bus)
        summary = service.run()

        assert summary.failed
        assert summary.error
        assert service.last_summary is summary
        assert [e.event_type for e in received] == [EventTypes.AMMO_COMPAT_FAILED]
        assert received[0].data["status"] == "failed"

    def test_mutations_before_failure_are_kept(self, bus_events) -> None:
        bus, received = bus_events
        catalog = {
            "A1": ammo("X"),
            "A2": ammo("X"),
            "M1": magazine(["A1"]),
            "M2": magazine([StrictId(1)]),
        }
        summary = AmmoCompatService(catalog, bus).run()

        assert summary.status is PassStatus.FAILED
        assert set(whitelist_of(catalog["M1"])) == {"A1", "A2"}
        assert [e.event_type for e in received] == [EventTypes.AMMO_COMPAT_FAILED]

    def test_catalog_provider_error(self) -> None:
        provider = MagicMock(side_effect=RuntimeError("boom"))
        summary = AmmoCompatService(provider).run()
        assert summary.status is PassStatus.FAILED
        assert summary.error == "boom"


class TestReporting:
    def test_completed_event(self, scenario_catalog, bus_events) -> None:
        bus, received = bus_events
        AmmoCompatService(scenario_catalog, bus).run()

        assert len(received) == 1
        event = received[0]
        assert event.event_type == EventTypes.AMMO_COMPAT_COMPLETED
        assert event.source == "ammo_compat"
        assert event.data["whitelistsTouched"] == 1
        assert event.data["identifiersAdded"] == 1
        assert event.data["knownAmmoCount"] == 3

    def test_callable_catalog_resolved_at_run(self, scenario_catalog) -> None:
        holder = {"catalog": {}}
        service = AmmoCompatService(lambda: holder["catalog"])
        holder["catalog"] = scenario_catalog
        assert service.run().identifiers_added == 1

    def test_last_summary(self, scenario_catalog) -> None:
        service = AmmoCompatService(scenario_catalog)
        assert service.last_summary is None
        summary = service.run()
        assert service.last_summary is summary
