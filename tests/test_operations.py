"""Tests for the operation table and spec assembly."""

import dataclasses

import pytest

from eventbridge import RequestSpec, Service
from eventbridge._utils import OPERATIONS, build_spec, target_header


class TestOperationTable:
    def test_event_bus_operations_use_events_service_root(self):
        for operation_id in (
            "list_event_buses",
            "create_event_bus",
            "delete_event_bus",
            "describe_event_bus",
            "put_events",
        ):
            operation = OPERATIONS[operation_id]
            assert operation.service is Service.EVENTS
            assert operation.method == "POST"
            assert operation.path == "/"

    def test_schedule_operations(self):
        assert OPERATIONS["create_schedule"].service is Service.SCHEDULER
        assert OPERATIONS["create_schedule"].method == "POST"
        assert OPERATIONS["delete_schedule"].service is Service.SCHEDULER
        assert OPERATIONS["delete_schedule"].method == "DELETE"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            OPERATIONS["list_rules"] = OPERATIONS["put_events"]  # type: ignore[index]

    @pytest.mark.parametrize(
        ("operation_id", "expected"),
        [
            ("list_event_buses", "AWSEvents.ListEventBuses"),
            ("create_event_bus", "AWSEvents.CreateEventBus"),
            ("delete_event_bus", "AWSEvents.DeleteEventBus"),
            ("describe_event_bus", "AWSEvents.DescribeEventBus"),
            ("put_events", "AWSEvents.PutEvents"),
            ("create_schedule", "AWSEvents.CreateSchedule"),
            ("delete_schedule", "AWSEvents.DeleteSchedule"),
        ],
    )
    def test_target_header(self, operation_id, expected):
        assert target_header(operation_id) == expected

    def test_create_schedule_target_is_pinned(self):
        assert OPERATIONS["create_schedule"].target == "CreateSchedule"
        assert OPERATIONS["delete_schedule"].target is None


class TestBuildSpec:
    def test_headers_are_ordered_pairs(self):
        spec = build_spec("put_events", {"Entries": []})

        assert spec.headers == (
            ("x-amz-target", "AWSEvents.PutEvents"),
            ("content-type", "application/x-amz-json-1.1"),
        )

    def test_schedule_path_comes_from_body_name(self):
        spec = build_spec("delete_schedule", {"Name": "from-body"})

        assert spec.endpoint == "/schedules/from-body"

    def test_schedule_without_name_is_rejected(self):
        with pytest.raises(ValueError):
            build_spec("create_schedule", {})

    def test_unknown_operation(self):
        with pytest.raises(KeyError):
            build_spec("list_rules", {})

    def test_spec_is_frozen(self):
        spec = build_spec("list_event_buses", {})

        assert isinstance(spec, RequestSpec)
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.method = "GET"  # type: ignore[misc]

    def test_body_is_read_only(self):
        body = {"Name": "bus"}
        spec = build_spec("create_event_bus", body)

        with pytest.raises(TypeError):
            spec.json["Name"] = "mutated"  # type: ignore[index]

        body["Name"] = "changed-later"
        assert spec.json == {"Name": "bus"}

    def test_header_lookup_ignores_case(self):
        spec = build_spec("list_event_buses", {})

        assert spec.header("X-Amz-Target") == "AWSEvents.ListEventBuses"
        assert spec.header("authorization") is None
