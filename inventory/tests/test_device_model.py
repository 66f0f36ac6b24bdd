"""
Tests for the Device entity and the DeviceType / DeviceStatus enums
"""

from datetime import datetime

import pytest

from inventory.domains.common.exceptions import InvalidEnumValueError
from inventory.domains.device.models.device_model import (
    Device,
    DeviceStatus,
    DeviceType,
)


def test_variants_keep_declaration_order():
    assert [t.name for t in DeviceType] == [
        "LAPTOP",
        "SERVER",
        "PRINTER",
        "NETWORK_SWITCH",
        "ROUTER",
        "OTHER",
    ]
    assert [s.name for s in DeviceStatus] == ["ACTIVE", "INACTIVE", "MAINTENANCE"]


def test_display_names():
    assert DeviceType.NETWORK_SWITCH.display_name == "Network Switch"
    assert DeviceType.LAPTOP.display_name == "Laptop"
    assert DeviceStatus.MAINTENANCE.display_name == "Maintenance"


@pytest.mark.parametrize("variant", list(DeviceType))
def test_device_type_from_input_accepts_name_and_label(variant):
    for text in (
        variant.name,
        variant.name.lower(),
        variant.display_name,
        variant.display_name.upper(),
        variant.display_name.swapcase(),
    ):
        assert DeviceType.from_input(text) is variant


@pytest.mark.parametrize("variant", list(DeviceStatus))
def test_device_status_from_input_accepts_name_and_label(variant):
    for text in (variant.name, variant.name.lower(), variant.display_name.upper()):
        assert DeviceStatus.from_input(text) is variant


@pytest.mark.parametrize("blank", [None, "", "   ", "\t"])
def test_from_input_blank_returns_default(blank):
    assert DeviceType.from_input(blank) is DeviceType.OTHER
    assert DeviceStatus.from_input(blank) is DeviceStatus.ACTIVE


def test_from_input_trims_surrounding_whitespace():
    assert DeviceType.from_input("  network switch ") is DeviceType.NETWORK_SWITCH


def test_from_input_unknown_value():
    with pytest.raises(InvalidEnumValueError) as exc_info:
        DeviceType.from_input("not-a-real-value")
    assert exc_info.value.value == "not-a-real-value"
    assert exc_info.value.enum_name == "DeviceType"

    with pytest.raises(InvalidEnumValueError) as exc_info:
        DeviceStatus.from_input("not-a-real-value")
    assert exc_info.value.enum_name == "DeviceStatus"


def test_invalid_enum_value_is_a_value_error():
    with pytest.raises(ValueError):
        DeviceStatus.from_input("retired")


def test_new_device_has_no_id_or_created_at():
    device = Device(
        name="Laptop-7",
        type=DeviceType.LAPTOP,
        status=DeviceStatus.ACTIVE,
        ip_address=None,
        location="Desk 4",
    )
    assert device.id is None
    assert device.created_at is None
    assert device.formatted_created_at == "—"


def test_formatted_created_at():
    device = Device(
        name="Printer-2",
        type=DeviceType.PRINTER,
        status=DeviceStatus.INACTIVE,
        created_at=datetime(2024, 3, 5, 9, 7, 30),
    )
    assert device.formatted_created_at == "2024-03-05 09:07"
