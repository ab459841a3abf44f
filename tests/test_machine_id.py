"""Tests for MachineID construction and encoding."""

import dataclasses
import random

import pytest

from steam_machine_id import MachineID, RandomSourceUnavailable

ACCOUNTNAME_MESSAGE = (
    b"\x00MessageObject\x00"
    b"\x01BB3\x006bb2445f8825bfed65e64392f0a4d549fff7d3e1\x00"
    b"\x01FF2\x0057ad645e54976aff3b3662e9cb335d0a24ac7d08\x00"
    b"\x013B3\x00c1884025d23fb1a0ddbf125b5d9b8c0812f83390\x00"
    b"\x08\x08"
)


def assert_message_layout(message):
    assert len(message) == 155
    assert message[0] == 0
    assert message[1:15] == b"MessageObject\x00"
    assert message[15] == 1
    assert message[16:20] == b"BB3\x00"
    assert message[60] == 0
    assert message[61] == 1
    assert message[62:66] == b"FF2\x00"
    assert message[106] == 0
    assert message[107] == 1
    assert message[108:112] == b"3B3\x00"
    assert message[152] == 0
    assert message[153] == 8
    assert message[154] == 8
    assert message.count(b"\x01") == 3


class TestFromAccountName:
    def test_golden_message(self):
        assert MachineID.from_account_name("accountname").to_message() == ACCOUNTNAME_MESSAGE

    def test_layout(self):
        assert_message_layout(MachineID.from_account_name("accountname").to_message())

    def test_empty_account_name(self):
        assert_message_layout(MachineID.from_account_name("").to_message())

    def test_non_ascii_account_name(self):
        assert_message_layout(MachineID.from_account_name("żółw").to_message())

    def test_deterministic(self):
        a = MachineID.from_account_name("someone")
        b = MachineID.from_account_name("someone")
        assert a == b
        assert a.to_message() == b.to_message()

    def test_seed_sensitive(self):
        a = MachineID.from_account_name("alice").to_message()
        b = MachineID.from_account_name("bob").to_message()
        assert a != b
        assert len(a) == len(b)

    def test_str(self):
        assert str(MachineID.from_account_name("accountname")) == (
            "BB3.6BB2445F8825BFED65E64392F0A4D549FFF7D3E1"
            ":FF2.57AD645E54976AFF3B3662E9CB335D0A24AC7D08"
            ":3B3.C1884025D23FB1A0DDBF125B5D9B8C0812F83390"
        )


class TestRandom:
    def test_layout(self):
        assert_message_layout(MachineID.random().to_message())

    def test_differs_between_calls(self):
        assert MachineID.random().to_message() != MachineID.random().to_message()

    def test_seeded_source(self):
        a = MachineID.random(random.Random(7).randbytes)
        b = MachineID.random(random.Random(7).randbytes)
        assert a == b

    def test_source_failure(self):
        def broken(n):
            raise OSError("no entropy")

        with pytest.raises(RandomSourceUnavailable):
            MachineID.random(broken)


class TestCustomFormat:
    def test_matches_account_name(self):
        machine_id = MachineID.custom_format(
            "SteamUser Hash BB3 accountname",
            "SteamUser Hash FF2 accountname",
            "SteamUser Hash 3B3 accountname",
        )
        assert machine_id == MachineID.from_account_name("accountname")


class TestMachineID:
    def test_to_message_repeatable(self):
        machine_id = MachineID.random()
        assert machine_id.to_message() == machine_id.to_message()

    def test_slots_order(self):
        labels = [label for label, _ in MachineID.from_account_name("x").slots()]
        assert labels == ["BB3", "FF2", "3B3"]

    def test_immutable(self):
        machine_id = MachineID.from_account_name("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            machine_id.value_bb3 = b"\x00" * 20

    def test_rejects_empty_slot(self):
        with pytest.raises(ValueError):
            MachineID(b"", b"\x01", b"\x02")

    def test_rejects_non_bytes(self):
        with pytest.raises(TypeError):
            MachineID("abc", b"\x01", b"\x02")
