import enum

import pytest

from tartine.flags import Flags


class Notify(enum.Enum):
    NONE = 0
    READ = 1
    WRITE = 2
    HANGUP = 4
    SHUTDOWN = 8


class NoZero(enum.Enum):
    A = 1
    B = 2


def test_default_is_empty():
    flags = Flags(Notify)
    assert int(flags) == 0
    assert not flags.has_flag(Notify.READ)
    assert flags == Notify.NONE


def test_init_from_member():
    flags = Flags(Notify, Notify.WRITE)
    assert flags.has_flag(Notify.WRITE)
    assert not flags.has_flag(Notify.READ)
    assert int(flags) == Notify.WRITE.value


def test_or_and_xor():
    combined = Flags(Notify, Notify.READ) | Notify.WRITE
    assert combined.has_flag(Notify.READ)
    assert combined.has_flag(Notify.WRITE)
    assert (combined & Notify.READ) == Notify.READ
    assert (combined ^ Notify.READ) == Notify.WRITE
    assert (combined & Flags(Notify, Notify.HANGUP)) == Notify.NONE


def test_operators_do_not_mutate():
    base = Flags(Notify, Notify.READ)
    _ = base | Notify.HANGUP
    assert base == Notify.READ


def test_set_and_toggle_mutate():
    flags = Flags(Notify)
    assert flags.set_flag(Notify.HANGUP) is flags
    assert flags.has_flag(Notify.HANGUP)
    flags.toggle_flag(Notify.HANGUP)
    assert not flags.has_flag(Notify.HANGUP)
    flags.toggle_flag(Notify.SHUTDOWN)
    assert flags == Notify.SHUTDOWN


def test_none_flag_is_never_set():
    flags = Flags(Notify, Notify.READ) | Notify.WRITE
    assert not flags.has_flag(Notify.NONE)


def test_bit_string():
    flags = Flags(Notify, Notify.READ) | Notify.WRITE
    assert flags.bit_string(8) == "00000011"


def test_bit_string_invariants():
    flags = Flags(Notify, Notify.SHUTDOWN) | Notify.READ
    text = flags.bit_string()
    assert len(text) % 8 == 0
    assert int(text, 2) == int(flags)
    assert int(flags.bit_string(16), 2) == int(flags)


def test_bit_string_rejects_bad_width():
    with pytest.raises(ValueError):
        Flags(Notify).bit_string(0)


def test_requires_zero_member():
    with pytest.raises(TypeError):
        Flags(NoZero)


def test_requires_enum():
    with pytest.raises(TypeError):
        Flags(int)


def test_mixing_enumerations_is_rejected():
    with pytest.raises(TypeError):
        Flags(Notify).set_flag(NoZero.A)
    with pytest.raises(TypeError):
        Flags(Notify) | NoZero.A


def test_equality_between_flags():
    a = Flags(Notify, Notify.READ) | Notify.WRITE
    b = Flags(Notify, Notify.WRITE) | Notify.READ
    assert a == b