import pytest

from lantern.opcode import OpCode


def test_from_byte_bounds():
    assert OpCode.from_byte(0) is OpCode.Nop
    assert OpCode.from_byte(82) is OpCode.IDivK


@pytest.mark.parametrize("byte", [83, 100, 255])
def test_from_byte_unknown(byte):
    assert OpCode.from_byte(byte) is None


def test_from_byte_round_trips_every_value():
    assert [int(OpCode.from_byte(b)) for b in range(83)] == list(range(83))


@pytest.mark.parametrize(
    "byte, expected",
    [(12, OpCode.GetImport), (22, OpCode.Return), (80, OpCode.JumpXEqKS)],
)
def test_documented_discriminants(byte, expected):
    assert OpCode.from_byte(byte) is expected


@pytest.mark.parametrize(
    "op",
    [OpCode.GetGlobal, OpCode.NameCall, OpCode.SetList, OpCode.LoadKX, OpCode.JumpXEqKNil],
)
def test_has_aux_true(op):
    assert op.has_aux() is True


@pytest.mark.parametrize(
    "op", [OpCode.Nop, OpCode.Add, OpCode.Call, OpCode.Return, OpCode.FastCall1]
)
def test_has_aux_false(op):
    assert op.has_aux() is False


def test_number_of_aux_opcodes():
    decoded = [OpCode.from_byte(b) for b in range(83)]
    assert sum(op.has_aux() for op in decoded) == 23