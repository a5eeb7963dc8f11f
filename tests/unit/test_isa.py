import pytest
from objdump_att.isa import Opcode, UnknownOpcode, MNEMONICS, opcode_of

@pytest.mark.parametrize("m, op", [
    ("movq", Opcode.MOVQ),
    ("mov", Opcode.MOV),
    ("callq", Opcode.CALLQ),
    ("retq", Opcode.RETQ),
    ("jne", Opcode.JNE),
    ("cmovaeq", Opcode.CMOVAEQ),
    ("pxor", Opcode.PXOR),
    ("ud2", Opcode.UD2),
    ("addr32", Opcode.ADDR32),
    ("lock", Opcode.LOCK),
    ("fnsave", Opcode.FNSAVE),
    ("vzeroupper", Opcode.VZEROUPPER),
])
def test_known_mnemonics(m, op):
    assert opcode_of(m) is op
    assert op.value == m

def test_every_table_entry_resolves_to_itself():
    for m in MNEMONICS:
        op = opcode_of(m)
        assert not isinstance(op, UnknownOpcode)
        assert op.value == m

def test_table_is_large_and_grouped():
    assert len(MNEMONICS) > 300
    assert len(Opcode) == len(MNEMONICS)
    assert MNEMONICS["jmpq"] == "flow"
    assert MNEMONICS["lock"] == "prefix"

@pytest.mark.parametrize("m", ["MOVQ", "Movq", "movqq", "", "bogus", " movq", "<main>"])
def test_unknown_is_verbatim_and_not_an_error(m):
    assert opcode_of(m) == UnknownOpcode(m)
    assert m not in MNEMONICS

def test_suffix_forms_are_distinct_keys():
    assert opcode_of("movq") is not opcode_of("mov")
    assert opcode_of("addl") is Opcode.ADDL
    assert opcode_of("sete") is Opcode.SETE
